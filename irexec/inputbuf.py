"""Character input with push-back over a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


class InputBuffer:
    """Reads characters one at a time from a stream and lets them be pushed back.

    End of input is reported only after a read has found the stream
    exhausted and no pushed-back characters remain.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = sys.stdin if stream is None else stream
        self._pushed: list[str] = []
        self._eof = False

    def end_of_input(self) -> bool:
        """True once the stream is exhausted and nothing has been pushed back."""
        return not self._pushed and self._eof

    def get_char(self) -> str:
        """Return the next character, or an empty string at end of input."""
        if self._pushed:
            return self._pushed.pop()
        if self._eof:
            return ""
        c = self._stream.read(1)
        if not c:
            self._eof = True
        return c

    def unget_char(self, c: str) -> str:
        """Push a character back so that it is read next; return it."""
        if c:
            self._pushed.append(c)
        return c

    def unget_string(self, s: str) -> str:
        """Push a string back so that its characters are read next in order."""
        self._pushed.extend(reversed(s))
        return s