"""Tokenizer for the small intermediate-representation language."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

from irexec.inputbuf import InputBuffer


class TokenType(IntEnum):
    END_OF_FILE = 0
    VAR = 1
    FOR = 2
    IF = 3
    WHILE = 4
    SWITCH = 5
    CASE = 6
    DEFAULT = 7
    INPUT = 8
    OUTPUT = 9
    ARRAY = 10
    PLUS = 11
    MINUS = 12
    DIV = 13
    MULT = 14
    EQUAL = 15
    COLON = 16
    COMMA = 17
    SEMICOLON = 18
    LBRAC = 19
    RBRAC = 20
    LPAREN = 21
    RPAREN = 22
    LBRACE = 23
    RBRACE = 24
    NOTEQUAL = 25
    GREATER = 26
    LESS = 27
    NUM = 28
    ID = 29
    ERROR = 30


# Only the first nine keywords are recognised; "ARRAY" lexes as an identifier.
_KEYWORDS: dict[str, TokenType] = {
    "VAR": TokenType.VAR,
    "FOR": TokenType.FOR,
    "IF": TokenType.IF,
    "WHILE": TokenType.WHILE,
    "SWITCH": TokenType.SWITCH,
    "CASE": TokenType.CASE,
    "DEFAULT": TokenType.DEFAULT,
    "input": TokenType.INPUT,
    "output": TokenType.OUTPUT,
}

_SINGLE_CHAR: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.DIV,
    "*": TokenType.MULT,
    "=": TokenType.EQUAL,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "[": TokenType.LBRAC,
    "]": TokenType.RBRAC,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ">": TokenType.GREATER,
}

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_ALNUM = _DIGITS | _LETTERS
_SPACE = frozenset(" \t\n\v\f\r")


@dataclass
class Token:
    lexeme: str
    token_type: TokenType
    line_no: int

    def print(self, file: TextIO | None = None) -> None:
        """Write the token as ``{lexeme , TYPE , line}``."""
        print(f"{{{self.lexeme} , {self.token_type.name} , {self.line_no}}}", file=file)


class LexicalAnalyzer:
    """Reads every token from a stream up front and hands them out in order."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._input = InputBuffer(stream)
        self._line_no = 1
        self._index = 0
        self._tokens: list[Token] = []
        token = self._next_token()
        while token.token_type is not TokenType.END_OF_FILE:
            self._tokens.append(token)
            token = self._next_token()

    def _eof_token(self) -> Token:
        return Token("", TokenType.END_OF_FILE, self._line_no)

    def get_token(self) -> Token:
        """Consume and return the next token, or END_OF_FILE when none remain."""
        if self._index >= len(self._tokens):
            return self._eof_token()
        token = self._tokens[self._index]
        self._index += 1
        return token

    def peek(self, how_far: int) -> Token:
        """Return the token ``how_far`` positions ahead without consuming it."""
        if how_far <= 0:
            raise ValueError("peek requires a positive argument")
        peek_index = self._index + how_far - 1
        if peek_index >= len(self._tokens):
            return self._eof_token()
        return self._tokens[peek_index]

    def _read(self) -> str:
        c = self._input.get_char()
        if c == "\n":
            self._line_no += 1
        return c

    def _skip_space(self) -> bool:
        encountered = False
        c = self._read()
        while not self._input.end_of_input() and c in _SPACE:
            encountered = True
            c = self._read()
        if not self._input.end_of_input():
            self._input.unget_char(c)
        return encountered

    def _scan_number(self) -> Token:
        c = self._input.get_char()
        if c not in _DIGITS:
            if not self._input.end_of_input():
                self._input.unget_char(c)
            return Token("", TokenType.ERROR, self._line_no)
        if c == "0":
            lexeme = "0"
        else:
            chars = []
            while not self._input.end_of_input() and c in _DIGITS:
                chars.append(c)
                c = self._input.get_char()
            if not self._input.end_of_input():
                self._input.unget_char(c)
            lexeme = "".join(chars)
        return Token(lexeme, TokenType.NUM, self._line_no)

    def _scan_id_or_keyword(self) -> Token:
        c = self._input.get_char()
        if c not in _LETTERS:
            if not self._input.end_of_input():
                self._input.unget_char(c)
            return Token("", TokenType.ERROR, self._line_no)
        chars = []
        while not self._input.end_of_input() and c in _ALNUM:
            chars.append(c)
            c = self._input.get_char()
        if not self._input.end_of_input():
            self._input.unget_char(c)
        lexeme = "".join(chars)
        return Token(lexeme, _KEYWORDS.get(lexeme, TokenType.ID), self._line_no)

    def _next_token(self) -> Token:
        self._skip_space()
        line_no = self._line_no
        if self._input.end_of_input():
            return Token("", TokenType.END_OF_FILE, line_no)
        c = self._input.get_char()

        if c in _SINGLE_CHAR:
            return Token("", _SINGLE_CHAR[c], line_no)
        if c == "<":
            c = self._input.get_char()
            if c == ">":
                return Token("", TokenType.NOTEQUAL, line_no)
            if not self._input.end_of_input():
                self._input.unget_char(c)
            return Token("", TokenType.LESS, line_no)
        if c in _DIGITS:
            self._input.unget_char(c)
            return self._scan_number()
        if c in _LETTERS:
            self._input.unget_char(c)
            return self._scan_id_or_keyword()
        if self._input.end_of_input():
            return Token("", TokenType.END_OF_FILE, line_no)
        return Token("", TokenType.ERROR, line_no)