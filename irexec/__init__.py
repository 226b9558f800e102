"""Lexer, input buffer and linked intermediate-representation interpreter for a small imperative language."""

__version__ = "0.1.0"

__all__ = ["inputbuf", "lexer", "execute", "demo"]