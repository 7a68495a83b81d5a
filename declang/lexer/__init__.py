"""
DEC Lexer Package

Produces the ordered token stream consumed by the parser: numeric literals,
identifiers, the `return` keyword, arithmetic operators, `:=` and grouping
punctuation, each with its source location.
"""

from .tokens import Token, TokenType, TokenCategory, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import LexerError, Diagnostic

__all__ = [
    "Lexer",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "TokenCategory",
    "SourceLocation",
    "LexerError",
    "Diagnostic",
]
