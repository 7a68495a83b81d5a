"""
Token definitions for the DEC lexer.

This module defines the token types understood by the DEC front-end:
- Numeric literals (integers and floats)
- Identifiers and the `return` keyword
- Arithmetic operators and the `:=` assignment operator
- Grouping punctuation (parentheses and braces)

Each token type belongs to one of the lexeme categories the parser relies on
(literal-int, literal-float, identifier, operator, punctuation, keyword).
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenCategory(Enum):
    """Lexeme categories of the token stream."""
    LITERAL_INT = "literal-int"
    LITERAL_FLOAT = "literal-float"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    KEYWORD = "keyword"
    UNKNOWN = "unknown"
    EOF = "eof"


class TokenType(Enum):
    """
    Enumeration of all token types in DEC.

    Organized by category for clarity.
    """

    # Special tokens
    EOF = auto()                    # End of input
    UNKNOWN = auto()                # Operator characters that form no known operator

    # Literals
    INTEGER = auto()                # 42
    FLOAT = auto()                  # 3.14, 1e-3

    # Identifiers and keywords
    IDENTIFIER = auto()             # x, total_1
    RETURN = auto()                 # return

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /  (float division)
    FLOOR_DIVIDE = auto()           # // (integer division)
    MODULO = auto()                 # %
    POWER = auto()                  # ^

    # Assignment
    ASSIGN = auto()                 # :=

    # Punctuation
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and diagnostics.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the DEC language.

    Contains the token type, lexeme (raw text), semantic value
    and source location for error reporting.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Parsed value (int or float for numeric literals)
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def category(self) -> TokenCategory:
        """The lexeme category of this token."""
        return TOKEN_CATEGORIES[self.type]

    @property
    def is_literal(self) -> bool:
        """Check if this token is a numeric literal."""
        return self.type in {TokenType.INTEGER, TokenType.FLOAT}

    @property
    def is_keyword(self) -> bool:
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        return self.category == TokenCategory.OPERATOR

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    def describe(self) -> str:
        """Human readable form used in diagnostics."""
        if self.type == TokenType.EOF:
            return "end of input"
        return f"'{self.lexeme}'"


# Lookup tables used by the lexer and parser

KEYWORDS = {
    "return": TokenType.RETURN,
}

# Binary operators, keyed by their textual symbol
BINARY_OPERATOR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "//": TokenType.FLOOR_DIVIDE,
    "%": TokenType.MODULO,
    "^": TokenType.POWER,
}

OPERATORS = {
    **BINARY_OPERATOR_TOKENS,
    ":=": TokenType.ASSIGN,

    # Punctuation
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
}

# Characters that may start or continue an operator lexeme
OPERATOR_CHARS = set("+-*/%^:=<>!&|~.,;?@$")

TOKEN_CATEGORIES = {
    TokenType.EOF: TokenCategory.EOF,
    TokenType.UNKNOWN: TokenCategory.UNKNOWN,
    TokenType.INTEGER: TokenCategory.LITERAL_INT,
    TokenType.FLOAT: TokenCategory.LITERAL_FLOAT,
    TokenType.IDENTIFIER: TokenCategory.IDENTIFIER,
    TokenType.RETURN: TokenCategory.KEYWORD,
    TokenType.PLUS: TokenCategory.OPERATOR,
    TokenType.MINUS: TokenCategory.OPERATOR,
    TokenType.MULTIPLY: TokenCategory.OPERATOR,
    TokenType.DIVIDE: TokenCategory.OPERATOR,
    TokenType.FLOOR_DIVIDE: TokenCategory.OPERATOR,
    TokenType.MODULO: TokenCategory.OPERATOR,
    TokenType.POWER: TokenCategory.OPERATOR,
    TokenType.ASSIGN: TokenCategory.OPERATOR,
    TokenType.LEFT_PAREN: TokenCategory.PUNCTUATION,
    TokenType.RIGHT_PAREN: TokenCategory.PUNCTUATION,
    TokenType.LEFT_BRACE: TokenCategory.PUNCTUATION,
    TokenType.RIGHT_BRACE: TokenCategory.PUNCTUATION,
}

# Tokens after which a '-' directly followed by a digit starts a negative literal
OPERAND_EXPECTED_AFTER = {
    TokenType.LEFT_PAREN,
    TokenType.LEFT_BRACE,
    TokenType.RETURN,
    TokenType.ASSIGN,
    *BINARY_OPERATOR_TOKENS.values(),
}
