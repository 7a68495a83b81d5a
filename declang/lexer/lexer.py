"""
DEC Lexer - turns source text into the token stream the parser consumes.

Whitespace (including newlines) only separates tokens; the statement
structure comes entirely from the grammar. '#' starts a comment that runs
to the end of the line.
"""

import math
import re
from typing import List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, OPERATORS, OPERATOR_CHARS,
    OPERAND_EXPECTED_AFTER
)
from .errors import LexerError, create_invalid_character_error, create_invalid_number_error

DIGITS = "0123456789"


class Lexer:
    """
    DEC lexical analyzer.

    Converts source code text into a list of tokens terminated by EOF.
    Unlike a recovering lexer, the first invalid character aborts tokenizing.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""
        self.float_pattern = re.compile(
            r'-?[0-9]+\.[0-9]*(?:[eE][+-]?[0-9]+)?|'
            r'-?[0-9]+[eE][+-]?[0-9]+'
        )
        self.integer_pattern = re.compile(r'-?[0-9]+')
        self.identifier_pattern = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')
        self.whitespace_pattern = re.compile(r'\s+')
        self.comment_pattern = re.compile(r'#[^\n]*')

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including the EOF token

        Raises:
            LexerError: On the first character that cannot start a token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []

        while True:
            self._skip_whitespace_and_comments()
            if self.pos >= len(self.source):
                break
            self.tokens.append(self._next_token())

        self.tokens.append(Token(TokenType.EOF, "", None, self._location()))
        return self.tokens

    def _next_token(self) -> Token:
        """Get the next token from the source."""
        location = self._location()
        current_char = self.source[self.pos]

        if current_char in DIGITS or (current_char == '-' and self._negative_literal_allowed()):
            return self._tokenize_number(location)

        if self.identifier_pattern.match(current_char):
            return self._tokenize_identifier_or_keyword(location)

        # Operators and punctuation (longest match first)
        for op_len in (2, 1):
            potential_op = self.source[self.pos:self.pos + op_len]
            if len(potential_op) == op_len and potential_op in OPERATORS:
                self._advance_by(op_len)
                return Token(OPERATORS[potential_op], potential_op, None, location)

        if current_char in OPERATOR_CHARS:
            start = self.pos
            while self.pos < len(self.source) and self.source[self.pos] in OPERATOR_CHARS:
                self._advance()
            return Token(TokenType.UNKNOWN, self.source[start:self.pos], None, location)

        raise create_invalid_character_error(current_char, location)

    def _negative_literal_allowed(self) -> bool:
        """A '-' glued to a digit is a sign only where an operand is expected."""
        if self._peek() not in DIGITS:
            return False
        if not self.tokens:
            return True
        return self.tokens[-1].type in OPERAND_EXPECTED_AFTER

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize an integer or float literal."""
        remaining = self.source[self.pos:]

        match = self.float_pattern.match(remaining)
        if match:
            token_type = TokenType.FLOAT
        else:
            match = self.integer_pattern.match(remaining)
            token_type = TokenType.INTEGER

        lexeme = match.group(0)
        self._advance_by(len(lexeme))

        if self.pos < len(self.source) and self.identifier_pattern.match(self.source[self.pos]):
            raise create_invalid_number_error(
                lexeme + self.source[self.pos],
                location,
                "A numeric literal cannot run directly into a letter or underscore."
            )

        try:
            value = float(lexeme) if token_type == TokenType.FLOAT else int(lexeme)
        except ValueError:
            # int() refuses digit strings longer than sys.get_int_max_str_digits()
            raise create_invalid_number_error(
                lexeme, location, "The integer literal has too many digits."
            ) from None

        if token_type == TokenType.FLOAT and math.isinf(value):
            raise create_invalid_number_error(
                lexeme, location, "The float literal is too large to represent."
            )
        return Token(token_type, lexeme, value, location)

    def _tokenize_identifier_or_keyword(self, location: SourceLocation) -> Token:
        """Tokenize an identifier or keyword."""
        match = self.identifier_pattern.match(self.source, self.pos)
        lexeme = match.group(0)
        self._advance_by(len(lexeme))

        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        value = lexeme if token_type == TokenType.IDENTIFIER else None
        return Token(token_type, lexeme, value, location)

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and comments."""
        while self.pos < len(self.source):
            match = (self.whitespace_pattern.match(self.source, self.pos)
                     or self.comment_pattern.match(self.source, self.pos))
            if not match:
                return
            self._advance_by(len(match.group(0)))

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self) -> str:
        """Advance position by one character."""
        char = self.source[self.pos]
        self.pos += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            if self.pos < len(self.source):
                self._advance()

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str, encoding: Optional[str] = 'utf-8') -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding=encoding) as f:
        source = f.read()

    return tokenize_string(source, filepath)
