"""
Error handling for the DEC parser.

Syntax errors carry a Diagnostic with the source location of the offending
token. The parser does not recover: the first error aborts the parse.
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType, SourceLocation, OPERATORS
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P004": "Unclosed delimiter",
    "P005": "Invalid expression",
    "P009": "Invalid operator usage",
    "P010": "Unexpected end of input",
    "P013": "Trailing input after program",
    "P014": "Nesting too deep",
}

_TOKEN_SPELLING = {token_type: symbol for symbol, token_type in OPERATORS.items()}


def describe_expected(expected: Union[TokenType, str]) -> str:
    """Spell an expected token the way a user would write it."""
    if isinstance(expected, str):
        return expected
    if expected in _TOKEN_SPELLING:
        return f"'{_TOKEN_SPELLING[expected]}'"
    if expected == TokenType.IDENTIFIER:
        return "identifier"
    if expected == TokenType.RETURN:
        return "'return'"
    if expected == TokenType.EOF:
        return "end of input"
    return expected.name


def suggest_missing_token(expected: Union[TokenType, str]) -> List[str]:
    """Suggest what token might be missing."""
    token_suggestions = {
        TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
        TokenType.RIGHT_BRACE: ["Add a closing brace '}'"],
        TokenType.LEFT_BRACE: ["A DEC program is a single block: wrap it in '{' ... '}'"],
        TokenType.ASSIGN: ["Use ':=' to assign a value to a variable"],
    }
    return list(token_suggestions.get(expected, []))


def suggest_operator_corrections(invalid_op: str) -> List[str]:
    """Suggest corrections for operators DEC does not have."""
    corrections = {
        "=": ["Use ':=' for assignment"],
        "**": ["Use '^' for exponentiation"],
        "==": ["DEC has no comparison operators"],
    }
    return corrections.get(invalid_op, ["Valid operators are + - * / // % ^"])


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Union[TokenType, str], found: Token) -> ParseError:
    """Create an error for an unexpected token."""
    expected_str = describe_expected(expected)
    found_str = found.describe()

    return ParseError(
        message=f"Expected {expected_str}, found {found_str}",
        location=found.location,
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead.",
        suggestions=suggest_missing_token(expected)
    )


def create_unclosed_delimiter_error(delimiter: str, open_location: SourceLocation,
                                    found: Token) -> ParseError:
    """Create an error for an unclosed delimiter."""
    closing_delimiters = {
        "(": ")",
        "{": "}",
    }

    closing = closing_delimiters.get(delimiter, delimiter)

    return ParseError(
        message=f"Unclosed delimiter '{delimiter}': expected '{closing}', found {found.describe()}",
        location=found.location,
        token=found,
        code="P004",
        help_text=f"The opening '{delimiter}' at {open_location} was never closed.",
        suggestions=[f"Add a closing '{closing}'", "Check for missing delimiters"]
    )


def create_invalid_expression_error(reason: str, found: Token) -> ParseError:
    """Create an error for an invalid expression."""
    return ParseError(
        message=f"Expected expression, found {found.describe()}",
        location=found.location,
        token=found,
        code="P005",
        help_text=reason,
        suggestions=[
            "An expression is a number, a variable, or '(' expression operator expression ')'",
            "Wrap every binary operation in parentheses"
        ]
    )


def create_invalid_operator_error(found: Token, reason: str) -> ParseError:
    """Create an error for an unknown or misplaced operator."""
    return ParseError(
        message=f"Invalid operator usage: {found.describe()}",
        location=found.location,
        token=found,
        code="P009",
        help_text=reason,
        suggestions=suggest_operator_corrections(found.lexeme)
    )


def create_unexpected_eof_error(expected: Union[TokenType, str], found: Token) -> ParseError:
    """Create an error for unexpected end of input."""
    expected_str = describe_expected(expected)
    return ParseError(
        message=f"Unexpected end of input, expected {expected_str}",
        location=found.location,
        token=found,
        code="P010",
        help_text=f"The parser reached the end of the input while expecting {expected_str}.",
        suggestions=[f"Add the missing {expected_str}", "Check for incomplete statements"]
    )


def create_trailing_input_error(found: Token) -> ParseError:
    """Create an error for tokens left over after the program block."""
    return ParseError(
        message=f"Expected end of input, found {found.describe()}",
        location=found.location,
        token=found,
        code="P013",
        help_text="A DEC program is exactly one block; nothing may follow its closing '}'.",
        suggestions=["Move the trailing statements inside the program block"]
    )


def create_nesting_too_deep_error(found: Token) -> ParseError:
    """Create an error for blocks or expressions nested beyond the recursion limit."""
    return ParseError(
        message=f"Nesting too deep at {found.describe()}",
        location=found.location,
        token=found,
        code="P014",
        help_text="Blocks and parenthesized expressions are nested more deeply than the parser can follow.",
        suggestions=["Split deeply nested expressions into assignments to intermediate variables"]
    )


class UnparseError(Exception):
    """
    Exception raised when a tree cannot be rendered back to source text.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


UNPARSE_ERROR_CODES = {
    "U001": "Nesting too deep",
}
