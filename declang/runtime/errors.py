"""
Runtime error handling for the DEC evaluator.

Evaluation stops at the first error; nothing is partially returned.
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic


class EvaluationError(Exception):
    """
    Exception raised when a DEC program fails while being evaluated.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
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

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnboundVariableError(EvaluationError):
    """A variable was read that has no value in any enclosing scope."""

    def __init__(self, name: str, location: Optional[SourceLocation] = None):
        super().__init__(
            message=f"Unbound variable: '{name}'",
            location=location,
            code="R001",
            help_text=f"'{name}' has no value in the current or any enclosing block.",
            suggestions=[f"Assign '{name}' before reading it", "Run name analysis before evaluating"]
        )
        self.name = name


class DivisionByZeroError(EvaluationError):
    """The right operand of '/', '//' or '%' was zero, or zero was raised to a negative power."""

    def __init__(self, operator: str, location: Optional[SourceLocation] = None):
        if operator == "^":
            help_text = "Raising zero to a negative power divides by zero."
        else:
            help_text = f"The right operand of '{operator}' evaluated to zero."
        super().__init__(
            message="Division by zero",
            location=location,
            code="R002",
            help_text=help_text
        )
        self.operator = operator


# Runtime error codes for categorization
RUNTIME_ERROR_CODES = {
    "R001": "Unbound variable",
    "R002": "Division by zero",
    "R003": "Empty block",
    "R004": "Numeric overflow",
    "R005": "Nesting too deep",
}


def create_empty_block_error(location: Optional[SourceLocation]) -> EvaluationError:
    """Create an error for a block that has no statement to produce a value."""
    return EvaluationError(
        message="Empty block has no value",
        location=location,
        code="R003",
        help_text="A block evaluates to its return value or to the value of its last statement.",
        suggestions=["Add a return statement to the block"]
    )


def create_overflow_error(operator: str, location: Optional[SourceLocation]) -> EvaluationError:
    """Create an error for a result too large to represent."""
    return EvaluationError(
        message=f"Numeric overflow in '{operator}'",
        location=location,
        code="R004",
        help_text="The result of this operation is too large to represent as a number."
    )


def create_nesting_too_deep_error(location: Optional[SourceLocation]) -> EvaluationError:
    """Create an error for a tree nested beyond the evaluator's recursion limit."""
    return EvaluationError(
        message="Nesting too deep to evaluate",
        location=location,
        code="R005",
        help_text="The program nests blocks or expressions more deeply than the evaluator can follow.",
        suggestions=["Split deeply nested expressions into assignments to intermediate variables"]
    )
