"""
Name analysis error handling for DEC.

Reports uses of variables that are not bound at the point of use, with
the location of the offending reference.
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic


class NameAnalysisError(Exception):
    """
    Exception raised when name analysis finds an ill-formed program.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
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

    def __str__(self) -> str:
        return str(self.diagnostic)


class UndeclaredVariableError(NameAnalysisError):
    """A variable is read before any assignment to it is in scope."""

    def __init__(
        self,
        name: str,
        location: Optional[SourceLocation] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(
            message=f"Undeclared variable: '{name}'",
            location=location,
            code="N001",
            help_text=help_text or f"'{name}' is not assigned before this use in the current or an enclosing block.",
            suggestions=suggestions
        )
        self.name = name


# Name analysis error codes for categorization
NAME_ERROR_CODES = {
    "N001": "Undeclared variable",
    "N002": "Nesting too deep",
}


def create_undeclared_variable_error(
    name: str,
    location: Optional[SourceLocation],
    similar_names: Optional[List[str]] = None,
    assigned_later: bool = False
) -> UndeclaredVariableError:
    """Create an undeclared variable error."""
    suggestions = []
    if similar_names:
        suggestions.extend([f"Did you mean '{similar}'?" for similar in similar_names[:3]])

    suggestions.append(f"Assign '{name}' before using it")

    if assigned_later:
        help_text = (f"'{name}' is assigned later in this block, but a variable "
                     f"can only be read after its assignment.")
    else:
        help_text = None

    return UndeclaredVariableError(name, location, help_text=help_text, suggestions=suggestions)


def create_nesting_too_deep_error(location: Optional[SourceLocation]) -> NameAnalysisError:
    """Create an error for a tree nested beyond the analyzer's recursion limit."""
    return NameAnalysisError(
        message="Nesting too deep to analyze",
        location=location,
        code="N002",
        help_text="The program nests blocks or expressions more deeply than name analysis can follow."
    )
