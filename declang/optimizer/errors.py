"""
Error handling for control flow analysis.
"""

from typing import Optional

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic


class ControlFlowError(Exception):
    """
    Exception raised when a control flow graph cannot be built for a tree.

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


CFG_ERROR_CODES = {
    "C001": "Nesting too deep",
}


def create_nesting_too_deep_error(location: Optional[SourceLocation]) -> ControlFlowError:
    """Create an error for blocks nested beyond the generator's recursion limit."""
    return ControlFlowError(
        message="Nesting too deep to build a control flow graph",
        location=location,
        code="C001",
        help_text="The program nests blocks more deeply than the generator can follow."
    )
