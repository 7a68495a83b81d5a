"""
DEC Analyzer Package

Scope management and static name analysis:
- Symbol tables chained through enclosing scopes
- Use-before-assignment checking over the AST
"""

from .symbol_table import SymbolTable
from .errors import NameAnalysisError, UndeclaredVariableError, NAME_ERROR_CODES
from .name_analysis import NameAnalyzer, analyze_names

__all__ = [
    "SymbolTable",
    "NameAnalyzer",
    "analyze_names",
    "NameAnalysisError",
    "UndeclaredVariableError",
    "NAME_ERROR_CODES",
]
