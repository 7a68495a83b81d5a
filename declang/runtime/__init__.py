"""
DEC Runtime Package

Tree-walking evaluation of DEC programs and the runtime error types.
"""

from .evaluator import Evaluator, evaluate, truncated_divmod
from .errors import EvaluationError, UnboundVariableError, DivisionByZeroError, RUNTIME_ERROR_CODES

__all__ = [
    "Evaluator",
    "evaluate",
    "truncated_divmod",
    "EvaluationError",
    "UnboundVariableError",
    "DivisionByZeroError",
    "RUNTIME_ERROR_CODES",
]
