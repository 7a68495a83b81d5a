"""
DEC Language Front-End

Parser, evaluator, unparser, control flow graph builder and name analyzer
for DEC, a small language of fully parenthesized arithmetic, assignments,
returns and nested blocks.

Architecture:
    declang/
    ├── lexer/           # Tokenization of DEC source text
    ├── parser/          # AST nodes, visitors, builders, parser, unparser
    ├── analyzer/        # Symbol tables and name analysis
    ├── runtime/         # Tree-walking evaluator
    └── optimizer/       # Directed graphs and control flow graphs
"""

__version__ = "0.1.0"

from .lexer import Lexer, LexerError, tokenize_string
from .parser import Parser, ParseError, UnparseError, parse, parse_string, parse_file, unparse
from .analyzer import SymbolTable, NameAnalysisError, UndeclaredVariableError, analyze_names
from .runtime import EvaluationError, UnboundVariableError, DivisionByZeroError, evaluate
from .optimizer import CFG, DiGraph, ControlFlowError, build_cfg

__all__ = [
    # Pass entry points
    "parse",
    "parse_string",
    "parse_file",
    "evaluate",
    "unparse",
    "build_cfg",
    "analyze_names",

    # Core classes
    "Lexer",
    "Parser",
    "SymbolTable",
    "CFG",
    "DiGraph",
    "tokenize_string",

    # Errors, one kind per phase
    "LexerError",
    "ParseError",
    "UnparseError",
    "EvaluationError",
    "UnboundVariableError",
    "DivisionByZeroError",
    "NameAnalysisError",
    "UndeclaredVariableError",
    "ControlFlowError",

    # Version info
    "__version__",
]
