"""
DEC Parser Package

Recursive descent parser for DEC programs, the AST node model with its
visitor protocol, the pluggable node builders and the unparser.

Key Features:
- Fully parenthesized expressions, no precedence climbing
- AST nodes with source locations and double-dispatch visitors
- Builders that build, skip, log, or refuse node construction
- Canonical unparsing that round-trips through the parser
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, ExpressionNode, Statement,
    LiteralNode, VariableNode, BinaryOperator,
    PlusNode, MinusNode, TimesNode, FloatDivNode, IntDivNode, ModulusNode, ExponentiationNode,
    AssignmentStmt, ReturnStmt, BlockStmt,
    BINARY_OPERATORS, structurally_equal,
)
from .builders import ASTBuilder, NullBuilder, FailFastBuilder, DebugBuilder, BuilderNotImplementedError
from .parser import Parser, parse, parse_string, parse_file
from .errors import ParseError, PARSER_ERROR_CODES, UnparseError, UNPARSE_ERROR_CODES
from .unparser import Unparser, unparse, INDENT

__all__ = [
    # Core parser
    "Parser", "parse", "parse_string", "parse_file",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "ExpressionNode", "Statement",
    "LiteralNode", "VariableNode", "BinaryOperator",
    "PlusNode", "MinusNode", "TimesNode", "FloatDivNode", "IntDivNode",
    "ModulusNode", "ExponentiationNode",
    "AssignmentStmt", "ReturnStmt", "BlockStmt",
    "BINARY_OPERATORS", "structurally_equal",

    # Builders
    "ASTBuilder", "NullBuilder", "FailFastBuilder", "DebugBuilder",
    "BuilderNotImplementedError",

    # Unparsing
    "Unparser", "unparse", "INDENT",

    # Error handling
    "ParseError", "PARSER_ERROR_CODES", "UnparseError", "UNPARSE_ERROR_CODES",
]
