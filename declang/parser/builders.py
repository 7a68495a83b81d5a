"""
AST builders used by the DEC parser.

The parser never instantiates nodes itself; it calls a builder for every
construct it recognizes. Swapping the builder changes what a parse
produces without touching the grammar:

- ASTBuilder constructs the real tree (the default)
- NullBuilder produces nothing, for grammar-only checks
- FailFastBuilder raises on every call, to assert that no node is built
- DebugBuilder logs each creation and then builds the real node
"""

import logging
from typing import List, Optional, Dict, Callable

from ..lexer.tokens import SourceLocation
from ..analyzer.symbol_table import SymbolTable
from .ast_nodes import (
    Value, ExpressionNode, Statement, LiteralNode, VariableNode, BinaryOperator,
    PlusNode, MinusNode, TimesNode, FloatDivNode, IntDivNode, ModulusNode,
    ExponentiationNode, AssignmentStmt, ReturnStmt, BlockStmt
)

logger = logging.getLogger(__name__)


class BuilderNotImplementedError(NotImplementedError):
    """Raised by FailFastBuilder for every creation request."""

    def __init__(self, operation: str):
        super().__init__(f"{operation} is not implemented by this builder")
        self.operation = operation


class ASTBuilder:
    """Production builder: constructs real AST nodes."""

    def create_literal_node(self, value: Value,
                            location: Optional[SourceLocation] = None) -> LiteralNode:
        return LiteralNode(value, location)

    def create_variable_node(self, name: str,
                             location: Optional[SourceLocation] = None) -> VariableNode:
        return VariableNode(name, location)

    def create_plus_node(self, left: ExpressionNode, right: ExpressionNode,
                         location: Optional[SourceLocation] = None) -> PlusNode:
        return PlusNode(left, right, location)

    def create_minus_node(self, left: ExpressionNode, right: ExpressionNode,
                          location: Optional[SourceLocation] = None) -> MinusNode:
        return MinusNode(left, right, location)

    def create_times_node(self, left: ExpressionNode, right: ExpressionNode,
                          location: Optional[SourceLocation] = None) -> TimesNode:
        return TimesNode(left, right, location)

    def create_float_div_node(self, left: ExpressionNode, right: ExpressionNode,
                              location: Optional[SourceLocation] = None) -> FloatDivNode:
        return FloatDivNode(left, right, location)

    def create_int_div_node(self, left: ExpressionNode, right: ExpressionNode,
                            location: Optional[SourceLocation] = None) -> IntDivNode:
        return IntDivNode(left, right, location)

    def create_modulus_node(self, left: ExpressionNode, right: ExpressionNode,
                            location: Optional[SourceLocation] = None) -> ModulusNode:
        return ModulusNode(left, right, location)

    def create_exponentiation_node(self, left: ExpressionNode, right: ExpressionNode,
                                   location: Optional[SourceLocation] = None) -> ExponentiationNode:
        return ExponentiationNode(left, right, location)

    def create_assignment_stmt(self, variable: VariableNode, expression: ExpressionNode,
                               location: Optional[SourceLocation] = None) -> AssignmentStmt:
        return AssignmentStmt(variable, expression, location)

    def create_return_stmt(self, expression: ExpressionNode,
                           location: Optional[SourceLocation] = None) -> ReturnStmt:
        return ReturnStmt(expression, location)

    def create_block_stmt(self, statements: List[Statement], symbol_table: SymbolTable,
                          location: Optional[SourceLocation] = None) -> BlockStmt:
        return BlockStmt(statements, symbol_table, location)

    def create_binary_operator(self, symbol: str, left: ExpressionNode, right: ExpressionNode,
                               location: Optional[SourceLocation] = None) -> BinaryOperator:
        """
        Create the binary operator node for a textual operator symbol.

        Raises:
            ValueError: If the symbol is not one of the seven DEC operators
        """
        factories: Dict[str, Callable] = {
            "+": self.create_plus_node,
            "-": self.create_minus_node,
            "*": self.create_times_node,
            "/": self.create_float_div_node,
            "//": self.create_int_div_node,
            "%": self.create_modulus_node,
            "^": self.create_exponentiation_node,
        }
        if symbol not in factories:
            raise ValueError(f"Unknown binary operator: {symbol!r}")
        return factories[symbol](left, right, location=location)


class NullBuilder(ASTBuilder):
    """Builder that constructs nothing; every creation returns None."""

    def create_literal_node(self, value, location=None):
        return None

    def create_variable_node(self, name, location=None):
        return None

    def create_plus_node(self, left, right, location=None):
        return None

    def create_minus_node(self, left, right, location=None):
        return None

    def create_times_node(self, left, right, location=None):
        return None

    def create_float_div_node(self, left, right, location=None):
        return None

    def create_int_div_node(self, left, right, location=None):
        return None

    def create_modulus_node(self, left, right, location=None):
        return None

    def create_exponentiation_node(self, left, right, location=None):
        return None

    def create_assignment_stmt(self, variable, expression, location=None):
        return None

    def create_return_stmt(self, expression, location=None):
        return None

    def create_block_stmt(self, statements, symbol_table, location=None):
        return None


class FailFastBuilder(ASTBuilder):
    """Builder that rejects every creation request."""

    def create_literal_node(self, value, location=None):
        raise BuilderNotImplementedError("create_literal_node")

    def create_variable_node(self, name, location=None):
        raise BuilderNotImplementedError("create_variable_node")

    def create_plus_node(self, left, right, location=None):
        raise BuilderNotImplementedError("create_plus_node")

    def create_minus_node(self, left, right, location=None):
        raise BuilderNotImplementedError("create_minus_node")

    def create_times_node(self, left, right, location=None):
        raise BuilderNotImplementedError("create_times_node")

    def create_float_div_node(self, left, right, location=None):
        raise BuilderNotImplementedError("create_float_div_node")

    def create_int_div_node(self, left, right, location=None):
        raise BuilderNotImplementedError("create_int_div_node")

    def create_modulus_node(self, left, right, location=None):
        raise BuilderNotImplementedError("create_modulus_node")

    def create_exponentiation_node(self, left, right, location=None):
        raise BuilderNotImplementedError("create_exponentiation_node")

    def create_assignment_stmt(self, variable, expression, location=None):
        raise BuilderNotImplementedError("create_assignment_stmt")

    def create_return_stmt(self, expression, location=None):
        raise BuilderNotImplementedError("create_return_stmt")

    def create_block_stmt(self, statements, symbol_table, location=None):
        raise BuilderNotImplementedError("create_block_stmt")


class DebugBuilder(ASTBuilder):
    """Builder that logs every creation at DEBUG level before building the node."""

    def create_literal_node(self, value, location=None):
        logger.debug("create_literal_node(%r) at %s", value, location)
        return super().create_literal_node(value, location=location)

    def create_variable_node(self, name, location=None):
        logger.debug("create_variable_node(%r) at %s", name, location)
        return super().create_variable_node(name, location=location)

    def create_plus_node(self, left, right, location=None):
        logger.debug("create_plus_node(%r, %r)", left, right)
        return super().create_plus_node(left, right, location=location)

    def create_minus_node(self, left, right, location=None):
        logger.debug("create_minus_node(%r, %r)", left, right)
        return super().create_minus_node(left, right, location=location)

    def create_times_node(self, left, right, location=None):
        logger.debug("create_times_node(%r, %r)", left, right)
        return super().create_times_node(left, right, location=location)

    def create_float_div_node(self, left, right, location=None):
        logger.debug("create_float_div_node(%r, %r)", left, right)
        return super().create_float_div_node(left, right, location=location)

    def create_int_div_node(self, left, right, location=None):
        logger.debug("create_int_div_node(%r, %r)", left, right)
        return super().create_int_div_node(left, right, location=location)

    def create_modulus_node(self, left, right, location=None):
        logger.debug("create_modulus_node(%r, %r)", left, right)
        return super().create_modulus_node(left, right, location=location)

    def create_exponentiation_node(self, left, right, location=None):
        logger.debug("create_exponentiation_node(%r, %r)", left, right)
        return super().create_exponentiation_node(left, right, location=location)

    def create_assignment_stmt(self, variable, expression, location=None):
        logger.debug("create_assignment_stmt(%r, %r)", variable, expression)
        return super().create_assignment_stmt(variable, expression, location=location)

    def create_return_stmt(self, expression, location=None):
        logger.debug("create_return_stmt(%r)", expression)
        return super().create_return_stmt(expression, location=location)

    def create_block_stmt(self, statements, symbol_table, location=None):
        logger.debug("create_block_stmt(%d statements, declared %s)", len(statements), symbol_table)
        return super().create_block_stmt(statements, symbol_table, location=location)
