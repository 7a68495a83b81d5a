"""
Tree-walking evaluator for DEC programs.

Each block runs in a fresh runtime scope chained to the scope it was
entered from, so evaluating the same tree twice never sees values left
behind by an earlier run. A return statement ends the whole program: once
it fires, every enclosing block stops and its value is the result.

Arithmetic follows the language's integer-first rules:
- '+', '-', '*' and '%' truncate both operands to integers
- '/' divides as floats
- '//' and '%' truncate toward zero, the remainder taking the sign of the dividend
- '^' raises the integer base to the integer exponent and yields a float
"""

import logging
import math
from typing import Dict, Optional, Union

from ..analyzer.symbol_table import SymbolTable
from ..parser.ast_nodes import (
    ASTVisitor, ASTNode, BinaryOperator, LiteralNode, VariableNode,
    PlusNode, MinusNode, TimesNode, FloatDivNode, IntDivNode, ModulusNode,
    ExponentiationNode, AssignmentStmt, ReturnStmt, BlockStmt
)
from .errors import (
    UnboundVariableError, DivisionByZeroError, create_empty_block_error, create_overflow_error,
    create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)

Value = Union[int, float]


class Evaluator(ASTVisitor[SymbolTable, Value]):
    """Visitor whose context is the current runtime scope and whose result is a number."""

    def __init__(self):
        self.returning = False

    def evaluate(self, ast: ASTNode, initial_bindings: Optional[Dict[str, Value]] = None) -> Value:
        """
        Evaluate a program (or a lone expression) to a number.

        Args:
            ast: Root of the tree to evaluate
            initial_bindings: Values visible to the program as if assigned in
                an enclosing scope

        Raises:
            EvaluationError: On the first runtime failure
        """
        self.returning = False
        global_scope = SymbolTable()
        for name, value in (initial_bindings or {}).items():
            global_scope.define(name, value)

        try:
            result = ast.accept(self, global_scope)
        except RecursionError:
            raise create_nesting_too_deep_error(ast.location) from None
        logger.debug("Program result: %r", result)
        return result

    def visit_literal(self, node: LiteralNode, scope: SymbolTable) -> Value:
        return node.value

    def visit_variable(self, node: VariableNode, scope: SymbolTable) -> Value:
        value = scope.get(node.name)
        if value is None:
            raise UnboundVariableError(node.name, node.location)
        return value

    def _operands(self, node: BinaryOperator, scope: SymbolTable):
        return node.left.accept(self, scope), node.right.accept(self, scope)

    def _as_int(self, value: Value, node: BinaryOperator) -> int:
        try:
            return int(value)
        except (OverflowError, ValueError):
            raise create_overflow_error(node.symbol, node.location) from None

    def _int_operands(self, node: BinaryOperator, scope: SymbolTable):
        left, right = self._operands(node, scope)
        return self._as_int(left, node), self._as_int(right, node)

    def visit_plus(self, node: PlusNode, scope: SymbolTable) -> Value:
        left, right = self._int_operands(node, scope)
        return left + right

    def visit_minus(self, node: MinusNode, scope: SymbolTable) -> Value:
        left, right = self._int_operands(node, scope)
        return left - right

    def visit_times(self, node: TimesNode, scope: SymbolTable) -> Value:
        left, right = self._int_operands(node, scope)
        return left * right

    def visit_float_div(self, node: FloatDivNode, scope: SymbolTable) -> Value:
        left, right = self._operands(node, scope)
        if right == 0:
            raise DivisionByZeroError(node.symbol, node.location)
        try:
            return float(left) / float(right)
        except OverflowError:
            raise create_overflow_error(node.symbol, node.location) from None

    def visit_int_div(self, node: IntDivNode, scope: SymbolTable) -> Value:
        left, right = self._int_operands(node, scope)
        if right == 0:
            raise DivisionByZeroError(node.symbol, node.location)
        return truncated_divmod(left, right)[0]

    def visit_modulus(self, node: ModulusNode, scope: SymbolTable) -> Value:
        left, right = self._int_operands(node, scope)
        if right == 0:
            raise DivisionByZeroError(node.symbol, node.location)
        return truncated_divmod(left, right)[1]

    def visit_exponentiation(self, node: ExponentiationNode, scope: SymbolTable) -> Value:
        base, exponent = self._int_operands(node, scope)
        if base == 0 and exponent < 0:
            raise DivisionByZeroError(node.symbol, node.location)
        try:
            return math.pow(base, exponent)
        except OverflowError:
            raise create_overflow_error(node.symbol, node.location) from None

    def visit_assignment(self, stmt: AssignmentStmt, scope: SymbolTable) -> Value:
        value = stmt.expression.accept(self, scope)
        scope.define(stmt.variable.name, value)
        return value

    def visit_return(self, stmt: ReturnStmt, scope: SymbolTable) -> Value:
        value = stmt.expression.accept(self, scope)
        self.returning = True
        logger.debug("Return %r at %s", value, stmt.location)
        return value

    def visit_block(self, stmt: BlockStmt, scope: SymbolTable) -> Value:
        if not stmt.statements:
            raise create_empty_block_error(stmt.location)

        block_scope = scope.new_scope()
        logger.debug("Enter block at %s (depth %d)", stmt.location, block_scope.depth)

        result = None
        for child in stmt.statements:
            result = child.accept(self, block_scope)
            if self.returning:
                break

        logger.debug("Leave block at %s: %s", stmt.location, block_scope)
        return result


def truncated_divmod(dividend: int, divisor: int):
    """Quotient truncated toward zero and the remainder with the dividend's sign."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - divisor * quotient


def evaluate(ast: ASTNode, initial_bindings: Optional[Dict[str, Value]] = None) -> Value:
    """
    Evaluate a DEC program.

    Raises:
        EvaluationError: On the first runtime failure
    """
    return Evaluator().evaluate(ast, initial_bindings)
