"""
Name analysis for DEC programs.

Checks, in a single left-to-right walk, that every variable is assigned
before it is read. Each block opens a scope chained to the enclosing one;
an assignment binds its target for the rest of its block and for every
block nested after it. Names bound inside a block are gone once the block
ends.
"""

import logging
from typing import Iterable, Optional, Tuple

from ..parser.ast_nodes import (
    ASTVisitor, ASTNode, BinaryOperator, Statement, LiteralNode, VariableNode,
    PlusNode, MinusNode, TimesNode, FloatDivNode, IntDivNode, ModulusNode,
    ExponentiationNode, AssignmentStmt, ReturnStmt, BlockStmt
)
from .symbol_table import SymbolTable
from .errors import create_undeclared_variable_error, create_nesting_too_deep_error

logger = logging.getLogger(__name__)

Context = Tuple[SymbolTable, Optional[Statement]]


class NameAnalyzer(ASTVisitor[Context, bool]):
    """
    Visitor that rejects use-before-assignment.

    The context pairs the scope in effect with the statement being
    analyzed; every visit returns True or raises on the first violation.
    """

    def analyze(self, ast: ASTNode, predeclared: Iterable[str] = ()) -> bool:
        """
        Analyze a program (or any node) for undeclared variable uses.

        Args:
            ast: Root of the tree to check
            predeclared: Names treated as bound before the program starts

        Returns:
            True when every use follows an assignment

        Raises:
            UndeclaredVariableError: On the first unbound use
            NameAnalysisError: When the tree is nested too deeply to walk
        """
        global_scope = SymbolTable()
        for name in predeclared:
            global_scope.define(name)
        try:
            return ast.accept(self, (global_scope, None))
        except RecursionError:
            raise create_nesting_too_deep_error(ast.location) from None

    def visit_literal(self, node: LiteralNode, context: Context) -> bool:
        return True

    def visit_variable(self, node: VariableNode, context: Context) -> bool:
        scope, statement = context
        if scope.contains(node.name):
            return True

        block = self._enclosing_block(statement)
        assigned_later = block is not None and block.symbol_table.contains_local(node.name)
        raise create_undeclared_variable_error(
            node.name,
            node.location,
            similar_names=scope.get_similar_names(node.name),
            assigned_later=assigned_later
        )

    def _binary(self, node: BinaryOperator, context: Context) -> bool:
        return node.left.accept(self, context) and node.right.accept(self, context)

    def visit_plus(self, node: PlusNode, context: Context) -> bool:
        return self._binary(node, context)

    def visit_minus(self, node: MinusNode, context: Context) -> bool:
        return self._binary(node, context)

    def visit_times(self, node: TimesNode, context: Context) -> bool:
        return self._binary(node, context)

    def visit_float_div(self, node: FloatDivNode, context: Context) -> bool:
        return self._binary(node, context)

    def visit_int_div(self, node: IntDivNode, context: Context) -> bool:
        return self._binary(node, context)

    def visit_modulus(self, node: ModulusNode, context: Context) -> bool:
        return self._binary(node, context)

    def visit_exponentiation(self, node: ExponentiationNode, context: Context) -> bool:
        return self._binary(node, context)

    def visit_assignment(self, stmt: AssignmentStmt, context: Context) -> bool:
        scope, _ = context
        # Right-hand side first: the target is not yet bound while it is evaluated
        stmt.expression.accept(self, (scope, stmt))
        scope.define(stmt.variable.name)
        logger.debug("Bind: %s (scope depth %d)", stmt.variable.name, scope.depth)
        return True

    def visit_return(self, stmt: ReturnStmt, context: Context) -> bool:
        scope, _ = context
        return stmt.expression.accept(self, (scope, stmt))

    def visit_block(self, stmt: BlockStmt, context: Context) -> bool:
        enclosing, _ = context
        scope = enclosing.new_scope()
        logger.debug("ENTER scope (depth %d)", scope.depth)

        for child in stmt.statements:
            child.accept(self, (scope, child))

        logger.debug("LEAVE scope (depth %d): %s", scope.depth, scope)
        return True

    @staticmethod
    def _enclosing_block(statement: Optional[Statement]) -> Optional[BlockStmt]:
        node = statement.parent if statement is not None else None
        while node is not None and not isinstance(node, BlockStmt):
            node = node.parent
        return node


def analyze_names(ast: ASTNode, predeclared: Iterable[str] = ()) -> bool:
    """
    Check that every variable in the program is assigned before it is read.

    Raises:
        UndeclaredVariableError: On the first unbound use
    """
    return NameAnalyzer().analyze(ast, predeclared)
