"""
Builds the control flow graph of a DEC program.

Blocks are transparent: their statements are flattened depth first into one
sequence. Each assignment or return becomes a vertex with an edge from the
statement before it, except that nothing follows a return: the statement
after a return starts over with no predecessor, even when it sits in an
enclosing block.
"""

import logging
from typing import Optional

from ..parser.ast_nodes import (
    ASTVisitor, ASTNode, Statement, LiteralNode, VariableNode,
    PlusNode, MinusNode, TimesNode, FloatDivNode, IntDivNode, ModulusNode,
    ExponentiationNode, AssignmentStmt, ReturnStmt, BlockStmt
)
from .cfg import CFG
from .errors import create_nesting_too_deep_error

logger = logging.getLogger(__name__)

Predecessor = Optional[Statement]


class ControlFlowGraphGenerator(ASTVisitor[Predecessor, Predecessor]):
    """
    Visitor whose context is the predecessor statement (or None) and whose
    result is the statement that the next one should follow (or None).
    """

    def __init__(self):
        self.cfg = CFG()

    def generate(self, ast: ASTNode) -> CFG:
        """
        Build a fresh CFG for the given program.

        Raises:
            ControlFlowError: When blocks are nested too deeply to walk
        """
        self.cfg = CFG()
        try:
            ast.accept(self, None)
        except RecursionError:
            raise create_nesting_too_deep_error(ast.location) from None
        logger.debug("CFG: %d vertices, %d edges", self.cfg.vertex_count(), self.cfg.edge_count())
        return self.cfg

    def _add_statement(self, stmt: Statement, predecessor: Predecessor):
        self.cfg.add_vertex(stmt)
        if self.cfg.start is None:
            self.cfg.start = stmt
        if predecessor is not None:
            self.cfg.add_edge(predecessor, stmt)
            logger.debug("CFG edge %r -> %r", predecessor, stmt)

    # Expressions do not affect control flow

    def visit_literal(self, node: LiteralNode, predecessor: Predecessor) -> Predecessor:
        return predecessor

    def visit_variable(self, node: VariableNode, predecessor: Predecessor) -> Predecessor:
        return predecessor

    def visit_plus(self, node: PlusNode, predecessor: Predecessor) -> Predecessor:
        return predecessor

    def visit_minus(self, node: MinusNode, predecessor: Predecessor) -> Predecessor:
        return predecessor

    def visit_times(self, node: TimesNode, predecessor: Predecessor) -> Predecessor:
        return predecessor

    def visit_float_div(self, node: FloatDivNode, predecessor: Predecessor) -> Predecessor:
        return predecessor

    def visit_int_div(self, node: IntDivNode, predecessor: Predecessor) -> Predecessor:
        return predecessor

    def visit_modulus(self, node: ModulusNode, predecessor: Predecessor) -> Predecessor:
        return predecessor

    def visit_exponentiation(self, node: ExponentiationNode, predecessor: Predecessor) -> Predecessor:
        return predecessor

    # Statements

    def visit_assignment(self, stmt: AssignmentStmt, predecessor: Predecessor) -> Predecessor:
        self._add_statement(stmt, predecessor)
        return stmt

    def visit_return(self, stmt: ReturnStmt, predecessor: Predecessor) -> Predecessor:
        self._add_statement(stmt, predecessor)
        # no edge ever leaves a return
        return None

    def visit_block(self, stmt: BlockStmt, predecessor: Predecessor) -> Predecessor:
        for child in stmt.statements:
            predecessor = child.accept(self, predecessor)
        return predecessor


def build_cfg(ast: ASTNode) -> CFG:
    """Build the control flow graph of a DEC program."""
    return ControlFlowGraphGenerator().generate(ast)
