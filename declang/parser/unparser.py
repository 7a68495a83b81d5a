"""
Unparser: renders an AST back to DEC source text.

The output is canonical rather than a copy of the input: every binary
operation is wrapped in parentheses, redundant grouping is dropped and
each block is laid out one statement per line. Parsing the output yields
a tree structurally equal to the one that was rendered.
"""

from typing import List

from .ast_nodes import (
    ASTVisitor, ASTNode, BinaryOperator, LiteralNode, VariableNode,
    PlusNode, MinusNode, TimesNode, FloatDivNode, IntDivNode, ModulusNode,
    ExponentiationNode, AssignmentStmt, ReturnStmt, BlockStmt
)
from .errors import UnparseError

INDENT = "    "


class Unparser(ASTVisitor[int, str]):
    """Visitor whose context is the indentation level and whose result is text."""

    def __init__(self, indent: str = INDENT):
        self.indent = indent

    def unparse(self, node: ASTNode, level: int = 0) -> str:
        """
        Render a node as source text indented to the given level.

        Raises:
            UnparseError: When the tree is nested too deeply to render
        """
        try:
            return node.accept(self, level)
        except RecursionError:
            raise UnparseError(
                message="Nesting too deep to unparse",
                location=node.location,
                code="U001",
                help_text="The tree is nested more deeply than the unparser can follow."
            ) from None

    def _indentation(self, level: int) -> str:
        return self.indent * level

    # Expressions ignore the level

    def visit_literal(self, node: LiteralNode, level: int) -> str:
        return repr(node.value)

    def visit_variable(self, node: VariableNode, level: int) -> str:
        return node.name

    def _binary(self, node: BinaryOperator) -> str:
        left = node.left.accept(self, 0)
        right = node.right.accept(self, 0)
        return f"({left} {node.symbol} {right})"

    def visit_plus(self, node: PlusNode, level: int) -> str:
        return self._binary(node)

    def visit_minus(self, node: MinusNode, level: int) -> str:
        return self._binary(node)

    def visit_times(self, node: TimesNode, level: int) -> str:
        return self._binary(node)

    def visit_float_div(self, node: FloatDivNode, level: int) -> str:
        return self._binary(node)

    def visit_int_div(self, node: IntDivNode, level: int) -> str:
        return self._binary(node)

    def visit_modulus(self, node: ModulusNode, level: int) -> str:
        return self._binary(node)

    def visit_exponentiation(self, node: ExponentiationNode, level: int) -> str:
        return self._binary(node)

    # Statements

    def visit_assignment(self, stmt: AssignmentStmt, level: int) -> str:
        expression = stmt.expression.accept(self, level)
        return f"{self._indentation(level)}{stmt.variable.name} := {expression}"

    def visit_return(self, stmt: ReturnStmt, level: int) -> str:
        return f"{self._indentation(level)}return {stmt.expression.accept(self, level)}"

    def visit_block(self, stmt: BlockStmt, level: int) -> str:
        lines: List[str] = [self._indentation(level) + "{"]
        for child in stmt.statements:
            lines.append(child.accept(self, level + 1))
        lines.append(self._indentation(level) + "}")
        return "\n".join(lines)


def unparse(node: ASTNode, level: int = 0) -> str:
    """Render a node (usually a whole program) as DEC source text."""
    return Unparser().unparse(node, level)
