"""
Abstract Syntax Tree node definitions for DEC.

Defines the closed set of AST node types for DEC programs: numeric literals,
variables, the seven binary arithmetic operators, assignment, return and
block statements. Each node records where it started in the source and
supports double-dispatch visitors parameterized by a context type and a
result type.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any, Union, Generic, TypeVar, TYPE_CHECKING
from enum import Enum
import math
import uuid

from ..lexer.tokens import SourceLocation

if TYPE_CHECKING:
    from ..analyzer.symbol_table import SymbolTable


C = TypeVar("C")
R = TypeVar("R")

Value = Union[int, float]


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Statements
    ASSIGNMENT = "AssignmentStmt"
    RETURN_STATEMENT = "ReturnStmt"
    BLOCK_STATEMENT = "BlockStmt"

    # Expressions
    LITERAL = "LiteralNode"
    VARIABLE = "VariableNode"

    # Binary operators
    PLUS = "PlusNode"
    MINUS = "MinusNode"
    TIMES = "TimesNode"
    FLOAT_DIV = "FloatDivNode"
    INT_DIV = "IntDivNode"
    MODULUS = "ModulusNode"
    EXPONENTIATION = "ExponentiationNode"


class ASTVisitor(ABC, Generic[C, R]):
    """
    Visitor interface with one operation per AST node variant.

    C is the type of the context threaded through the traversal, R the type
    of the result each visit produces. A pass that leaves out any variant
    cannot be instantiated.
    """

    @abstractmethod
    def visit_literal(self, node: 'LiteralNode', context: C) -> R:
        pass

    @abstractmethod
    def visit_variable(self, node: 'VariableNode', context: C) -> R:
        pass

    @abstractmethod
    def visit_plus(self, node: 'PlusNode', context: C) -> R:
        pass

    @abstractmethod
    def visit_minus(self, node: 'MinusNode', context: C) -> R:
        pass

    @abstractmethod
    def visit_times(self, node: 'TimesNode', context: C) -> R:
        pass

    @abstractmethod
    def visit_float_div(self, node: 'FloatDivNode', context: C) -> R:
        pass

    @abstractmethod
    def visit_int_div(self, node: 'IntDivNode', context: C) -> R:
        pass

    @abstractmethod
    def visit_modulus(self, node: 'ModulusNode', context: C) -> R:
        pass

    @abstractmethod
    def visit_exponentiation(self, node: 'ExponentiationNode', context: C) -> R:
        pass

    @abstractmethod
    def visit_assignment(self, stmt: 'AssignmentStmt', context: C) -> R:
        pass

    @abstractmethod
    def visit_return(self, stmt: 'ReturnStmt', context: C) -> R:
        pass

    @abstractmethod
    def visit_block(self, stmt: 'BlockStmt', context: C) -> R:
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def __init__(self, node_type: ASTNodeType, location: Optional[SourceLocation] = None):
        self.node_type = node_type
        self.location = location
        self.parent: Optional['ASTNode'] = None
        # Generate unique ID for hashability
        self._id = uuid.uuid4()

    @abstractmethod
    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        """Accept a visitor (double dispatch)."""
        pass

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def set_parent(self, parent: 'ASTNode'):
        """Set the parent node."""
        self.parent = parent

    def __str__(self) -> str:
        where = f"@{self.location}" if self.location else ""
        return f"{self.node_type.value}{where}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(location={self.location})"

    def __hash__(self) -> int:
        """Hash based on unique ID so equal-looking nodes stay distinct."""
        return hash(self._id)

    def __eq__(self, other) -> bool:
        """Equality based on unique ID."""
        if not isinstance(other, ASTNode):
            return False
        return self._id == other._id


def _require_node(value: Any, role: str, owner: str):
    if not isinstance(value, ASTNode):
        raise TypeError(f"{owner} requires an AST node as its {role}, got {value!r}")


# ============================================================================
# Expressions
# ============================================================================

class ExpressionNode(ASTNode):
    """Base class for expressions."""
    pass


class LiteralNode(ExpressionNode):
    """Literal numeric value: an integer or a float."""
    value: Value
    literal_type: str  # "integer" or "float"

    def __init__(self, value: Value, location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.LITERAL, location)
        # bool is an int subclass but not a DEC value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Literal value must be an int or a float, got {value!r}")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"Literal value must be finite, got {value!r}")
        self.value = value
        self.literal_type = "integer" if isinstance(value, int) else "float"

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_literal(self, context)

    def children(self) -> List[ASTNode]:
        return []

    def __repr__(self) -> str:
        return f"LiteralNode({self.value!r})"


class VariableNode(ExpressionNode):
    """Reference to a variable by name."""
    name: str

    def __init__(self, name: str, location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.VARIABLE, location)
        self.name = name

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_variable(self, context)

    def children(self) -> List[ASTNode]:
        return []

    def __repr__(self) -> str:
        return f"VariableNode({self.name!r})"


class BinaryOperator(ExpressionNode):
    """
    Binary operation expression.

    Concrete subclasses fix the operator symbol; the operands are owned
    exclusively by this node.
    """
    symbol: str = ""
    left: ExpressionNode
    right: ExpressionNode

    def __init__(self, node_type: ASTNodeType, left: ExpressionNode, right: ExpressionNode,
                 location: Optional[SourceLocation] = None):
        super().__init__(node_type, location)
        _require_node(left, "left operand", self.__class__.__name__)
        _require_node(right, "right operand", self.__class__.__name__)
        self.left = left
        self.right = right

        left.set_parent(self)
        right.set_parent(self)

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.left!r}, {self.right!r})"


class PlusNode(BinaryOperator):
    symbol = "+"

    def __init__(self, left: ExpressionNode, right: ExpressionNode,
                 location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.PLUS, left, right, location)

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_plus(self, context)


class MinusNode(BinaryOperator):
    symbol = "-"

    def __init__(self, left: ExpressionNode, right: ExpressionNode,
                 location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.MINUS, left, right, location)

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_minus(self, context)


class TimesNode(BinaryOperator):
    symbol = "*"

    def __init__(self, left: ExpressionNode, right: ExpressionNode,
                 location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.TIMES, left, right, location)

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_times(self, context)


class FloatDivNode(BinaryOperator):
    symbol = "/"

    def __init__(self, left: ExpressionNode, right: ExpressionNode,
                 location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.FLOAT_DIV, left, right, location)

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_float_div(self, context)


class IntDivNode(BinaryOperator):
    symbol = "//"

    def __init__(self, left: ExpressionNode, right: ExpressionNode,
                 location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.INT_DIV, left, right, location)

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_int_div(self, context)


class ModulusNode(BinaryOperator):
    symbol = "%"

    def __init__(self, left: ExpressionNode, right: ExpressionNode,
                 location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.MODULUS, left, right, location)

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_modulus(self, context)


class ExponentiationNode(BinaryOperator):
    symbol = "^"

    def __init__(self, left: ExpressionNode, right: ExpressionNode,
                 location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.EXPONENTIATION, left, right, location)

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_exponentiation(self, context)


BINARY_OPERATORS = {
    cls.symbol: cls
    for cls in (PlusNode, MinusNode, TimesNode, FloatDivNode,
                IntDivNode, ModulusNode, ExponentiationNode)
}


# ============================================================================
# Statements
# ============================================================================

class Statement(ASTNode):
    """Base class for statements."""
    pass


class AssignmentStmt(Statement):
    """Assignment of an expression's value to a variable."""
    variable: VariableNode
    expression: ExpressionNode

    def __init__(self, variable: VariableNode, expression: ExpressionNode,
                 location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.ASSIGNMENT, location or getattr(variable, "location", None))
        if not isinstance(variable, VariableNode):
            raise TypeError(f"Assignment target must be a VariableNode, got {variable!r}")
        _require_node(expression, "value", "AssignmentStmt")
        self.variable = variable
        self.expression = expression

        variable.set_parent(self)
        expression.set_parent(self)

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_assignment(self, context)

    def children(self) -> List[ASTNode]:
        return [self.variable, self.expression]

    def __repr__(self) -> str:
        return f"AssignmentStmt({self.variable.name!r}, {self.expression!r})"


class ReturnStmt(Statement):
    """Return statement; terminates the flow of its enclosing blocks."""
    expression: ExpressionNode

    def __init__(self, expression: ExpressionNode, location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.RETURN_STATEMENT, location)
        _require_node(expression, "value", "ReturnStmt")
        self.expression = expression

        expression.set_parent(self)

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_return(self, context)

    def children(self) -> List[ASTNode]:
        return [self.expression]

    def __repr__(self) -> str:
        return f"ReturnStmt({self.expression!r})"


class BlockStmt(Statement):
    """Block statement: an ordered statement list with its own symbol table."""
    statements: List[Statement]
    symbol_table: 'SymbolTable'

    def __init__(self, statements: List[Statement], symbol_table: Optional['SymbolTable'] = None,
                 location: Optional[SourceLocation] = None):
        super().__init__(ASTNodeType.BLOCK_STATEMENT, location)
        if symbol_table is None:
            from ..analyzer.symbol_table import SymbolTable
            symbol_table = SymbolTable()
        self.statements = list(statements)
        self.symbol_table = symbol_table
        for stmt in self.statements:
            _require_node(stmt, "statement", "BlockStmt")
            stmt.set_parent(self)

    def accept(self, visitor: ASTVisitor[C, R], context: C) -> R:
        return visitor.visit_block(self, context)

    def children(self) -> List[ASTNode]:
        return list(self.statements)

    def __repr__(self) -> str:
        return f"BlockStmt({self.statements!r})"


def structurally_equal(first: Optional[ASTNode], second: Optional[ASTNode]) -> bool:
    """
    Compare two trees by shape and payload, ignoring node identity,
    source locations and symbol tables.
    """
    if first is None or second is None:
        return first is second
    if type(first) is not type(second):
        return False
    if isinstance(first, LiteralNode):
        return first.literal_type == second.literal_type and first.value == second.value
    if isinstance(first, VariableNode):
        return first.name == second.name

    first_children = first.children()
    second_children = second.children()
    if len(first_children) != len(second_children):
        return False
    return all(structurally_equal(a, b) for a, b in zip(first_children, second_children))
