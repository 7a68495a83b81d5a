"""
Test suite for the unparser and the parse/unparse round trip.
"""

import random
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from declang.lexer import LexerError
from declang.analyzer import SymbolTable
from declang.parser import (
    Unparser, UnparseError, ASTBuilder, unparse, parse_string, structurally_equal, INDENT,
    BINARY_OPERATORS, LiteralNode, VariableNode, PlusNode, ModulusNode, AssignmentStmt,
    ReturnStmt, BlockStmt
)

# Literals at the edges of what the lexer can spell back
EDGE_VALUES = [
    0, 7, -7, 10 ** 30, -(10 ** 30),
    0.0, -0.0, 0.1, -2.5, 123456789.125, 1.5e-07, 1e16,
    1e-300, 5e-324, -5e-324, 1.7976931348623157e308, -1.7976931348623157e308,
]
NAMES = ["a", "b1", "_tmp", "returned"]
OPERATOR_SYMBOLS = sorted(BINARY_OPERATORS)


def random_expression(rng: random.Random, builder: ASTBuilder, depth: int):
    if depth == 0 or rng.random() < 0.3:
        if rng.random() < 0.7:
            return builder.create_literal_node(rng.choice(EDGE_VALUES))
        return builder.create_variable_node(rng.choice(NAMES))
    left = random_expression(rng, builder, depth - 1)
    right = random_expression(rng, builder, depth - 1)
    return builder.create_binary_operator(rng.choice(OPERATOR_SYMBOLS), left, right)


def random_block(rng: random.Random, builder: ASTBuilder, depth: int):
    statements = []
    for _ in range(rng.randint(0, 4)):
        roll = rng.random()
        if roll < 0.25 and depth > 0:
            statements.append(random_block(rng, builder, depth - 1))
        elif roll < 0.45:
            statements.append(builder.create_return_stmt(random_expression(rng, builder, 4)))
        else:
            variable = builder.create_variable_node(rng.choice(NAMES))
            statements.append(builder.create_assignment_stmt(variable, random_expression(rng, builder, 4)))
    return builder.create_block_stmt(statements, SymbolTable())


class TestUnparser(unittest.TestCase):
    """Test cases for unparsing."""

    def test_expressions(self):
        self.assertEqual(unparse(LiteralNode(5)), "5")
        self.assertEqual(unparse(LiteralNode(3.14)), "3.14")
        self.assertEqual(unparse(LiteralNode(-5)), "-5")
        self.assertEqual(unparse(VariableNode("x")), "x")
        self.assertEqual(unparse(PlusNode(LiteralNode(5), LiteralNode(3))), "(5 + 3)")
        nested = ModulusNode(PlusNode(VariableNode("a"), LiteralNode(1)), LiteralNode(2))
        self.assertEqual(unparse(nested), "((a + 1) % 2)")

    def test_expressions_ignore_level(self):
        self.assertEqual(unparse(VariableNode("x"), 3), "x")

    def test_statements(self):
        assignment = AssignmentStmt(VariableNode("x"), LiteralNode(5))
        self.assertEqual(unparse(assignment), "x := 5")
        self.assertEqual(unparse(assignment, 2), INDENT * 2 + "x := 5")
        ret = ReturnStmt(PlusNode(VariableNode("x"), LiteralNode(1)))
        self.assertEqual(unparse(ret), "return (x + 1)")

    def test_block_layout(self):
        """Each nesting level adds one indent unit."""
        program = parse_string("{ x := (2) { y := (2 * 4) return (x+y) } z := (3) return x }")
        expected = "\n".join([
            "{",
            "    x := 2",
            "    {",
            "        y := (2 * 4)",
            "        return (x + y)",
            "    }",
            "    z := 3",
            "    return x",
            "}",
        ])
        self.assertEqual(unparse(program), expected)

    def test_empty_block(self):
        self.assertEqual(unparse(parse_string("{ }")), "{\n}")
        self.assertEqual(unparse(parse_string("{ }"), 1), "    {\n    }")

    def test_custom_indent(self):
        program = parse_string("{ return 1 }")
        self.assertEqual(Unparser(indent="\t").unparse(program), "{\n\treturn 1\n}")

    def test_round_trip(self):
        """Parsing the unparsed text gives back the same tree."""
        programs = [
            "{ }",
            "{ x := 5 return x }",
            "{ x := (2) { y := (2 * 4) return (x+y) } z := (3) return x }",
            "{ a := ((1 - -2) ^ (3 // 4)) b := ((a % 5) / 2.5) { { return (b * -1.25) } } }",
            "{ big := 1e20 small := 2.5e-3 return ((big * small) + ((big)) ) }",
        ]
        for source in programs:
            with self.subTest(source=source):
                original = parse_string(source)
                text = unparse(original)
                reparsed = parse_string(text)
                self.assertTrue(structurally_equal(original, reparsed), text)
                self.assertEqual(unparse(reparsed), text)

    def test_round_trip_extreme_literals(self):
        source = ("{ x := 1.7976931348623157e308 y := 5e-324 z := -0.0 "
                  "w := 1e-400 return ((x - -1e16) // 1.5e-07) }")
        original = parse_string(source)
        text = unparse(original)
        self.assertTrue(structurally_equal(original, parse_string(text)), text)

    def test_literal_overflowing_to_infinity_is_rejected(self):
        """Such a literal could not be written back as a number."""
        with self.assertRaises(LexerError) as context:
            parse_string("{ x := 1e400 return x }")
        self.assertEqual(context.exception.diagnostic.code, "L003")

    def test_round_trip_generated_programs(self):
        """Programs built at random through the builder survive a round trip."""
        rng = random.Random(20261019)
        builder = ASTBuilder()
        for index in range(200):
            program = random_block(rng, builder, 3)
            text = unparse(program)
            with self.subTest(index=index, text=text):
                reparsed = parse_string(text)
                self.assertTrue(structurally_equal(program, reparsed))
                self.assertEqual(unparse(reparsed), text)

    def test_deeply_nested_tree(self):
        """Nesting beyond the recursion limit is reported, not a crash."""
        expression = VariableNode("x")
        for _ in range(sys.getrecursionlimit() + 100):
            expression = PlusNode(expression, LiteralNode(1))

        with self.assertRaises(UnparseError) as context:
            unparse(BlockStmt([ReturnStmt(expression)]))
        self.assertEqual(context.exception.code, "U001")


if __name__ == '__main__':
    unittest.main()
