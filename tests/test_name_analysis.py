"""
Test suite for name analysis.

Tests cover:
- Use after assignment in the same and enclosing scopes
- Use before assignment, including self reference
- Scope exit
- Error reporting
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from declang.parser import parse_string, LiteralNode, VariableNode, PlusNode, ReturnStmt, BlockStmt
from declang.analyzer import (
    NameAnalyzer, analyze_names, NameAnalysisError, UndeclaredVariableError
)


class TestNameAnalysis(unittest.TestCase):
    """Test cases for the name analyzer."""

    def _analyze_code(self, code: str, predeclared=()):
        """Helper to analyze a code snippet."""
        return analyze_names(parse_string(code), predeclared)

    def _assert_undeclared(self, code: str, name: str) -> UndeclaredVariableError:
        with self.assertRaises(UndeclaredVariableError) as context:
            self._analyze_code(code)
        self.assertEqual(context.exception.name, name)
        return context.exception

    def test_well_formed_programs(self):
        programs = [
            "{ }",
            "{ return 1 }",
            "{ x := 1 return x }",
            "{ x := (2) { y := (2 * 4) return (x+y) } z := (3) return x }",
            "{ x := 1 { { return (x ^ 2) } } }",
            "{ x := 1 x := (x + 1) return x }",
        ]
        for source in programs:
            with self.subTest(source=source):
                self.assertTrue(self._analyze_code(source))

    def test_return_of_undeclared_variable(self):
        error = self._assert_undeclared("{ return y }", "y")
        self.assertEqual(error.diagnostic.code, "N001")
        self.assertIsInstance(error, NameAnalysisError)

    def test_use_before_assignment(self):
        error = self._assert_undeclared("{ y := (x + 1) x := 2 }", "x")
        self.assertIn("assigned later", error.diagnostic.help_text)

    def test_self_reference_without_prior_assignment(self):
        """The right-hand side is checked before the target is bound."""
        self._assert_undeclared("{ y := (y + 1) }", "y")

    def test_inner_bindings_end_with_their_block(self):
        self._assert_undeclared("{ { x := 1 } return x }", "x")

    def test_binding_visible_in_later_nested_block(self):
        self.assertTrue(self._analyze_code("{ a := 1 { b := a { c := (a + b) } } }"))

    def test_binding_after_nested_block_is_not_visible_inside_it(self):
        self._assert_undeclared("{ { return a } a := 1 }", "a")

    def test_statements_after_return_are_checked(self):
        self._assert_undeclared("{ return 1 x := q }", "q")

    def test_first_violation_is_reported(self):
        self._assert_undeclared("{ x := (a + b) }", "a")

    def test_error_location(self):
        with self.assertRaises(UndeclaredVariableError) as context:
            analyze_names(parse_string("{\n  x := 1\n  return (x + zz)\n}"))
        location = context.exception.location
        self.assertEqual(location.line, 3)
        self.assertEqual(location.column, 15)

    def test_similar_name_suggestion(self):
        error = self._assert_undeclared("{ total := 1 return totl }", "totl")
        self.assertIn("Did you mean 'total'?", error.diagnostic.suggestions)

    def test_predeclared_names(self):
        self.assertTrue(self._analyze_code("{ return (n * 2) }", predeclared=["n"]))

    def test_analyzer_is_reusable(self):
        """Scopes from one run do not carry into the next."""
        analyzer = NameAnalyzer()
        self.assertTrue(analyzer.analyze(parse_string("{ x := 1 }")))
        with self.assertRaises(UndeclaredVariableError):
            analyzer.analyze(parse_string("{ return x }"))

    def test_deeply_nested_expression(self):
        """Nesting beyond the recursion limit is reported, not a crash."""
        expression = VariableNode("n")
        for _ in range(sys.getrecursionlimit() + 100):
            expression = PlusNode(expression, LiteralNode(1))
        program = BlockStmt([ReturnStmt(expression)])

        with self.assertRaises(NameAnalysisError) as context:
            analyze_names(program, predeclared=["n"])
        self.assertNotIsInstance(context.exception, UndeclaredVariableError)
        self.assertEqual(context.exception.diagnostic.code, "N002")


if __name__ == '__main__':
    unittest.main()
