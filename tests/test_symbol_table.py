"""
Test suite for scoped symbol tables.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from declang.analyzer import SymbolTable


class TestSymbolTable(unittest.TestCase):
    """Test cases for SymbolTable."""

    def setUp(self):
        """Set up test fixtures."""
        self.globals = SymbolTable()
        self.globals.define("x", 2)
        self.globals.define("y", 8)

    def test_define_and_lookup(self):
        self.assertEqual(self.globals.lookup("x"), 2)
        self.assertTrue(self.globals.contains("y"))
        self.assertIn("y", self.globals)
        self.assertEqual(len(self.globals), 2)

    def test_redefine_keeps_insertion_order(self):
        self.globals.assign("x", 5)
        self.assertEqual(self.globals.items(), [("x", 5), ("y", 8)])

    def test_missing_name_raises_key_error(self):
        with self.assertRaises(KeyError):
            self.globals.lookup("z")
        self.assertIsNone(self.globals.get("z"))
        self.assertFalse(self.globals.contains("z"))

    def test_lookup_walks_parents(self):
        """Inner scopes see outer bindings; outer scopes never see inner ones."""
        inner = self.globals.new_scope()
        inner.define("z", 1.5)
        self.assertEqual(inner.lookup("x"), 2)
        self.assertEqual(inner.lookup("z"), 1.5)
        self.assertFalse(self.globals.contains("z"))
        self.assertFalse(inner.contains_local("x"))
        self.assertEqual(inner.depth, 1)
        self.assertEqual(self.globals.depth, 0)

    def test_shadowing(self):
        inner = self.globals.new_scope()
        inner.define("x", 100)
        self.assertEqual(inner.lookup("x"), 100)
        self.assertEqual(self.globals.lookup("x"), 2)

    def test_declared_name_without_value(self):
        """A declared name is bound even before it has a value."""
        table = SymbolTable()
        table.define("a")
        self.assertTrue(table.contains("a"))
        self.assertIsNone(table.lookup("a"))

    def test_remove_and_clear(self):
        self.globals.remove("x")
        self.assertEqual(self.globals.names(), ["y"])
        with self.assertRaises(KeyError):
            self.globals.remove("x")
        self.globals.clear()
        self.assertEqual(len(self.globals), 0)

    def test_string_form(self):
        self.assertEqual(str(self.globals), "{ x : 2, y : 8 }")
        self.assertEqual(str(SymbolTable()), "{ }")

    def test_iteration_and_dict(self):
        self.assertEqual(list(self.globals), ["x", "y"])
        self.assertEqual(self.globals.to_dict(), {"x": 2, "y": 8})

    def test_similar_names(self):
        inner = self.globals.new_scope()
        inner.define("total", 1)
        self.assertEqual(inner.get_similar_names("totl"), ["total"])
        self.assertIn("x", inner.get_similar_names("xx"))


if __name__ == '__main__':
    unittest.main()
