"""
Test suite for the DEC lexer.

Tests cover:
- Numeric literals, including negative literals
- Identifiers, keywords and operators
- Source locations
- Lexical errors
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from declang.lexer import Lexer, LexerError, TokenType, TokenCategory, tokenize_string


class TestLexer(unittest.TestCase):
    """Test cases for the lexer."""

    def _types(self, source: str):
        return [token.type for token in tokenize_string(source)]

    def test_empty_source_yields_only_eof(self):
        """Empty input still produces the EOF token."""
        tokens = tokenize_string("")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, TokenType.EOF)

    def test_assignment_statement(self):
        """Test the tokens of a simple assignment."""
        tokens = tokenize_string("{ x := (2 + 3) }")
        self.assertEqual(
            [token.type for token in tokens],
            [TokenType.LEFT_BRACE, TokenType.IDENTIFIER, TokenType.ASSIGN, TokenType.LEFT_PAREN,
             TokenType.INTEGER, TokenType.PLUS, TokenType.INTEGER, TokenType.RIGHT_PAREN,
             TokenType.RIGHT_BRACE, TokenType.EOF]
        )
        self.assertEqual(tokens[1].value, "x")
        self.assertEqual(tokens[4].value, 2)

    def test_all_binary_operators(self):
        """Two-character operators win over their one-character prefixes."""
        self.assertEqual(
            self._types("+ - * / // % ^")[:-1],
            [TokenType.PLUS, TokenType.MINUS, TokenType.MULTIPLY, TokenType.DIVIDE,
             TokenType.FLOOR_DIVIDE, TokenType.MODULO, TokenType.POWER]
        )

    def test_return_is_a_keyword(self):
        tokens = tokenize_string("return returned")
        self.assertEqual(tokens[0].type, TokenType.RETURN)
        self.assertTrue(tokens[0].is_keyword)
        self.assertEqual(tokens[1].type, TokenType.IDENTIFIER)
        self.assertEqual(tokens[1].category, TokenCategory.IDENTIFIER)

    def test_float_literals(self):
        """Test the float literal forms."""
        for source, expected in [("3.14", 3.14), ("2.", 2.0), ("1e3", 1000.0), ("2.5E-1", 0.25)]:
            with self.subTest(source=source):
                token = tokenize_string(source)[0]
                self.assertEqual(token.type, TokenType.FLOAT)
                self.assertEqual(token.category, TokenCategory.LITERAL_FLOAT)
                self.assertEqual(token.value, expected)

    def test_negative_literal_where_operand_expected(self):
        """A '-' glued to a digit is a sign after an operator or ':='."""
        tokens = tokenize_string("x := -5")
        self.assertEqual(tokens[2].type, TokenType.INTEGER)
        self.assertEqual(tokens[2].value, -5)

        tokens = tokenize_string("(x - -5)")
        self.assertEqual(tokens[2].type, TokenType.MINUS)
        self.assertEqual(tokens[3].value, -5)

    def test_minus_after_operand_is_an_operator(self):
        tokens = tokenize_string("(x -5)")
        self.assertEqual(tokens[2].type, TokenType.MINUS)
        self.assertEqual(tokens[3].value, 5)

    def test_unknown_operator_run(self):
        """Operator characters that form no DEC operator become one UNKNOWN token."""
        tokens = tokenize_string("x = 5")
        self.assertEqual(tokens[1].type, TokenType.UNKNOWN)
        self.assertEqual(tokens[1].lexeme, "=")

    def test_comments_and_newlines_are_skipped(self):
        source = "{\n  # set x\n  x := 1\n}"
        self.assertEqual(
            self._types(source),
            [TokenType.LEFT_BRACE, TokenType.IDENTIFIER, TokenType.ASSIGN,
             TokenType.INTEGER, TokenType.RIGHT_BRACE, TokenType.EOF]
        )

    def test_source_locations(self):
        """Test line and column tracking."""
        tokens = Lexer("{\n  x := 1\n}", "prog.dec").tokenize()
        x_token = tokens[1]
        self.assertEqual(x_token.location.filename, "prog.dec")
        self.assertEqual(x_token.location.line, 2)
        self.assertEqual(x_token.location.column, 3)
        self.assertEqual(x_token.location.offset, 4)
        self.assertEqual(str(x_token.location), "prog.dec:2:3")

    def test_invalid_character(self):
        """Test the error for a character DEC does not use."""
        with self.assertRaises(LexerError) as context:
            tokenize_string("{ x := [1] }")
        error = context.exception
        self.assertEqual(error.diagnostic.code, "L001")
        self.assertEqual(error.location.column, 8)
        self.assertIn("Invalid character", str(error))

    def test_number_running_into_letter(self):
        with self.assertRaises(LexerError) as context:
            tokenize_string("x := 12abc")
        self.assertEqual(context.exception.diagnostic.code, "L003")

    def test_float_literal_out_of_range(self):
        """A float that would overflow to infinity is not a literal."""
        for source in ("{ x := 1e400 return x }", "{ return (1 - -1.5e999) }"):
            with self.subTest(source=source):
                with self.assertRaises(LexerError) as context:
                    tokenize_string(source)
                self.assertEqual(context.exception.diagnostic.code, "L003")

    def test_float_literal_underflow_is_zero(self):
        tokens = tokenize_string("1e-400")
        self.assertEqual(tokens[0].type, TokenType.FLOAT)
        self.assertEqual(tokens[0].value, 0.0)

    def test_integer_literal_with_too_many_digits(self):
        limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
        if not limit:
            self.skipTest("interpreter has no integer string length limit")
        with self.assertRaises(LexerError) as context:
            tokenize_string("x := " + "9" * (limit + 1))
        self.assertEqual(context.exception.diagnostic.code, "L003")

    def test_non_ascii_letters_are_rejected(self):
        with self.assertRaises(LexerError):
            tokenize_string("{ é := 1 }")


if __name__ == '__main__':
    unittest.main()
