"""
DEC Recursive Descent Parser

Turns the token stream into an AST through a pluggable builder. Every
binary operation in DEC is fully parenthesized, so there is no operator
precedence to resolve: grouping alone determines evaluation order.

Grammar:
    Program        := BlockStmt EOF
    BlockStmt      := '{' Stmt* '}'
    Stmt           := AssignmentStmt | ReturnStmt | BlockStmt
    AssignmentStmt := Identifier ':=' Expression
    ReturnStmt     := 'return' Expression
    Expression     := '(' Expression BinOp Expression ')'
                    | '(' Expression ')'
                    | Literal | Identifier
    BinOp          := '+' | '-' | '*' | '/' | '//' | '%' | '^'
"""

import logging
from typing import List, Optional

from ..lexer.tokens import Token, TokenType, SourceLocation, BINARY_OPERATOR_TOKENS
from ..analyzer.symbol_table import SymbolTable
from .ast_nodes import ExpressionNode, Statement, BlockStmt
from .builders import ASTBuilder
from .errors import (
    create_unexpected_token_error, create_unclosed_delimiter_error,
    create_invalid_expression_error, create_invalid_operator_error,
    create_unexpected_eof_error, create_trailing_input_error, create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)

BINARY_OPERATOR_TYPES = frozenset(BINARY_OPERATOR_TOKENS.values())


class Parser:
    """
    DEC recursive descent parser.

    Consumes an ordered token list and reports the first syntax error as a
    ParseError; there is no error recovery. Nodes are produced by the
    builder, so the same grammar can build a tree, build nothing, or log.
    """

    def __init__(self, tokens: List[Token], builder: Optional[ASTBuilder] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer; an EOF token is appended
                when the list does not already end with one
            builder: Node builder, ASTBuilder when omitted
        """
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].type != TokenType.EOF:
            location = self.tokens[-1].location if self.tokens else SourceLocation("<unknown>", 1, 1, 0)
            self.tokens.append(Token(TokenType.EOF, "", None, location))

        self.builder = builder if builder is not None else ASTBuilder()
        self.current = 0
        self.scopes: List[SymbolTable] = []

    def parse(self) -> Optional[BlockStmt]:
        """
        Parse the token stream as a complete DEC program.

        Returns:
            The program's BlockStmt (whatever the builder produced for it)

        Raises:
            ParseError: On the first syntax error
                or when the input is nested too deeply to follow
        """
        self.current = 0
        self.scopes = []
        logger.debug("Parsing %d tokens with %s", len(self.tokens), type(self.builder).__name__)

        if self._is_at_end():
            raise create_unexpected_eof_error(TokenType.LEFT_BRACE, self._peek())

        try:
            program = self._parse_block_statement()
        except RecursionError:
            raise create_nesting_too_deep_error(self._peek()) from None

        if not self._is_at_end():
            raise create_trailing_input_error(self._peek())

        logger.debug("Parsed program at %s", getattr(program, "location", None))
        return program

    def _parse_block_statement(self) -> Optional[BlockStmt]:
        """Parse '{' Stmt* '}' with a fresh scope chained to the enclosing block's."""
        open_token = self._consume(TokenType.LEFT_BRACE)

        enclosing = self.scopes[-1] if self.scopes else None
        symbol_table = SymbolTable(parent=enclosing)
        self.scopes.append(symbol_table)

        statements: List[Statement] = []
        while not self._check(TokenType.RIGHT_BRACE):
            if self._is_at_end():
                raise create_unclosed_delimiter_error("{", open_token.location, self._peek())
            statements.append(self._parse_statement())

        self._advance()
        self.scopes.pop()

        return self.builder.create_block_stmt(statements, symbol_table, location=open_token.location)

    def _parse_statement(self) -> Optional[Statement]:
        """Parse one statement, chosen by its first token."""
        token = self._peek()

        if token.type == TokenType.IDENTIFIER:
            return self._parse_assignment()
        if token.type == TokenType.RETURN:
            return self._parse_return_statement()
        if token.type == TokenType.LEFT_BRACE:
            return self._parse_block_statement()

        if token.type == TokenType.ASSIGN:
            raise create_invalid_operator_error(
                token, "':=' must follow the name of the variable being assigned."
            )
        if token.type == TokenType.UNKNOWN:
            raise create_invalid_operator_error(token, f"{token.describe()} is not a DEC operator.")

        raise create_unexpected_token_error("statement", token)

    def _parse_assignment(self) -> Optional[Statement]:
        """Parse Identifier ':=' Expression."""
        name_token = self._advance()

        if self._check(TokenType.UNKNOWN):
            raise create_invalid_operator_error(
                self._peek(), f"Assignments to '{name_token.lexeme}' are written with ':='."
            )
        self._consume(TokenType.ASSIGN)

        expression = self._parse_expression()

        # The parse-time table only records which names a block declares
        self.scopes[-1].define(name_token.lexeme)

        variable = self.builder.create_variable_node(name_token.lexeme, location=name_token.location)
        return self.builder.create_assignment_stmt(variable, expression, location=name_token.location)

    def _parse_return_statement(self) -> Optional[Statement]:
        """Parse 'return' Expression."""
        return_token = self._advance()
        expression = self._parse_expression()
        return self.builder.create_return_stmt(expression, location=return_token.location)

    def _parse_expression(self) -> Optional[ExpressionNode]:
        """Parse a literal, a variable, or a parenthesized expression."""
        token = self._peek()

        if token.type in (TokenType.INTEGER, TokenType.FLOAT):
            self._advance()
            return self.builder.create_literal_node(token.value, location=token.location)

        if token.type == TokenType.IDENTIFIER:
            self._advance()
            return self.builder.create_variable_node(token.lexeme, location=token.location)

        if token.type == TokenType.LEFT_PAREN:
            return self._parse_parenthesized()

        if token.type == TokenType.EOF:
            raise create_unexpected_eof_error("expression", token)

        if token.type == TokenType.UNKNOWN:
            raise create_invalid_operator_error(token, f"{token.describe()} is not a DEC operator.")

        if token.type == TokenType.ASSIGN:
            raise create_invalid_operator_error(
                token, "':=' can only appear right after the target of an assignment."
            )

        if token.type in BINARY_OPERATOR_TYPES:
            raise create_invalid_expression_error(
                "Binary operators are written between their operands: '(' left op right ')'.", token
            )

        raise create_invalid_expression_error(
            f"{token.describe()} cannot start an expression.", token
        )

    def _parse_parenthesized(self) -> Optional[ExpressionNode]:
        """Parse '(' Expression BinOp Expression ')' or the redundant '(' Expression ')'."""
        open_token = self._advance()
        left = self._parse_expression()

        if self._match(TokenType.RIGHT_PAREN):
            return left

        operator = self._peek()
        if operator.type in BINARY_OPERATOR_TYPES:
            self._advance()
        elif operator.type == TokenType.UNKNOWN:
            raise create_invalid_operator_error(operator, f"{operator.describe()} is not a DEC operator.")
        elif operator.type == TokenType.ASSIGN:
            raise create_invalid_operator_error(
                operator, "':=' cannot be used inside an expression."
            )
        elif operator.type == TokenType.EOF:
            raise create_unclosed_delimiter_error("(", open_token.location, operator)
        else:
            raise create_unexpected_token_error("binary operator or ')'", operator)

        right = self._parse_expression()

        if not self._check(TokenType.RIGHT_PAREN):
            if self._is_at_end():
                raise create_unclosed_delimiter_error("(", open_token.location, self._peek())
            raise create_unexpected_token_error(TokenType.RIGHT_PAREN, self._peek())
        self._advance()

        return self.builder.create_binary_operator(
            operator.lexeme, left, right, location=open_token.location
        )

    # Token stream helpers

    def _match(self, token_type: TokenType) -> bool:
        """Consume the current token if it has the given type."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if the current token has the given type."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self._peek()
        if not self._is_at_end():
            self.current += 1
        return token

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _consume(self, token_type: TokenType) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()

        current_token = self._peek()
        if current_token.type == TokenType.EOF:
            raise create_unexpected_eof_error(token_type, current_token)
        raise create_unexpected_token_error(token_type, current_token)


def parse(tokens: List[Token], builder: Optional[ASTBuilder] = None) -> Optional[BlockStmt]:
    """
    Parse a token list into a DEC program.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens, builder).parse()


def parse_string(source: str, filename: str = "<string>",
                 builder: Optional[ASTBuilder] = None) -> Optional[BlockStmt]:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        builder: Node builder, ASTBuilder when omitted

    Returns:
        Program AST

    Raises:
        LexerError: If the source cannot be tokenized
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    return Parser(tokens, builder).parse()


def parse_file(filepath: str, builder: Optional[ASTBuilder] = None) -> Optional[BlockStmt]:
    """
    Convenience function to parse a source file.

    Raises:
        LexerError: If the source cannot be tokenized
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    from ..lexer import tokenize_file

    tokens = tokenize_file(filepath)
    return Parser(tokens, builder).parse()
