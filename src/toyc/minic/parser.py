"""
Mini-C Recursive Descent Parser
===============================

This module implements a recursive descent parser for Mini-C. It takes
the token list from the lexer and builds an Abstract Syntax Tree (AST).

Grammar (EBNF)
--------------
program     ::= statement*
statement   ::= declaration | if_stmt | assignment
declaration ::= 'int' IDENTIFIER ';'
assignment  ::= IDENTIFIER '=' expression ';'
expression  ::= term (('+' | '-') term)?
term        ::= NUMBER | IDENTIFIER
condition   ::= term '==' term
if_stmt     ::= 'if' '(' condition ')' '{' statement* '}'

The parser uses one token of lookahead and never backtracks. There is
no error recovery: the first syntax error ends the parse.

Example Usage
-------------
>>> from toyc.minic.lexer import tokenize
>>> from toyc.minic.parser import parse_program
>>> result = parse_program(tokenize("int x; x = 5;"))
>>> result.ok
True
>>> len(result.program.statements)
2
"""

from dataclasses import dataclass
from typing import Optional
import logging

from toyc.minic.lexer import Token, TokenType
from toyc.minic.ast import (
    ProgramNode,
    Declaration,
    Assignment,
    IfStatement,
    Body,
    Condition,
    BinaryOp,
    Identifier,
    NumberLiteral,
    Expression,
    Statement,
    Term,
)
from toyc.minic.errors import (
    MiniCSyntaxError,
    UnexpectedTokenError,
    ExpectedTermError,
    ParseError,
)

logger = logging.getLogger(__name__)

# Returned by _peek() once the tokens run out
EOF_TOKEN = Token(TokenType.EOF, "")


class Parser:
    """
    Recursive descent parser for Mini-C.

    Each instance owns its cursor and parses one token list once.
    Create a new Parser for every program.

    Attributes:
        tokens: List of tokens from the lexer
    """

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens

        # Current position in token list
        self._pos = 0

    def parse(self) -> ProgramNode:
        """
        Parse the token list into an AST.

        Returns:
            ProgramNode containing every top-level statement

        Raises:
            MiniCSyntaxError: On the first syntax error
        """
        statements = []
        while not self._at_end():
            statements.append(self.parse_statement())

        logger.debug(f"Parsed {len(statements)} top-level statements")
        return ProgramNode(statements=tuple(statements))

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.tokens)

    def _peek(self) -> Token:
        """Look at the token under the cursor."""
        if self._at_end():
            return EOF_TOKEN
        return self.tokens[self._pos]

    def _check(self, *types: TokenType) -> bool:
        """Check if current token is one of the given types."""
        return self._peek().type in types

    def consume(self, token_type: TokenType) -> Token:
        """
        Expect and consume a specific token type.

        Args:
            token_type: The expected token type

        Returns:
            The consumed token

        Raises:
            UnexpectedTokenError: If the current token is of another type
        """
        if self._check(token_type):
            token = self.tokens[self._pos]
            self._pos += 1
            return token

        raise UnexpectedTokenError(None if self._at_end() else self._peek())

    # =========================================================================
    # Statement Parsing
    # =========================================================================

    def parse_statement(self) -> Statement:
        """Parse any statement; anything unrecognized is tried as an assignment."""
        if self._check(TokenType.INT):
            return self.parse_declaration()
        if self._check(TokenType.IF):
            return self.parse_if_statement()
        return self.parse_assignment()

    def parse_declaration(self) -> Declaration:
        """Parse `int name ;`."""
        self.consume(TokenType.INT)
        identifier = self._parse_identifier()
        self.consume(TokenType.SEMICOLON)
        return Declaration(identifier=identifier)

    def parse_assignment(self) -> Assignment:
        """Parse `name = expression ;`."""
        target = self._parse_identifier()
        self.consume(TokenType.ASSIGN)
        value = self.parse_expression()
        self.consume(TokenType.SEMICOLON)
        return Assignment(target=target, value=value)

    def parse_if_statement(self) -> IfStatement:
        """
        Parse `if ( condition ) { statement* }`.

        Statements are read until the closing brace. Running out of
        tokens first is an unexpected-token error.
        """
        self.consume(TokenType.IF)
        self.consume(TokenType.LPAREN)
        condition = self.parse_condition()
        self.consume(TokenType.RPAREN)
        self.consume(TokenType.LBRACE)

        statements = []
        while not self._check(TokenType.RBRACE):
            if self._at_end():
                raise UnexpectedTokenError(None)
            statements.append(self.parse_statement())

        self.consume(TokenType.RBRACE)
        return IfStatement(condition=condition, body=Body(statements=tuple(statements)))

    # =========================================================================
    # Expression Parsing
    # =========================================================================

    def parse_expression(self) -> Expression:
        """Parse a term, optionally followed by + or - and a second term."""
        left = self.parse_term()

        if self._check(TokenType.PLUS, TokenType.MINUS):
            operator = self.consume(self._peek().type)
            right = self.parse_term()
            return BinaryOp(operator=operator.value, left=left, right=right)

        return left

    def parse_condition(self) -> Condition:
        """Parse `term == term`."""
        left = self.parse_term()
        self.consume(TokenType.EQ)
        right = self.parse_term()
        return Condition(left=left, right=right)

    def parse_term(self) -> Term:
        """
        Parse a number or an identifier.

        Raises:
            ExpectedTermError: If the current token is neither
        """
        if self._check(TokenType.NUMBER):
            return NumberLiteral(digits=self.consume(TokenType.NUMBER).value)
        if self._check(TokenType.IDENTIFIER):
            return self._parse_identifier()

        raise ExpectedTermError(None if self._at_end() else self._peek())

    def _parse_identifier(self) -> Identifier:
        return Identifier(name=self.consume(TokenType.IDENTIFIER).value)


# =============================================================================
# Parse Result
# =============================================================================

@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing one program.

    Exactly one of program and error is set.

    Attributes:
        program: The AST root on success
        error: What went wrong on failure
    """
    program: Optional[ProgramNode] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_program(tokens: list[Token]) -> ParseResult:
    """
    Parse a token list into a program.

    Args:
        tokens: Tokens from the lexer

    Returns:
        ParseResult holding either the ProgramNode or the ParseError.
        A failed parse never yields a partial tree.
    """
    try:
        program = Parser(tokens).parse()
    except MiniCSyntaxError as e:
        logger.debug(f"Parse failed: {e.message}")
        return ParseResult(error=e.to_parse_error())
    return ParseResult(program=program)
