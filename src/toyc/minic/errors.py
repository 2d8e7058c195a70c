"""
Mini-C Compiler Error Hierarchy
===============================

This module defines the exception hierarchy for the Mini-C compiler.
All exceptions inherit from MiniCError, which itself inherits from
the base ToycError for consistent error handling across the package.

Exception Hierarchy
-------------------
MiniCError (base for all Mini-C errors)
├── MiniCSyntaxError - parser syntax errors
│   ├── UnexpectedTokenError - consume() found the wrong token
│   └── ExpectedTermError - no number or identifier where a term belongs
├── MiniCCompilationError - compile failure wrapping a ParseError
└── CodeGenError - code generation errors

Parse failures are also available as plain values: ParseError records the
kind of failure, its fixed message and the token involved. The parser's
public entry point returns one inside a ParseResult instead of raising.

Error Message Format
--------------------
    error: Unexpected token
    hint: found '@'
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from toyc.errors import ToycError
from toyc.minic.lexer import Token


# =============================================================================
# Base Mini-C Exception
# =============================================================================

class MiniCError(ToycError):
    """
    Base exception for all Mini-C compiler errors.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with its optional hint."""
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Parse Error Values
# =============================================================================

class ParseErrorKind(Enum):
    """The only two ways a Mini-C parse can fail."""

    UNEXPECTED_TOKEN = "Unexpected token"
    EXPECTED_TERM = "Expected term"


@dataclass(frozen=True)
class ParseError:
    """
    Structured description of a failed parse.

    Attributes:
        kind: Which failure occurred
        token: The offending token, or None at end of input
    """
    kind: ParseErrorKind
    token: Optional[Token] = None

    @property
    def message(self) -> str:
        """The fixed message for this failure kind."""
        return self.kind.value

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Syntax Errors (Parser)
# =============================================================================

class MiniCSyntaxError(MiniCError):
    """
    Syntax error in Mini-C source code.

    Raised by the parser when the token stream does not follow the
    grammar. Parsing never recovers: the first syntax error ends it.
    """

    kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_TOKEN

    def __init__(self, token: Optional[Token] = None):
        self.token = token
        if token is None:
            hint = "reached end of input"
        else:
            hint = f"found {token.value!r}"
        super().__init__(self.kind.value, hint=hint)

    def to_parse_error(self) -> ParseError:
        """Convert to the ParseError value returned by parse_program()."""
        return ParseError(kind=self.kind, token=self.token)


class UnexpectedTokenError(MiniCSyntaxError):
    """
    Unexpected token during parsing.

    Raised when the token at the cursor is not the one the current
    grammar rule requires, including when the tokens run out.
    """

    kind = ParseErrorKind.UNEXPECTED_TOKEN


class ExpectedTermError(MiniCSyntaxError):
    """
    A term is missing.

    Raised when a number or identifier is required but the cursor is
    at some other token.
    """

    kind = ParseErrorKind.EXPECTED_TERM


# =============================================================================
# Compilation Errors
# =============================================================================

class MiniCCompilationError(MiniCError):
    """
    Compilation failed.

    Raised by the convenience compile functions when the parse fails.
    The ParseError value is kept for programmatic inspection.
    """

    def __init__(self, error: ParseError):
        self.error = error
        super().__init__(error.message)

    def _format_message(self) -> str:
        """Return the bare parse message, as the driver reports it."""
        return self.message


class CodeGenError(MiniCError):
    """
    Code generation error.

    Raised when the generator is handed a node type it has no rule for.
    Trees produced by the parser never trigger it.
    """
    pass
