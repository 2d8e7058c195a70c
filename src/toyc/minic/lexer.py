"""
Mini-C Lexer (Tokenizer)
========================

This module implements a lexer for the Mini-C language.
It converts source text into a sequence of tokens for the parser.

Token Categories
----------------
- Keywords: int, if
- Identifiers: runs of letters (no digits, no underscores)
- Numbers: runs of decimal digits, kept as text
- Operators: =, ==, +, -
- Delimiters: (, ), {, }, ;
- Unknown: any other single character

The lexer never fails. Characters it does not recognize become UNKNOWN
tokens, and the parser rejects them if they appear where a real token
is required.

Example Usage
-------------
>>> from toyc.minic.lexer import tokenize
>>> for token in tokenize("x = y + 3;"):
...     print(token)
Token(IDENTIFIER, 'x')
Token(ASSIGN, '=')
Token(IDENTIFIER, 'y')
Token(PLUS, '+')
Token(NUMBER, '3')
Token(SEMICOLON, ';')
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator
import logging
import string

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Mini-C language.

    Keywords are distinguished from identifiers to simplify parsing.
    """

    # === Identifiers and Literals ===
    IDENTIFIER = auto()     # Variable names
    NUMBER = auto()         # Integer literals (digits only)

    # === Keywords ===
    INT = auto()            # int
    IF = auto()             # if

    # === Operators ===
    ASSIGN = auto()         # =
    EQ = auto()             # ==
    PLUS = auto()           # +
    MINUS = auto()          # -

    # === Delimiters ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    SEMICOLON = auto()      # ;

    # === Anything Else ===
    UNKNOWN = auto()        # Unrecognized single character

    # Parser end-of-input sentinel, never produced by the lexer
    EOF = auto()


# =============================================================================
# Keyword and Operator Tables
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    "int": TokenType.INT,
    "if": TokenType.IF,
}

SINGLE_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    ";": TokenType.SEMICOLON,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from Mini-C source.

    Attributes:
        type: The TokenType classification
        value: The exact source text the token was scanned from
    """
    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Mini-C source code.

    Scans left to right one logical unit at a time: whitespace is skipped,
    letter runs become keywords or identifiers, digit runs become numbers,
    and everything else is a one- or two-character operator or an
    UNKNOWN token.

    Usage:
        tokens = list(Lexer(source).tokenize())
    """

    WHITESPACE = " \t\n\r\f\v"
    LETTERS = string.ascii_letters
    DIGITS = string.digits

    def __init__(self, source: str):
        self.source = source
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code.

        Yields:
            Token objects in source order
        """
        while not self._at_end():
            char = self._peek()

            if char in self.WHITESPACE:
                self._advance()
                continue

            yield self._scan_token()

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """Look at a character without advancing; empty string past the end."""
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        char = self.source[self._pos]
        self._pos += 1
        return char

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Token:
        """Scan the next token. Whitespace has already been skipped."""
        char = self._peek()

        if char == "=":
            self._advance()
            if self._peek() == "=":
                self._advance()
                return Token(TokenType.EQ, "==")
            return Token(TokenType.ASSIGN, "=")

        if char in SINGLE_TOKENS:
            self._advance()
            return Token(SINGLE_TOKENS[char], char)

        if char in self.LETTERS:
            return self._scan_word()

        if char in self.DIGITS:
            return self._scan_number()

        self._advance()
        logger.debug(f"Unrecognized character {char!r}")
        return Token(TokenType.UNKNOWN, char)

    def _scan_word(self) -> Token:
        """
        Scan a keyword or identifier.

        Only letters are allowed, so 'x1' scans as the identifier 'x'
        followed by the number '1'.
        """
        start = self._pos
        while self._peek() and self._peek() in self.LETTERS:
            self._advance()
        word = self.source[start:self._pos]

        return Token(KEYWORDS.get(word, TokenType.IDENTIFIER), word)

    def _scan_number(self) -> Token:
        """Scan a run of digits, keeping the text verbatim."""
        start = self._pos
        while self._peek() and self._peek() in self.DIGITS:
            self._advance()
        return Token(TokenType.NUMBER, self.source[start:self._pos])


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str) -> list[Token]:
    """
    Tokenize Mini-C source into a list of tokens.

    Args:
        source: Mini-C source text

    Returns:
        Tokens in source order (no end-of-input token)
    """
    tokens = list(Lexer(source).tokenize())
    logger.debug(f"Tokenized {len(tokens)} tokens")
    return tokens
