"""
toyc Error Hierarchy
====================

This module defines the root of the exception hierarchy for toyc.
All exceptions raised by the toolchain inherit from ToycError, allowing
callers to catch every toyc-related error with a single except clause.

Exception Hierarchy
-------------------
ToycError (base)
└── MiniCError (toyc.minic.errors)
    ├── MiniCSyntaxError - parser syntax errors
    │   ├── UnexpectedTokenError - token does not match the grammar
    │   └── ExpectedTermError - no number or identifier where one is required
    ├── MiniCCompilationError - aggregate failure reported by the compiler
    └── CodeGenError - AST node the code generator cannot handle

Design Philosophy
-----------------
Mini-C source carries no position information, so errors describe only
what went wrong, never where. Messages follow this format:

    error: description
    hint: suggestion for fixing (when available)
"""


# =============================================================================
# Base Exception Class
# =============================================================================

class ToycError(Exception):
    """
    Base exception for all toyc errors.

    All exceptions in the package inherit from this class, allowing callers
    to catch all toyc errors with a single except clause:

        try:
            listing = compile_source("int x;")
        except ToycError as e:
            print(f"Error: {e}")
    """
    pass
