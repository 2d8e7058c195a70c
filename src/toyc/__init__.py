"""
toyc - Mini-C to Accumulator Assembly Translator
================================================

This package translates programs written in Mini-C, a tiny imperative
language, into a textual assembly listing for a simple accumulator
machine using 8080-style mnemonics.

Mini-C has integer variable declarations, assignment of a number, a
variable or one `+`/`-` operation, and `if` statements guarded by an
equality test:

    int x;
    int y;
    x = 1;
    if (x == 1) { y = x + 2; }

Main Components
---------------
- **minic**: the compiler (lexer, parser, AST printer, code generator)
- **cli**: the `mcc` command-line tool

Quick Start
-----------
    >>> from toyc import MiniCCompiler
    >>> result = MiniCCompiler().compile_source("int x; x = 5;")
    >>> print(result.listing)
    Program
      Declaration
        Identifier
          x
      Assignment
        Identifier
          x
        Number
          5
    <BLANKLINE>
    Assembly Code:
      MVI A, 5
      STA x

Or use the command-line tool:
    $ mcc program.txt
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from toyc.errors import ToycError
from toyc.minic import (
    MiniCCompiler,
    CompilerOptions,
    CompilerResult,
    compile_source,
    compile_file,
    MiniCError,
    MiniCSyntaxError,
    MiniCCompilationError,
    ParseError,
    ParseErrorKind,
)

__all__ = [
    "__version__",
    "ToycError",
    "MiniCCompiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_source",
    "compile_file",
    "MiniCError",
    "MiniCSyntaxError",
    "MiniCCompilationError",
    "ParseError",
    "ParseErrorKind",
]
