"""
Mini-C Compiler Main Module
===========================

This module provides the main compiler interface for Mini-C.
It runs the complete compilation process:

    Source → Lex → Parse → {Print AST, Generate} → Listing

Usage
-----
Command line:
    $ mcc program.txt

Programmatic:
    >>> from toyc.minic import compile_source
    >>> print(compile_source("int x; x = 5;"))
      MVI A, 5
      STA x

Compilation Pipeline
--------------------
1. **Lexical Analysis**: Convert source to tokens (never fails)
2. **Parsing**: Build the AST; the first syntax error aborts the run
3. **Printing**: Render the AST as an indented tree
4. **Code Generation**: Convert the AST to accumulator assembly

Each stage finishes before the next starts. A failed parse produces no
tree and no assembly.

Output Listing
--------------
The full listing is the printed tree, a blank line, the header line,
and then the instructions:

    Program
      Declaration
        Identifier
          x

    Assembly Code:
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from toyc.minic.lexer import tokenize
from toyc.minic.parser import parse_program
from toyc.minic.ast import ProgramNode, print_ast
from toyc.minic.codegen import CodeGenerator
from toyc.minic.errors import ParseError, MiniCCompilationError

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """Read a source file with every byte mapped to one character."""
    return path.read_bytes().decode("latin-1")


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        print_ast: Include the printed AST at the top of the listing
        header: Line separating the AST from the assembly
        instruction_indent: Prefix for instruction lines
        label_prefix: Text before the number in generated label names
    """
    print_ast: bool = True
    header: str = "Assembly Code:"
    instruction_indent: str = "  "
    label_prefix: str = "LABEL"


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        success: True if compilation succeeded
        assembly: Generated assembly (empty on failure)
        ast: Abstract syntax tree (None on failure)
        ast_text: The printed tree (empty on failure)
        token_count: Number of tokens lexed
        symbol_table: Variables declared by the program
        label_count: Labels allocated by the generator
        error: The parse failure, if any
        header: Header line used by listing
        include_ast: Whether listing starts with the printed tree
    """
    success: bool = False
    assembly: str = ""
    ast: Optional[ProgramNode] = None
    ast_text: str = ""
    token_count: int = 0
    symbol_table: dict[str, int] = field(default_factory=dict)
    label_count: int = 0
    error: Optional[ParseError] = None
    header: str = "Assembly Code:"
    include_ast: bool = True

    @property
    def listing(self) -> str:
        """The full driver output: tree, blank line, header, instructions."""
        if not self.success:
            return ""
        lines = []
        if self.include_ast:
            lines.append(self.ast_text)
            lines.append("")
        lines.append(self.header)
        if self.assembly:
            lines.append(self.assembly)
        return "\n".join(lines)


class MiniCCompiler:
    """
    Mini-C compiler.

    Example:
        compiler = MiniCCompiler()
        result = compiler.compile_source("int x; x = 5;")
        print(result.listing)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str) -> CompilerResult:
        """
        Compile Mini-C source code.

        Args:
            source: Mini-C source text

        Returns:
            CompilerResult; on a parse failure success is False and
            error describes it
        """
        result = CompilerResult(
            header=self.options.header,
            include_ast=self.options.print_ast,
        )

        tokens = tokenize(source)
        result.token_count = len(tokens)

        parsed = parse_program(tokens)
        if not parsed.ok:
            logger.debug(f"Compilation aborted: {parsed.error}")
            result.error = parsed.error
            return result

        result.ast = parsed.program
        result.ast_text = print_ast(parsed.program)

        generator = CodeGenerator(
            instruction_indent=self.options.instruction_indent,
            label_prefix=self.options.label_prefix,
        )
        result.assembly = generator.generate(parsed.program, result.symbol_table)
        result.label_count = generator.label_count
        result.success = True

        return result

    def compile_file(self, filepath: str) -> CompilerResult:
        """
        Compile a Mini-C source file.

        The file is read as raw bytes, one character per byte, so no input
        fails to decode. Bytes outside the language become UNKNOWN tokens.

        Raises:
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        return self.compile_source(read_source(path))


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_source(source: str, options: Optional[CompilerOptions] = None) -> str:
    """
    Compile Mini-C source code to assembly.

    Args:
        source: Mini-C source text
        options: Compiler configuration (defaults if None)

    Returns:
        The assembly listing, without the AST or header

    Raises:
        MiniCCompilationError: If parsing fails
    """
    result = MiniCCompiler(options).compile_source(source)
    if not result.success:
        raise MiniCCompilationError(result.error)
    return result.assembly


def compile_file(
    filepath: str,
    output_path: Optional[str] = None,
    options: Optional[CompilerOptions] = None,
) -> str:
    """
    Compile a Mini-C source file.

    Args:
        filepath: Path to the source file
        output_path: Optional path to write the full listing to
        options: Compiler configuration (defaults if None)

    Returns:
        The full listing (AST, header and assembly)

    Raises:
        MiniCCompilationError: If parsing fails
        FileNotFoundError: If source file not found
    """
    result = MiniCCompiler(options).compile_file(filepath)
    if not result.success:
        raise MiniCCompilationError(result.error)

    if output_path:
        Path(output_path).write_text(result.listing + "\n", encoding="utf-8")

    return result.listing
