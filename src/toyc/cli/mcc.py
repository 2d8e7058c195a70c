"""
mcc - Mini-C Compiler Command-Line Interface
============================================

This module implements the command-line interface for the Mini-C compiler.

Usage Examples
--------------
Compile test.txt in the current directory:
    $ mcc

Compile a specific file:
    $ mcc program.txt

Write the listing to a file:
    $ mcc program.txt -o program.asm

Print only the AST:
    $ mcc --ast-only program.txt

Write only the AST to a file:
    $ mcc --ast-only program.txt -o program.ast

Verbose mode:
    $ mcc -v program.txt
"""

import logging
from pathlib import Path
from typing import Optional

import click

from toyc import __version__
from toyc.minic import MiniCCompiler, CompilerOptions
from toyc.minic.compiler import read_source
from toyc.minic.errors import MiniCCompilationError
from toyc.cli.errors import handle_cli_exception

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "test.txt"


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    default=DEFAULT_INPUT,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the listing to this file instead of stdout",
)
@click.option(
    "--ast-only",
    is_flag=True,
    help="Output only the AST, without the assembly",
)
@click.option(
    "--no-ast",
    is_flag=True,
    help="Leave the AST out of the listing",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mcc")
def main(
    input_file: Path,
    output: Optional[Path],
    ast_only: bool,
    no_ast: bool,
    verbose: bool,
) -> None:
    """
    Compile a Mini-C program to accumulator assembly.

    INPUT_FILE is the Mini-C source to compile (default: test.txt).

    The listing holds the AST, a blank line, the "Assembly Code:"
    header and then one instruction or label per line.

    \b
    Examples:
        mcc                          # Compiles test.txt
        mcc prog.txt -o prog.asm     # Write listing to a file
        mcc --ast-only prog.txt      # Show the tree only
        mcc -v prog.txt              # Debug logging and counts
    """
    setup_logging(verbose)

    options = CompilerOptions(print_ast=not no_ast)

    try:
        logger.debug(f"Compiling {input_file}")
        source = read_source(input_file)

        result = MiniCCompiler(options).compile_source(source)
        if not result.success:
            raise MiniCCompilationError(result.error)

        text = result.ast_text if ast_only else result.listing

        if output is not None:
            output.write_text(text + "\n", encoding="utf-8")
            click.echo(f"Compiled {input_file} -> {output}")
        else:
            click.echo(text)

        if verbose:
            click.echo(f"Tokenized: {result.token_count} tokens", err=True)
            click.echo(f"Parsed: {len(result.ast.statements)} statements", err=True)
            click.echo(f"Symbols: {', '.join(result.symbol_table) or '(none)'}", err=True)
            click.echo(f"Labels: {result.label_count}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
