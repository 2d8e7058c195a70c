"""
mcc Exit Codes and Error Reporting
==================================

Maps the failures a compile run can hit onto mcc's exit status:

- A Mini-C parse failure prints ``Error: <message>`` and exits 1. The
  message is the bare parse error text, e.g. ``Error: Unexpected token``.
- Other toyc errors (such as a code generation error) print their
  formatted message and hint and also exit 1.
- A source or output file that cannot be opened exits 2, the same status
  click uses for a bad argument.
- Anything else is a bug in the compiler and exits 3; ``-v`` adds the
  traceback.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from toyc.errors import ToycError
from toyc.minic.errors import MiniCCompilationError


class ExitCode(IntEnum):
    """Exit status of an mcc run."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Program rejected by the parser or generator
    INVALID_ARGS = 2     # Unreadable input or unwritable output
    INTERNAL_ERROR = 3   # Compiler bug


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception raised during an mcc run and exit.

    Args:
        error: The exception raised while compiling
        verbose: Print the traceback for internal errors

    Raises:
        SystemExit: Always, with the matching ExitCode
    """
    if isinstance(error, MiniCCompilationError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    if isinstance(error, ToycError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    if isinstance(error, OSError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
