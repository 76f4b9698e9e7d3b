"""
Unified CLI Error Handling
==========================

Provides consistent error reporting and exit codes for the pl0c tool.
Every diagnostic is written to stderr with the 'pl0c: error:' prefix.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

PROG_NAME = "pl0c"


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    ERROR = 1            # Lexical error, bad input file or bad usage
    INTERNAL_ERROR = 3   # Unexpected internal error


def fail(message: str) -> NoReturn:
    """Print a single diagnostic line and exit with ExitCode.ERROR."""
    click.echo(f"{PROG_NAME}: error: {message}", err=True)
    sys.exit(ExitCode.ERROR)


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception raised while running the tool and exit.

    Lexical errors are reported as '<line>: <message>'. In verbose mode
    the full report with the source line, caret and hint follows.

    Args:
        error: The exception that was raised
        verbose: If True, print extra context and tracebacks

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from pl0c.errors import InputError, LexicalError

    if isinstance(error, LexicalError):
        click.echo(f"{PROG_NAME}: error: {error.diagnostic}", err=True)
        if verbose:
            click.echo(str(error), err=True)
        sys.exit(ExitCode.ERROR)

    elif isinstance(error, InputError):
        fail(error.message)

    else:
        click.echo(f"{PROG_NAME}: internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
