"""
pl0c - PL/0 Tokenizer Command-Line Interface
============================================

Tokenizes a PL/0 source file and prints one line per token:

    <line>:<TAB><KIND>, <text>

followed by 'done'. Tokenizing stops at the first '.', or at the end of
the file, which counts as an implicit '.'.

Usage Examples
--------------
Dump the tokens of a program:
    $ pl0c square.pl0
    1:	VAR, var
    1:	IDENT, x
    ...
    done

Reject programs without the final '.':
    $ pl0c --strict square.pl0

Debug logging and full error context:
    $ pl0c -v square.pl0
"""

import logging

import click

from pl0c import __version__
from pl0c.cli.errors import PROG_NAME, fail, handle_cli_exception
from pl0c.lexer import ScannerOptions, Token, tokenize
from pl0c.source import read_source

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def format_token(token: Token) -> str:
    """Format a token as '<line>:<TAB><KIND>, <text>'."""
    return f"{token.line}:\t{token.kind.display_name}, {token.text}"


class Pl0cCommand(click.Command):
    """Command that reports usage errors as 'pl0c: error:' with exit status 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            fail(e.format_message())


# =============================================================================
# CLI Definition
# =============================================================================

@click.command(cls=Pl0cCommand)
@click.argument("files", nargs=-1, metavar="FILE")
@click.option(
    "--strict",
    is_flag=True,
    help="Require the program to end with '.' instead of treating end of file as one",
)
@click.option(
    "--bits",
    type=click.IntRange(min=2),
    default=64,
    show_default=True,
    help="Width of the signed integer type number literals must fit",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Debug logging and full error context",
)
@click.version_option(version=__version__, prog_name=PROG_NAME)
def main(
    files: tuple[str, ...],
    strict: bool,
    bits: int,
    verbose: bool,
) -> None:
    """
    Tokenize a PL/0 program and print its tokens.

    FILE is the PL/0 source file; its name must end in '.pl0'.

    \b
    Examples:
        pl0c square.pl0            # Print the token stream
        pl0c --strict square.pl0   # Require the final '.'
        pl0c -v square.pl0         # Debug output
    """
    setup_logging(verbose)

    if len(files) != 1:
        fail(f"usage: {PROG_NAME} <file>.pl0")

    input_file = files[0]
    options = ScannerOptions(number_bits=bits, require_terminator=strict)

    try:
        source = read_source(input_file)
        tokens = tokenize(source, input_file, options)
    except Exception as e:
        handle_cli_exception(e, verbose)

    logger.debug(f"Printing {len(tokens)} tokens from {input_file}")
    for token in tokens:
        click.echo(format_token(token))
    click.echo("done")


if __name__ == "__main__":
    main()
