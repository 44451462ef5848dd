"""
quirklex - Quirk Token Listing Command-Line Interface
=====================================================

This module implements the command-line driver for the Quirk lexer. It
scans a source file to end of input and prints one line per token:

    line:column<TAB>KIND<TAB>text

The EOF token itself is not printed.

Usage Examples
--------------
Scan the default input file (Quirk.test in the current directory):
    $ quirklex

Scan a named file, or standard input:
    $ quirklex program.qk
    $ cat program.qk | quirklex -

Opt in to keywords and two-character operators:
    $ quirklex --keywords --merge-operators program.qk

Fail the build if the source contains illegal characters:
    $ quirklex --fail-on-illegal program.qk
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from quirk import __version__
from quirk.cli.errors import ExitCode, handle_cli_exception
from quirk.config import LexerConfig
from quirk.lexer import Lexer
from quirk.tokens import TokenKind


logger = logging.getLogger(__name__)

DEFAULT_INPUT = Path("Quirk.test")


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def list_tokens(lexer: Lexer) -> int:
    """
    Print the token listing for a lexer's whole input.

    Returns:
        The number of ILLEGAL tokens printed
    """
    illegal = 0
    while True:
        token = lexer.scan()
        if token.kind is TokenKind.EOF:
            return illegal
        if token.kind is TokenKind.ILLEGAL:
            illegal += 1
        click.echo(token.format())


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    default=DEFAULT_INPUT,
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--keywords/--no-keywords",
    default=None,
    help="Report fn, var, if, else, return and loop as keywords "
         "instead of identifiers. Default: off (or $QUIRK_KEYWORDS).",
)
@click.option(
    "--merge-operators/--no-merge-operators",
    default=None,
    help="Scan ==, >= and <= as single tokens. "
         "Default: off (or $QUIRK_MERGE_OPERATORS).",
)
@click.option(
    "-e", "--encoding",
    default=None,
    help="Source encoding. Default: utf-8 (or $QUIRK_ENCODING).",
)
@click.option(
    "--fail-on-illegal",
    is_flag=True,
    help="Exit with status 1 if any ILLEGAL token was found",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="quirklex")
def main(
    input_file: Path,
    keywords: Optional[bool],
    merge_operators: Optional[bool],
    encoding: Optional[str],
    fail_on_illegal: bool,
    verbose: bool,
) -> None:
    """
    Print the tokens of a Quirk source file.

    INPUT_FILE is the source to scan (default: Quirk.test). Use - to
    read standard input.

    \b
    Examples:
        quirklex                     # Scans ./Quirk.test
        quirklex prog.qk --keywords  # Recognize reserved words
        quirklex - < prog.qk         # Read standard input
    """
    setup_logging(verbose)

    try:
        config = LexerConfig.from_env().with_overrides(
            merge_operators=merge_operators,
            keywords=keywords,
            encoding=encoding,
        )
        logger.debug(f"Lexer configuration: {config}")

        if str(input_file) == "-":
            stream = sys.stdin.buffer
            illegal = list_tokens(Lexer(stream, "<stdin>", config))
        else:
            with open(input_file, "rb") as stream:
                illegal = list_tokens(Lexer(stream, str(input_file), config))

    except Exception as e:
        handle_cli_exception(e, verbose)

    if illegal:
        logger.debug(f"{illegal} illegal character(s) in {input_file}")
        if fail_on_illegal:
            sys.exit(ExitCode.SCAN_ERROR)

    sys.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
