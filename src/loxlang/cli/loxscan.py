"""
loxscan - Lox Scanner Command-Line Interface
============================================

Scans a Lox source file and prints the token sequence the parser would
receive. Lexical errors are reported on stderr; every error in the file
is shown in one run.

Usage Examples
--------------
Print tokens:
    $ loxscan hello.lox

Machine-readable output:
    $ loxscan --json hello.lox

Report errors but exit 0:
    $ loxscan -k hello.lox

Verbose mode:
    $ loxscan -v hello.lox
"""

import json
import sys
from pathlib import Path

import click

from loxlang import __version__
from loxlang.cli.errors import ExitCode, handle_cli_exception
from loxlang.config import LoxConfig
from loxlang.driver import Driver
from loxlang.scanner import Token


def format_token(token: Token) -> str:
    """One-line text form of a token: LINE:COL TYPE 'lexeme'."""
    return f"{token.line}:{token.column} {token.type.name} {token.lexeme!r}"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print tokens as a JSON array",
)
@click.option(
    "-k", "--keep-going",
    is_flag=True,
    help="Exit successfully even when lexical errors are found",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="loxscan")
def main(
    input_file: Path,
    as_json: bool,
    keep_going: bool,
    verbose: bool,
) -> None:
    """
    Scan a Lox source file and print its tokens.

    INPUT_FILE is the Lox source file to scan.

    \b
    Examples:
        loxscan hello.lox            # One token per line
        loxscan --json hello.lox     # JSON array of tokens
        loxscan -k hello.lox         # Do not fail on lexical errors

    \b
    Environment:
        LOX_LOG_LEVEL        Logging level (default: INFO)
        LOX_FAIL_ON_ERROR    Set to 0 to behave like --keep-going
    """
    config = LoxConfig.from_env()
    if keep_going:
        config.fail_on_error = False
    config.configure_logging(verbose)

    driver = Driver(config)

    try:
        if verbose:
            click.echo(f"Scanning {input_file}...", err=True)

        result = driver.run_file(input_file)

    except Exception as e:
        handle_cli_exception(e, verbose)

    if as_json:
        click.echo(json.dumps([t.to_dict() for t in result.tokens], indent=2))
    else:
        for token in result.tokens:
            click.echo(format_token(token))

    if verbose:
        click.echo(f"Tokenized: {len(result.tokens)} tokens", err=True)

    if result.has_errors:
        count = len(result.errors)
        click.echo(f"{input_file}: {count} {'error' if count == 1 else 'errors'}", err=True)

    if not driver.should_continue():
        sys.exit(ExitCode.SCAN_ERROR)


if __name__ == "__main__":
    main()
