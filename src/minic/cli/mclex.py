"""
mclex - minic Token Dump
========================

Prints the token stream the lexer produces for a source file. Useful
for checking how source text is split before it reaches the parser.

Usage Examples
--------------
Dump tokens:
    $ mclex main.c
    1:1     KEYWORD      'int'
    1:5     IDENTIFIER   'main'
    ...

Include whitespace tokens:
    $ mclex --all main.c

JSON output:
    $ mclex --json main.c
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from minic import __version__
from minic.cli.errors import handle_cli_exception
from minic.lexer import Lexer, LexerOptions
from minic.tokens import Token

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token) -> str:
    """Format a token as one aligned listing line."""
    position = f"{token.line}:{token.column}"
    if token.value is None:
        return f"{position:<8}{token.kind.name}"
    return f"{position:<8}{token.kind.name:<13}{token.value!r}"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print tokens as a JSON array",
)
@click.option(
    "-a", "--all", "include_whitespace",
    is_flag=True,
    help="Include whitespace tokens",
)
@click.option(
    "--line-number",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Line number of the first line of the file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mclex")
def main(
    input_file: Path,
    output: Optional[Path],
    as_json: bool,
    include_whitespace: bool,
    line_number: int,
    verbose: bool,
) -> None:
    """
    Tokenize a minic source file and print the tokens.

    INPUT_FILE is the source file to lex.

    \b
    Examples:
        mclex main.c                 # One token per line
        mclex --json main.c          # JSON array
        mclex -a main.c              # Keep whitespace tokens
        mclex main.c -o main.tok     # Write to a file
    """
    setup_logging(verbose)

    try:
        source = input_file.read_text(encoding="utf-8")
        lexer = Lexer(LexerOptions(filename=str(input_file), line_number=line_number))

        if include_whitespace:
            tokens = list(lexer.scan(source))
        else:
            tokens = lexer.tokenize(source)

        logger.debug(f"{input_file}: {len(tokens)} tokens")

        if as_json:
            text = json.dumps([t.to_dict() for t in tokens], indent=2)
        else:
            text = "\n".join(format_token(t) for t in tokens)

        if output is not None:
            output.write_text(text + "\n", encoding="utf-8")
            click.echo(f"Lexed {input_file} -> {output}")
        elif text:
            click.echo(text)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
