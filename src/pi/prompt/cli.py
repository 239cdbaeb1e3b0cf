"""CLI entry point for pi-prompt. Uses Click for argument parsing.

Asks one question on the terminal and prints the answer to stdout, so it
can be used from shell scripts::

    branch=$(pi-prompt "Branch?" --suggest-file branches.txt)
"""

from __future__ import annotations

import logging
import sys

import click

from pi.prompt import validator as validators
from pi.prompt.errors import PromptInterruptedError, PromptIOError
from pi.prompt.fuzzy import fuzzy_suggestor
from pi.prompt.text import Text

EXIT_INTERRUPTED = 130


def _load_candidates(words: tuple[str, ...], suggest_file) -> list[str]:
    candidates = list(words)
    if suggest_file is not None:
        candidates.extend(line.strip() for line in suggest_file if line.strip())
    return candidates


@click.command()
@click.argument("message")
@click.option("--default", default=None, help="Answer used when the input is left empty")
@click.option("--help-message", default=None, help="Help line shown under the prompt")
@click.option("--page-size", type=click.IntRange(min=1), default=None, help="Suggestions visible at once")
@click.option("--suggest", "words", multiple=True, help="Suggestion candidate (repeatable)")
@click.option("--suggest-file", type=click.File("r"), default=None, help="File with one candidate per line")
@click.option("--required", is_flag=True, help="Reject an empty answer")
@click.option("--min-length", type=click.IntRange(min=0), default=None, help="Minimum answer length")
@click.option("--max-length", type=click.IntRange(min=0), default=None, help="Maximum answer length")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Logging level (logs go to stderr)",
)
def main(
    message, default, help_message, page_size, words, suggest_file,
    required, min_length, max_length, log_level,
):
    """Ask MESSAGE on the terminal and print the answer."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    text = Text(message)
    if default is not None:
        text = text.with_default(default)
    if help_message is not None:
        text = text.with_help_message(help_message)
    if page_size is not None:
        text = text.with_page_size(page_size)

    candidates = _load_candidates(words, suggest_file)
    if candidates:
        text = text.with_suggestor(fuzzy_suggestor(candidates))

    checks = []
    if required:
        checks.append(validators.required())
    if min_length is not None:
        checks.append(validators.min_length(min_length))
    if max_length is not None:
        checks.append(validators.max_length(max_length))
    if checks:
        text = text.with_validator(validators.chain(*checks))

    try:
        answer = text.prompt(output=sys.stderr)
    except PromptInterruptedError:
        sys.exit(EXIT_INTERRUPTED)
    except PromptIOError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(answer)


if __name__ == "__main__":
    main()
