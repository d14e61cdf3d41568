"""Click commands for the ``auditdiff`` script."""

from __future__ import annotations

import json
from typing import IO, Any

import click

from auditdiff import __version__
from auditdiff.diff import ABSENT, calculate_diff
from auditdiff.observability.logging import setup_logging


def _load_json(stream: IO[str], param_hint: str) -> Any:
    try:
        return json.load(stream)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint=param_hint) from exc
    except RecursionError as exc:
        raise click.BadParameter("JSON nested too deeply", param_hint=param_hint) from exc


@click.group()
@click.version_option(__version__, prog_name="auditdiff")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    show_default=True,
    help="Diagnostics level (written to stderr).",
)
def cli(log_level: str) -> None:
    """Compute audit-trail diffs between JSON documents."""
    setup_logging(log_level, json_output=False)


@cli.command()
@click.argument("before", type=click.File("r", encoding="utf-8"))
@click.argument("after", type=click.File("r", encoding="utf-8"))
@click.option("--indent", type=click.IntRange(min=0), default=2, show_default=True, help="JSON indent width.")
def diff(before: IO[str], after: IO[str], indent: int) -> None:
    """Print what changed from BEFORE to AFTER.

    Each argument is a path to a JSON file, or ``-`` for stdin.  Prints
    ``{}`` when there is nothing to report.  An indent of 0 prints
    compact JSON.
    """
    old = _load_json(before, "BEFORE")
    new = _load_json(after, "AFTER")
    result = calculate_diff(old, new)
    click.echo(json.dumps({} if result is ABSENT else result, indent=indent or None, ensure_ascii=False))
