"""
Command-line interface for message comparison.

Commands:
- messages: Compare a received message file against a model message file
- field: Compare two literal values with one of the field comparators
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from .comparators import COMPARATORS, comparator_for
from .config import settings
from .loader import MessageFormatError, load_message
from .report import comparison_to_dict, format_comparison, format_field

logger = logging.getLogger(__name__)


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from PACKET_COMPARE_LOG_LEVEL).")
def cli(log_level):
    """Score received packet messages against a model message."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("expected", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("actual", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the comparison as JSON.")
@click.option("--show-all", is_flag=True, help="List matching fields as well as mismatches.")
def messages(expected: Path, actual: Path, as_json: bool, show_all: bool):
    """Compare the ACTUAL message file against the EXPECTED model."""
    try:
        model = load_message(expected)
        received = load_message(actual)
    except MessageFormatError as exc:
        raise click.ClickException(str(exc)) from exc

    try:
        result = model.compare(received)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    logger.info("Compared %s against %s: %d/%d", actual, expected, result.score, result.out_of)

    if as_json:
        click.echo(json.dumps(comparison_to_dict(result), indent=2))
    else:
        click.echo(format_comparison(result, show_all=show_all))


@cli.command()
@click.argument("kind", type=click.Choice(sorted(COMPARATORS), case_sensitive=False))
@click.argument("expected")
@click.argument("actual")
@click.option("--label", default="Value", help="Field label to show in the output.")
@click.option("--json", "as_json", is_flag=True, help="Print the comparison as JSON.")
def field(kind: str, expected: str, actual: str, label: str, as_json: bool):
    """Compare two values of a single field of the given KIND."""
    cf = comparator_for(kind).compare(label, expected, actual)
    if cf is None:
        click.echo(f"Fields of kind {kind!r} are not compared.")
        return
    if as_json:
        click.echo(json.dumps(cf.to_dict(), indent=2))
    else:
        click.echo(format_field(cf))


def main():
    cli()


if __name__ == "__main__":
    main()
