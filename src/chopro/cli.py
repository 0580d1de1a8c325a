import json
import logging
import sys
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path

import click

from .chordpro import ChordProFormatter
from .exceptions import ReadError
from .models import Document
from .parser import parse
from .validator import validate

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool, log_level: str | None) -> None:
    if verbose:
        level = logging.DEBUG
    elif log_level:
        level = getattr(logging, log_level.upper(), logging.WARNING)
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _load(source) -> Document:
    """Parse an open binary file, exiting with status 1 if it cannot be read."""
    try:
        return parse(source)
    except ReadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _to_json(value):
    """Convert a document node to plain JSON-serialisable data."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value):
        data = {"type": type(value).__name__}
        for f in fields(value):
            data[f.name] = _to_json(getattr(value, f.name))
        return data
    if isinstance(value, (tuple, list)):
        return [_to_json(v) for v in value]
    return value


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.option("--log-level", envvar="CHOPRO_LOG_LEVEL", default=None, metavar="LEVEL",
              help="Logging level name (default: WARNING).")
def main(verbose: bool, log_level: str | None) -> None:
    """Parse ChordPro song sheets.

    \b
    FILE may be "-" to read from stdin.
    """
    _configure_logging(verbose, log_level)


@main.command()
@click.argument("source", type=click.File("rb"), metavar="FILE")
def check(source) -> None:
    """Report unterminated or unrecognised directives and chords."""
    name = getattr(source, "name", "<stdin>")
    document = _load(source)
    result = validate(document)
    for issue in result.issues:
        click.echo(f"{name}:{issue}")
    if not result.valid:
        noun = "issue" if len(result.issues) == 1 else "issues"
        click.echo(f"{len(result.issues)} {noun} in {name}", err=True)
        sys.exit(1)
    click.echo(f"OK: {name} ({len(document)} lines, "
               f"{result.metrics['directives']} directives)")


@main.command("format")
@click.argument("source", type=click.File("rb"), metavar="FILE")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: stdout).")
def format_command(source, output_path: str | None) -> None:
    """Rewrite FILE as ChordPro with canonical directive names."""
    chordpro_text = ChordProFormatter().render(_load(source))

    if output_path is None:
        click.echo(chordpro_text, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(chordpro_text, encoding="utf-8")
    click.echo(f"Written to {dest}")


@main.command()
@click.argument("source", type=click.File("rb"), metavar="FILE")
@click.option("--indent", default=2, show_default=True, help="JSON indentation.")
def dump(source, indent: int) -> None:
    """Print the parsed document of FILE as JSON."""
    document = _load(source)
    click.echo(json.dumps(_to_json(document), indent=indent, ensure_ascii=False))
