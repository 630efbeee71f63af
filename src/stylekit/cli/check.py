"""CLI command: stylekit check -- parse and validate a style file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylekit.model.diagnostic import Severity
from stylekit.parser import ParseError, parse_styles
from stylekit.validation import validate_module


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def check(source: str) -> None:
    """Parse and validate a style file.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    src_path = Path(source)

    try:
        styles = parse_styles(src_path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    diagnostics = validate_module(styles)

    if not diagnostics:
        click.echo(f"OK: {src_path.name} is valid ({len(styles)} style block(s))")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
