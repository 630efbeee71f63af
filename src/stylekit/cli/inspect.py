"""CLI command: stylekit inspect -- display compiled style structure."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylekit.compiler import compile_source
from stylekit.errors import CompileError


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def inspect(source: str) -> None:
    """Compile a style file and show each block's classname table and template."""
    try:
        compiled = compile_source(Path(source).read_text(encoding="utf-8"))
    except CompileError as exc:
        click.echo(f"Compile error: {exc}", err=True)
        sys.exit(1)

    for i, style in enumerate(compiled):
        if i:
            click.echo()
        sig = style.signature
        click.echo(f"Style: {sig.result_type} ({sig.theme_var}: {sig.theme_type})")
        click.echo(f"Slots: {style.slot_count}")

        click.echo("Classnames:")
        for name in style.table.names():
            click.echo(f"  {style.table[name]:>3}  {name}")

        values = style.output.value_expressions
        if values:
            click.echo("Values:")
            for expression in values:
                click.echo(f"  {expression}")

        click.echo("Template:")
        for line in style.output.template.splitlines():
            click.echo(f"  {line}")
