"""CLI command: stylekit render -- print the stylesheet a style file produces."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from stylekit.compiler import compile_styles
from stylekit.errors import CompileError
from stylekit.runtime import EmptyTheme, MappingTheme, StringBackend, StyleProvider


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--theme", "theme_file", type=click.Path(exists=True, dir_okay=False),
              default=None, help="JSON object used as the theme")
@click.option("--html", is_flag=True, help="Wrap the output in a <style> element")
def render(source: str, theme_file: str | None, html: bool) -> None:
    """Mount every style block in SOURCE and print the resulting CSS.

    Blocks are mounted in file order on a single provider, so class numbers
    continue from one block to the next.
    """
    theme: object = EmptyTheme()
    if theme_file:
        data = json.loads(Path(theme_file).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            click.echo("Theme file must contain a JSON object", err=True)
            sys.exit(1)
        theme = MappingTheme(data)

    try:
        classes = compile_styles(Path(source).read_text(encoding="utf-8"))
    except CompileError as exc:
        click.echo(f"Compile error: {exc}", err=True)
        sys.exit(1)

    backend = StringBackend()
    provider = StyleProvider(backend, theme)
    try:
        for cls in classes.values():
            provider.add_classes(cls)
    except (AttributeError, KeyError, NameError, TypeError) as exc:
        click.echo(f"Render error: {exc}", err=True)
        sys.exit(1)

    click.echo(backend.to_html() if html else backend.css, nl=html)
