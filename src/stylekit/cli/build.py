"""CLI command: stylekit build -- compile a style file into a Python module."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylekit.compiler import compile_source, render_module
from stylekit.config import CompilerConfig
from stylekit.errors import CompileError


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Write the module here instead of stdout")
@click.option("--import", "imports", multiple=True,
              help="Extra import line for the generated module (repeatable)")
@click.option("--prefix", default="css-", show_default=True,
              help="Prefix of generated class names")
@click.option("--pretty", is_flag=True, help="One declaration per line in the CSS")
def build(
    source: str,
    output: str | None,
    imports: tuple[str, ...],
    prefix: str,
    pretty: bool,
) -> None:
    """Compile every style block in SOURCE into a Python module.

    Each block becomes a Classes subclass named after its result type.
    """
    src_path = Path(source)
    config = CompilerConfig(class_prefix=prefix, pretty=pretty)

    try:
        compiled = compile_source(src_path.read_text(encoding="utf-8"), config)
    except CompileError as exc:
        click.echo(f"Compile error: {exc}", err=True)
        sys.exit(1)

    module = render_module(compiled, imports=imports, source_name=src_path.name)

    if output is None:
        click.echo(module, nl=False)
        return

    Path(output).write_text(module, encoding="utf-8")
    names = ", ".join(c.signature.result_type for c in compiled)
    click.echo(f"Wrote {output} ({len(compiled)} style block(s): {names})", err=True)
