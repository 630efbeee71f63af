"""stylekit CLI entry point: Click group with subcommands."""

import logging

import click

from stylekit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylekit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """stylekit - compile CSS-like style blocks into Python classes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from stylekit.cli.build import build  # noqa: E402
from stylekit.cli.check import check  # noqa: E402
from stylekit.cli.inspect import inspect  # noqa: E402
from stylekit.cli.render import render  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(inspect)
cli.add_command(render)
