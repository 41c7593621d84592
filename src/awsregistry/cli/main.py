# src/awsregistry/cli/main.py
"""
This module is the main entry point for the awsregistry CLI.

It registers the catalog and snapshot commands on a single Typer app.
"""

import logging

import typer

from ..core.config import config
from . import catalog, snapshot

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="awsregistry",
    help="Inspect the stable identifiers of AWS regions and services.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of awsregistry.
    """
    if value:
        from .. import __version__

        typer.echo(f"awsregistry version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of awsregistry.
    """
    from .. import __version__

    typer.echo(f"awsregistry version: {__version__}")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    awsregistry CLI main entry point.
    """
    pass


app.command()(catalog.regions)
app.command()(catalog.services)
app.command()(catalog.parse)
app.command()(catalog.export)
app.command()(snapshot.snapshot)


if __name__ == "__main__":
    app()
