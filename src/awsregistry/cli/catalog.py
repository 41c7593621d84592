# src/awsregistry/cli/catalog.py
"""
Implements the `regions`, `services`, `parse` and `export` commands.
"""

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core import registry
from ..core.catalog import catalog_rows, catalog_title
from ..core.config import config
from ..core.exceptions import RegistryError
from ..exporters.csv_exporter import CSVExporter
from ..exporters.json_exporter import JSONExporter
from ..models.identifiers import IdentifierKind
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


def _show(kind: IdentifierKind):
    ConsoleReporter().report(catalog_rows(kind), title=catalog_title(kind))


def regions():
    """
    List every region identifier in definition order.
    """
    _show(IdentifierKind.REGION)


def services():
    """
    List every service identifier in definition order.
    """
    _show(IdentifierKind.SERVICE)


def parse(
    kind: Annotated[IdentifierKind, typer.Argument(help="Identifier kind.", case_sensitive=False)],
    name: Annotated[str, typer.Argument(help="Canonical name, e.g. 'us-east-1' or 's3'.")],
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail instead of resolving unrecognized names to UNKNOWN."),
    ] = False,
):
    """
    Resolve a canonical name to its identifier.
    """
    try:
        if strict:
            identifier = registry.parse_strict(kind, name)
        else:
            identifier = registry.parse(kind, name)
    except RegistryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{identifier.name} {identifier.value} {registry.canonical_name(identifier)}")


def export(
    kind: Annotated[IdentifierKind, typer.Argument(help="Identifier kind.", case_sensitive=False)],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format.", case_sensitive=False),
    ] = OutputFormat.JSON,
    output_path: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            help="Output file path. Default: './<AWSREGISTRY_EXPORT_DIR>/awsregistry-catalog.<format>'",
            dir_okay=False,
        ),
    ] = None,
):
    """
    Write the identifier catalog of one kind to a JSON or CSV file.
    """
    exporter = CSVExporter() if output_format == OutputFormat.CSV else JSONExporter()
    if output_path is None:
        output_path = Path.cwd() / config.EXPORT_DIR / exporter.DEFAULT_FILENAME

    try:
        written = asyncio.run(exporter.export(catalog_rows(kind), str(output_path)))
    except OSError as e:
        logger.error(f"Failed to write {output_format.value} export to {output_path}: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Exported {kind.value} identifiers to {written}")
