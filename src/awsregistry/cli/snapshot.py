# src/awsregistry/cli/snapshot.py
"""
Implements the `snapshot` command: write the {name -> discriminant} snapshot,
or check the registry against a previously written one.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..core.exceptions import RegistryError
from ..core.snapshot import build_snapshot, find_snapshot_violations, load_snapshot
from ..exporters.json_exporter import JSONExporter
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_FILENAME = "identifier_snapshot.json"


def snapshot(
    output_path: Annotated[
        Optional[Path],
        typer.Option("--output", help="Where to write the snapshot.", dir_okay=False),
    ] = None,
    check: Annotated[
        Optional[Path],
        typer.Option(
            "--check",
            help="Compare against an existing snapshot instead of writing one.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
):
    """
    Write or check the identifier snapshot.
    """
    if check is not None:
        try:
            previous = load_snapshot(check)
        except (OSError, json.JSONDecodeError, RegistryError) as e:
            typer.echo(f"Error: cannot read snapshot {check}: {e}", err=True)
            raise typer.Exit(code=1)

        violations = find_snapshot_violations(previous)
        ConsoleReporter().report_violations(violations)
        if violations:
            raise typer.Exit(code=1)
        return

    if output_path is None:
        output_path = Path.cwd() / config.EXPORT_DIR / DEFAULT_SNAPSHOT_FILENAME

    try:
        written = asyncio.run(JSONExporter().export(build_snapshot(), str(output_path)))
    except OSError as e:
        logger.error(f"Failed to write snapshot to {output_path}: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Snapshot written to {written}")
