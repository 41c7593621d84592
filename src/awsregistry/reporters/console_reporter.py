# src/awsregistry/reporters/console_reporter.py
"""
A reporter that displays identifier catalogs in a formatted table in the console.
"""

import logging
from typing import Any, Dict, List

from rich.console import Console
from rich.table import Table

from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)

_COLUMN_STYLES = {
    "discriminant": ("Discriminant", "dim", "right"),
    "symbol": ("Symbol", "cyan", "left"),
    "name": ("Canonical Name", "green", "left"),
    "partition": ("Partition", "magenta", "left"),
}


class ConsoleReporter(BaseReporter):
    """
    Renders identifier catalogs to the console using the 'rich' library.
    """

    def __init__(self):
        self.console = Console()

    def report(self, data: List[Dict[str, Any]], title: str = "Identifiers"):
        """
        Displays catalog rows in a rich table, one column per row key.
        """
        if not data:
            self.console.print("No identifiers to report.", style="yellow")
            return

        table = Table(title=title, header_style="bold magenta")
        columns = list(data[0].keys())
        for column in columns:
            header, style, justify = _COLUMN_STYLES.get(column, (column, "white", "left"))
            table.add_column(header, style=style, justify=justify)

        for row in data:
            table.add_row(*[str(row.get(column, "")) for column in columns])

        self.console.print(table)

    def report_violations(self, violations: List[str]):
        """
        Displays snapshot violations, or a confirmation when there are none.
        """
        if not violations:
            self.console.print("✅ Registry is a superset of the snapshot.", style="green")
            return

        table = Table(title="Identifier Snapshot Violations", header_style="bold red")
        table.add_column("Violation", style="red")
        for violation in violations:
            table.add_row(violation)
        self.console.print(table)
