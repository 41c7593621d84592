import csv
import io
import os
from typing import Any, Dict, List

import aiofiles

from .base_exporter import BaseExporter


class CSVExporter(BaseExporter):
    DEFAULT_FILENAME = "awsregistry-catalog.csv"

    async def export(self, data: List[Dict[str, Any]], path: str | None = None) -> str:
        """Export catalog rows to a CSV file. Returns path written.

        Columns follow the key order of the first row. Catalog rows of one kind
        share their keys, so a row with extra keys raises ValueError before
        anything is written. An empty row list produces an empty file.
        """
        out_path = path or self.DEFAULT_FILENAME
        rows = list(data or [])

        # csv.DictWriter needs a sync file object, so render to memory first
        output = io.StringIO()
        if rows:
            writer = csv.DictWriter(output, fieldnames=list(rows[0]), extrasaction="raise")
            writer.writeheader()
            writer.writerows(rows)

        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
        async with aiofiles.open(out_path, "w", encoding="utf-8", newline="") as fh:
            await fh.write(output.getvalue())
        return out_path
