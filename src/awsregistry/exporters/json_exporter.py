import json
import os
from typing import Any, Dict, List

import aiofiles

from .base_exporter import BaseExporter


class JSONExporter(BaseExporter):
    DEFAULT_FILENAME = "awsregistry-catalog.json"

    async def export(self, data: List[Dict[str, Any]] | Dict[str, Any], path: str | None = None) -> str:
        """Export rows (or a snapshot mapping) as indented JSON. Returns path written."""
        out_path = path or self.DEFAULT_FILENAME
        payload = data if isinstance(data, dict) else list(data or [])
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        async with aiofiles.open(out_path, "w", encoding="utf-8") as fh:
            await fh.write(json.dumps(payload, ensure_ascii=False, indent=2))
        return out_path
