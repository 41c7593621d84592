# tests/exporters/test_csv_exporter.py

import csv

import pytest

from awsregistry.core.catalog import catalog_rows
from awsregistry.exporters.csv_exporter import CSVExporter
from awsregistry.models.identifiers import IdentifierKind, RegionId


@pytest.mark.asyncio
async def test_csv_exporter_empty_data(tmp_path):
    exporter = CSVExporter()
    out = tmp_path / "awsregistry-catalog.csv"
    await exporter.export([], str(out))
    assert out.exists()
    assert out.read_text(encoding="utf-8") == ""


@pytest.mark.asyncio
async def test_csv_exporter_region_catalog(tmp_path):
    exporter = CSVExporter()
    out = tmp_path / "nested" / "regions.csv"
    written = await exporter.export(catalog_rows(IdentifierKind.REGION), str(out))

    assert written == str(out)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == len(RegionId)
    assert rows[0]["symbol"] == "UNKNOWN"
    assert rows[1] == {"discriminant": "1", "symbol": "US_EAST_1", "name": "us-east-1", "partition": "aws"}


@pytest.mark.asyncio
async def test_csv_exporter_rejects_rows_with_extra_keys(tmp_path):
    exporter = CSVExporter()
    out = tmp_path / "mixed.csv"
    data = [
        {"discriminant": 30, "symbol": "S3", "name": "s3"},
        {"discriminant": 1, "symbol": "US_EAST_1", "name": "us-east-1", "partition": "aws"},
    ]

    with pytest.raises(ValueError):
        await exporter.export(data, str(out))

    assert not out.exists()
