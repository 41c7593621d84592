# src/awsregistry/core/catalog.py
"""
Flattens an identifier axis into plain rows for reporting and export.
"""

from typing import Any, Dict, List

from ..models.identifiers import IdentifierKind, RegionId
from .registry import KindLike, canonical_name, enumerate_identifiers, partition


def catalog_rows(kind: KindLike) -> List[Dict[str, Any]]:
    """
    Returns one row per identifier in definition order.

    Region rows carry an extra "partition" column (empty for UNKNOWN).
    """
    rows = []
    for member in enumerate_identifiers(kind):
        row = {
            "discriminant": member.value,
            "symbol": member.name,
            "name": canonical_name(member),
        }
        if isinstance(member, RegionId):
            row["partition"] = partition(member) or ""
        rows.append(row)
    return rows


def catalog_title(kind: KindLike) -> str:
    kind = kind if isinstance(kind, IdentifierKind) else IdentifierKind(kind)
    return f"AWS {kind.value.capitalize()} Identifiers"
