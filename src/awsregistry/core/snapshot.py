# src/awsregistry/core/snapshot.py
"""
Snapshots of the published {canonical name -> discriminant} mapping.

A snapshot committed at release time lets later revisions check that they only
ever add identifiers: no name disappears and no discriminant changes meaning.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from ..models.identifiers import IdentifierKind
from .exceptions import SnapshotFormatError
from .registry import canonical_names, enumerate_identifiers

logger = logging.getLogger(__name__)

Snapshot = Dict[str, Dict[str, int]]

_SNAPSHOT_ADAPTER = TypeAdapter(Snapshot)


def build_snapshot() -> Snapshot:
    """Returns the current mapping, keyed by kind value ("region", "service")."""
    return {
        kind.value: {name: member.value for name, member in zip(canonical_names(kind), enumerate_identifiers(kind))}
        for kind in IdentifierKind
    }


def load_snapshot(path: Union[str, Path]) -> Snapshot:
    """
    Reads a JSON snapshot written by `build_snapshot`.

    Raises:
        SnapshotFormatError: If the file is valid JSON but not a
            {kind: {name: discriminant}} mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    try:
        data = _SNAPSHOT_ADAPTER.validate_python(raw, strict=True)
    except ValidationError as e:
        raise SnapshotFormatError(f"Snapshot {path} is not a {{kind: {{name: discriminant}}}} mapping: {e}") from e
    logger.debug(f"Loaded identifier snapshot from {path}")
    return data


def find_snapshot_violations(previous: Snapshot, current: Optional[Snapshot] = None) -> List[str]:
    """
    Compares a previous snapshot against the current one.

    Returns:
        A list of human-readable violations. An empty list means `current` is a
        superset of `previous`.
    """
    if current is None:
        current = build_snapshot()

    violations = []
    for kind, entries in previous.items():
        current_entries = current.get(kind)
        if current_entries is None:
            violations.append(f"{kind}: identifier kind removed")
            continue
        for name, discriminant in entries.items():
            if name not in current_entries:
                violations.append(f"{kind}: '{name}' removed (was {discriminant})")
            elif current_entries[name] != discriminant:
                violations.append(f"{kind}: '{name}' renumbered from {discriminant} to {current_entries[name]}")

    if violations:
        logger.warning(f"Found {len(violations)} identifier snapshot violations")
    return violations
