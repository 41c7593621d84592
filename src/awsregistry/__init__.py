"""
awsregistry: stable identifiers for AWS regions and services.
"""

from .core.registry import (
    canonical_name,
    enumerate_identifiers,
    from_value,
    parse,
    parse_strict,
    partition,
)
from .models.identifiers import IdentifierKind, RegionId, ServiceId

__version__ = "0.1.0"

__all__ = [
    "IdentifierKind",
    "RegionId",
    "ServiceId",
    "canonical_name",
    "enumerate_identifiers",
    "from_value",
    "parse",
    "parse_strict",
    "partition",
    "__version__",
]
