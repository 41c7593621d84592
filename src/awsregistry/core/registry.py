# src/awsregistry/core/registry.py
"""
The identifier registry: lookups between region/service identifiers, their
canonical names and their integral discriminants.

All lookup tables are built once at import time and exposed read-only, so every
function here is pure and safe to call concurrently without locking.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Type, Union

from ..data.canonical_names import REGION_NAMES, SERVICE_NAMES
from ..data.partitions import DEFAULT_PARTITION, REGION_PARTITION_OVERRIDES
from ..models.identifiers import Identifier, IdentifierKind, RegionId, ServiceId
from .exceptions import DuplicateIdentifierError, IdentifierNotFoundError

logger = logging.getLogger(__name__)

KindLike = Union[IdentifierKind, str]


def build_name_index(enum_class: Type, names: Mapping) -> Mapping[str, Identifier]:
    """
    Builds the canonical name -> member index for one identifier axis.

    Raises:
        DuplicateIdentifierError: If a member has no canonical name, or if two
            canonical names are equal ignoring case.
    """
    missing = [member.name for member in enum_class if member not in names]
    if missing:
        raise DuplicateIdentifierError(f"{enum_class.__name__} members without a canonical name: {missing}")

    index = {}
    folded = {}
    for member in enum_class:
        canonical = names[member]
        key = canonical.casefold()
        if key in folded:
            raise DuplicateIdentifierError(
                f"{enum_class.__name__}.{member.name} name '{canonical}' collides with "
                f"{enum_class.__name__}.{folded[key].name}"
            )
        folded[key] = member
        index[canonical] = member
    return MappingProxyType(index)


_NAMES = {
    IdentifierKind.REGION: MappingProxyType(dict(REGION_NAMES)),
    IdentifierKind.SERVICE: MappingProxyType(dict(SERVICE_NAMES)),
}

_INDEXES = {
    IdentifierKind.REGION: build_name_index(RegionId, REGION_NAMES),
    IdentifierKind.SERVICE: build_name_index(ServiceId, SERVICE_NAMES),
}


def _kind(kind: KindLike) -> IdentifierKind:
    return kind if isinstance(kind, IdentifierKind) else IdentifierKind(kind)


def enumerate_identifiers(kind: KindLike) -> Iterable[Identifier]:
    """
    Returns every identifier of the given kind in definition order.

    The result is the enumeration class itself, so it can be iterated any
    number of times. The UNKNOWN sentinel is always the first element.
    """
    return _kind(kind).enum_class


def canonical_names(kind: KindLike) -> Tuple[str, ...]:
    """Returns all canonical names of the given kind in definition order."""
    names = _NAMES[_kind(kind)]
    return tuple(names[member] for member in enumerate_identifiers(kind))


def parse(kind: KindLike, value: Optional[str]) -> Identifier:
    """
    Maps a canonical name to its identifier.

    Matching is exact and case-sensitive. Unrecognized input, including the
    empty string and None, yields the UNKNOWN sentinel of that kind.
    """
    kind = _kind(kind)
    member = _INDEXES[kind].get(value) if value is not None else None
    if member is None:
        logger.debug(f"Unrecognized {kind.value} name {value!r}, using UNKNOWN")
        return kind.enum_class.UNKNOWN
    return member


def parse_strict(kind: KindLike, value: Optional[str]) -> Identifier:
    """
    Like `parse`, but raises IdentifierNotFoundError instead of returning UNKNOWN.

    The literal name of the sentinel ("unknown") is still accepted.
    """
    kind = _kind(kind)
    member = _INDEXES[kind].get(value) if value is not None else None
    if member is None:
        raise IdentifierNotFoundError(kind.value, value)
    return member


def canonical_name(identifier: Identifier) -> str:
    """Returns the canonical name of an identifier. Total over both kinds."""
    return _NAMES[IdentifierKind.of(identifier)][identifier]


def from_value(kind: KindLike, value: int) -> Identifier:
    """Maps an integral discriminant to its identifier, or UNKNOWN if unassigned."""
    enum_class = _kind(kind).enum_class
    # bool is an int subclass but never a discriminant
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an int discriminant, got {type(value).__name__}")
    try:
        return enum_class(value)
    except ValueError:
        logger.debug(f"Unassigned {enum_class.__name__} discriminant {value!r}, using UNKNOWN")
        return enum_class.UNKNOWN


def partition(region: RegionId) -> Optional[str]:
    """Returns the AWS partition of a region, or None for the UNKNOWN region."""
    if not isinstance(region, RegionId):
        raise TypeError(f"Expected RegionId, got {type(region).__name__}")
    if region is RegionId.UNKNOWN:
        return None
    return REGION_PARTITION_OVERRIDES.get(region, DEFAULT_PARTITION)
