# src/awsregistry/models/endpoint_key.py

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..core.registry import canonical_name, from_value, parse
from .identifiers import IdentifierKind, RegionId, ServiceId


def _coerce(kind: IdentifierKind, value):
    enum_class = kind.enum_class
    if isinstance(value, enum_class):
        return value
    if isinstance(value, Enum):
        raise ValueError(f"Expected a {enum_class.__name__}, got {type(value).__name__}.{value.name}")
    if isinstance(value, bool):
        raise ValueError(f"Expected a {enum_class.__name__}, name or discriminant, got bool")
    if isinstance(value, str):
        return parse(kind, value)
    if isinstance(value, int):
        return from_value(kind, value)
    return value


class EndpointKey(BaseModel):
    """
    Pydantic model for a (region, service) pair, i.e. a service as deployed in a region.

    Fields accept identifiers, canonical names or integral discriminants.
    Unrecognized names and discriminants degrade to UNKNOWN. In JSON mode both
    fields serialize to their canonical names.

    Attributes:
        region: The deployment region (e.g., RegionId.US_EAST_1 or "us-east-1")
        service: The remote service (e.g., ServiceId.S3 or "s3")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    region: RegionId = Field(..., description="Deployment region")
    service: ServiceId = Field(..., description="Remote service")

    @field_validator("region", mode="before")
    @classmethod
    def _coerce_region(cls, value):
        return _coerce(IdentifierKind.REGION, value)

    @field_validator("service", mode="before")
    @classmethod
    def _coerce_service(cls, value):
        return _coerce(IdentifierKind.SERVICE, value)

    @field_serializer("region", "service", when_used="json")
    def _serialize_identifier(self, value):
        return canonical_name(value)

    @property
    def is_routable(self) -> bool:
        """False when either side is the UNKNOWN sentinel."""
        return self.region is not RegionId.UNKNOWN and self.service is not ServiceId.UNKNOWN

    def __str__(self) -> str:
        return f"{canonical_name(self.service)}@{canonical_name(self.region)}"
