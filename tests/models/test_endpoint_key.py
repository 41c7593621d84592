# tests/models/test_endpoint_key.py

import pytest
from pydantic import ValidationError

from awsregistry.models.endpoint_key import EndpointKey
from awsregistry.models.identifiers import IdentifierKind, RegionId, ServiceId


def test_accepts_canonical_names():
    key = EndpointKey(region="us-west-2", service="s3")
    assert key.region is RegionId.US_WEST_2
    assert key.service is ServiceId.S3
    assert key.is_routable


def test_accepts_members_and_discriminants():
    key = EndpointKey(region=RegionId.EU_NORTH_1, service=10)
    assert key.region is RegionId.EU_NORTH_1
    assert key.service is ServiceId.DYNAMODB


def test_unrecognized_values_degrade_to_unknown():
    key = EndpointKey(region="mars-north-9", service=9999)
    assert key.region is RegionId.UNKNOWN
    assert key.service is ServiceId.UNKNOWN
    assert not key.is_routable


def test_rejects_identifier_of_the_other_kind():
    with pytest.raises(ValidationError):
        EndpointKey(region=ServiceId.S3, service=ServiceId.S3)


def test_json_dump_uses_canonical_names():
    key = EndpointKey(region=RegionId.CN_NORTHWEST_1, service=ServiceId.COGNITO_IDENTITY_PROVIDER)
    assert key.model_dump(mode="json") == {"region": "cn-northwest-1", "service": "cognito-idp"}
    assert EndpointKey.model_validate_json(key.model_dump_json()) == key


def test_python_dump_keeps_members():
    key = EndpointKey(region="us-east-1", service="sqs")
    assert key.model_dump() == {"region": RegionId.US_EAST_1, "service": ServiceId.SQS}


def test_is_hashable_and_frozen():
    endpoints = {EndpointKey(region="us-east-1", service="s3"): "primary"}
    assert endpoints[EndpointKey(region=RegionId.US_EAST_1, service=ServiceId.S3)] == "primary"

    key = EndpointKey(region="us-east-1", service="s3")
    with pytest.raises(ValidationError):
        key.region = RegionId.US_WEST_1


def test_str():
    assert str(EndpointKey(region="eu-west-1", service="lambda")) == "lambda@eu-west-1"


def test_identifier_kind_of():
    assert IdentifierKind.of(RegionId.US_EAST_1) is IdentifierKind.REGION
    assert IdentifierKind.of(ServiceId.S3) is IdentifierKind.SERVICE
    with pytest.raises(TypeError):
        IdentifierKind.of("s3")


def test_rejects_bool_values():
    with pytest.raises(ValidationError):
        EndpointKey(region=True, service="s3")
    with pytest.raises(ValidationError):
        EndpointKey(region="us-east-1", service=False)
