# src/awsregistry/models/identifiers.py
"""
Closed enumerations of AWS deployment regions and remote services.

Discriminants are assigned in the order members were added and are never
renumbered or reused. New members are appended at the end of each enumeration.
"""

from enum import Enum
from functools import total_ordering
from typing import Type, Union


@total_ordering
class _OrderedIdentifier(Enum):
    """
    Enum ordered by discriminant within one class only.

    Members of different classes are never equal and cannot be ordered
    against each other.
    """

    def __lt__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.value < other.value


class RegionId(_OrderedIdentifier):
    """A deployment region of the cloud provider."""

    UNKNOWN = 0
    US_EAST_1 = 1
    US_EAST_2 = 2
    US_WEST_1 = 3
    US_WEST_2 = 4
    EU_WEST_1 = 5
    EU_WEST_2 = 6
    EU_CENTRAL_1 = 7
    EU_CENTRAL_2 = 8
    AP_SOUTHEAST_1 = 9
    AP_NORTHEAST_1 = 10
    AP_NORTHEAST_2 = 11
    AP_SOUTHEAST_2 = 12
    AP_SOUTHEAST_3 = 13
    AP_SOUTHEAST_4 = 14
    AP_SOUTHEAST_5 = 15
    AP_SOUTHEAST_7 = 16
    AP_SOUTH_1 = 17
    AP_SOUTH_2 = 18
    SA_EAST_1 = 19
    CN_NORTH_1 = 20
    CA_CENTRAL_1 = 21
    CA_WEST_1 = 22
    US_GOV_WEST_1 = 23
    CN_NORTHWEST_1 = 24
    EU_WEST_3 = 25
    US_GOV_EAST_1 = 26
    EU_NORTH_1 = 27
    AP_EAST_1 = 28
    AP_EAST_2 = 29
    ME_CENTRAL_1 = 30
    ME_SOUTH_1 = 31
    AF_SOUTH_1 = 32
    EU_SOUTH_1 = 33
    EU_SOUTH_2 = 34
    IL_CENTRAL_1 = 35
    MX_CENTRAL_1 = 36


class ServiceId(_OrderedIdentifier):
    """A named remote service offered by the cloud provider."""

    UNKNOWN = 0
    API_GATEWAY = 1
    AUTO_SCALING = 2
    CLOUD_WATCH = 3
    COGNITO_IDENTITY = 4
    COGNITO_IDENTITY_PROVIDER = 5
    COGNITO_SYNC = 6
    COMPREHEND = 7
    CONNECT = 8
    CONNECT_PARTICIPANT = 9
    DYNAMODB = 10
    EC2 = 11
    ELASTIC_LOAD_BALANCING = 12
    IOT = 13
    IOT_DATA = 14
    FIREHOSE = 15
    KINESIS = 16
    KINESIS_VIDEO = 17
    KINESIS_VIDEO_ARCHIVED_MEDIA = 18
    KINESIS_VIDEO_SIGNALING = 19
    KINESIS_VIDEO_WEBRTC_STORAGE = 20
    KMS = 21
    LAMBDA = 22
    LEX_RUNTIME = 23
    LOGS = 24
    MACHINE_LEARNING = 25
    MOBILE_ANALYTICS = 26
    MOBILE_TARGETING = 27
    POLLY = 28
    REKOGNITION = 29
    S3 = 30
    SAGEMAKER_RUNTIME = 31
    SES = 32
    SIMPLE_DB = 33
    SNS = 34
    SQS = 35
    STS = 36
    TEXTRACT = 37
    TRANSCRIBE = 38
    TRANSCRIBE_STREAMING = 39
    TRANSLATE = 40
    LOCATION = 41
    CHIME_SDK_MESSAGING = 42
    CHIME_SDK_IDENTITY = 43


Identifier = Union[RegionId, ServiceId]


class IdentifierKind(str, Enum):
    """Selects one of the two identifier axes."""

    REGION = "region"
    SERVICE = "service"

    @property
    def enum_class(self) -> Type[Enum]:
        return RegionId if self is IdentifierKind.REGION else ServiceId

    @classmethod
    def of(cls, identifier: Identifier) -> "IdentifierKind":
        """Returns the axis an identifier belongs to."""
        if isinstance(identifier, RegionId):
            return cls.REGION
        if isinstance(identifier, ServiceId):
            return cls.SERVICE
        raise TypeError(f"Expected RegionId or ServiceId, got {type(identifier).__name__}")
