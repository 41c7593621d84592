# src/awsregistry/data/canonical_names.py

"""
Canonical string names for every region and service identifier.

Region names are the AWS region codes. Service names are the lower-case
service names accepted by AWS SDK client factories (e.g. ``boto3.client("s3")``).

Sources:
- Regions: https://docs.aws.amazon.com/global-infrastructure/latest/regions/aws-regions.html
- Services: https://docs.aws.amazon.com/general/latest/gr/aws-service-information.html
"""

from awsregistry.models.identifiers import RegionId, ServiceId

UNKNOWN_NAME = "unknown"

REGION_NAMES = {
    RegionId.UNKNOWN: UNKNOWN_NAME,
    RegionId.US_EAST_1: "us-east-1",
    RegionId.US_EAST_2: "us-east-2",
    RegionId.US_WEST_1: "us-west-1",
    RegionId.US_WEST_2: "us-west-2",
    RegionId.EU_WEST_1: "eu-west-1",
    RegionId.EU_WEST_2: "eu-west-2",
    RegionId.EU_CENTRAL_1: "eu-central-1",
    RegionId.EU_CENTRAL_2: "eu-central-2",
    RegionId.AP_SOUTHEAST_1: "ap-southeast-1",
    RegionId.AP_NORTHEAST_1: "ap-northeast-1",
    RegionId.AP_NORTHEAST_2: "ap-northeast-2",
    RegionId.AP_SOUTHEAST_2: "ap-southeast-2",
    RegionId.AP_SOUTHEAST_3: "ap-southeast-3",
    RegionId.AP_SOUTHEAST_4: "ap-southeast-4",
    RegionId.AP_SOUTHEAST_5: "ap-southeast-5",
    RegionId.AP_SOUTHEAST_7: "ap-southeast-7",
    RegionId.AP_SOUTH_1: "ap-south-1",
    RegionId.AP_SOUTH_2: "ap-south-2",
    RegionId.SA_EAST_1: "sa-east-1",
    RegionId.CN_NORTH_1: "cn-north-1",
    RegionId.CA_CENTRAL_1: "ca-central-1",
    RegionId.CA_WEST_1: "ca-west-1",
    RegionId.US_GOV_WEST_1: "us-gov-west-1",
    RegionId.CN_NORTHWEST_1: "cn-northwest-1",
    RegionId.EU_WEST_3: "eu-west-3",
    RegionId.US_GOV_EAST_1: "us-gov-east-1",
    RegionId.EU_NORTH_1: "eu-north-1",
    RegionId.AP_EAST_1: "ap-east-1",
    RegionId.AP_EAST_2: "ap-east-2",
    RegionId.ME_CENTRAL_1: "me-central-1",
    RegionId.ME_SOUTH_1: "me-south-1",
    RegionId.AF_SOUTH_1: "af-south-1",
    RegionId.EU_SOUTH_1: "eu-south-1",
    RegionId.EU_SOUTH_2: "eu-south-2",
    RegionId.IL_CENTRAL_1: "il-central-1",
    RegionId.MX_CENTRAL_1: "mx-central-1",
}

SERVICE_NAMES = {
    ServiceId.UNKNOWN: UNKNOWN_NAME,
    ServiceId.API_GATEWAY: "apigateway",
    ServiceId.AUTO_SCALING: "autoscaling",
    ServiceId.CLOUD_WATCH: "cloudwatch",
    ServiceId.COGNITO_IDENTITY: "cognito-identity",
    ServiceId.COGNITO_IDENTITY_PROVIDER: "cognito-idp",
    ServiceId.COGNITO_SYNC: "cognito-sync",
    ServiceId.COMPREHEND: "comprehend",
    ServiceId.CONNECT: "connect",
    ServiceId.CONNECT_PARTICIPANT: "connectparticipant",
    ServiceId.DYNAMODB: "dynamodb",
    ServiceId.EC2: "ec2",
    ServiceId.ELASTIC_LOAD_BALANCING: "elb",
    ServiceId.IOT: "iot",
    ServiceId.IOT_DATA: "iot-data",
    ServiceId.FIREHOSE: "firehose",
    ServiceId.KINESIS: "kinesis",
    ServiceId.KINESIS_VIDEO: "kinesisvideo",
    ServiceId.KINESIS_VIDEO_ARCHIVED_MEDIA: "kinesis-video-archived-media",
    ServiceId.KINESIS_VIDEO_SIGNALING: "kinesis-video-signaling",
    ServiceId.KINESIS_VIDEO_WEBRTC_STORAGE: "kinesis-video-webrtc-storage",
    ServiceId.KMS: "kms",
    ServiceId.LAMBDA: "lambda",
    ServiceId.LEX_RUNTIME: "lex-runtime",
    ServiceId.LOGS: "logs",
    ServiceId.MACHINE_LEARNING: "machinelearning",
    ServiceId.MOBILE_ANALYTICS: "mobileanalytics",
    # Mobile targeting is served by Amazon Pinpoint.
    ServiceId.MOBILE_TARGETING: "pinpoint",
    ServiceId.POLLY: "polly",
    ServiceId.REKOGNITION: "rekognition",
    ServiceId.S3: "s3",
    ServiceId.SAGEMAKER_RUNTIME: "sagemaker-runtime",
    ServiceId.SES: "ses",
    ServiceId.SIMPLE_DB: "sdb",
    ServiceId.SNS: "sns",
    ServiceId.SQS: "sqs",
    ServiceId.STS: "sts",
    ServiceId.TEXTRACT: "textract",
    ServiceId.TRANSCRIBE: "transcribe",
    ServiceId.TRANSCRIBE_STREAMING: "transcribe-streaming",
    ServiceId.TRANSLATE: "translate",
    ServiceId.LOCATION: "location",
    ServiceId.CHIME_SDK_MESSAGING: "chime-sdk-messaging",
    ServiceId.CHIME_SDK_IDENTITY: "chime-sdk-identity",
}
