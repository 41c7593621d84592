# src/awsregistry/data/partitions.py

"""
Mapping of regions to the AWS partition they belong to.

Regions missing from ``REGION_PARTITION_OVERRIDES`` belong to the standard
``aws`` partition.
"""

from awsregistry.models.identifiers import RegionId

DEFAULT_PARTITION = "aws"

REGION_PARTITION_OVERRIDES = {
    RegionId.CN_NORTH_1: "aws-cn",
    RegionId.CN_NORTHWEST_1: "aws-cn",
    RegionId.US_GOV_WEST_1: "aws-us-gov",
    RegionId.US_GOV_EAST_1: "aws-us-gov",
}
