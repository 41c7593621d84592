# src/awsregistry/core/config.py

import logging
import os

from dotenv import load_dotenv

from ..models.identifiers import IdentifierKind, RegionId
from .exceptions import ConfigError, IdentifierNotFoundError
from .registry import parse, parse_strict

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

_TRUTHY = ("true", "1", "t", "y", "yes")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    def __init__(self):
        # --- Logging variables ---
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # --- Export variables ---
        self.EXPORT_DIR = os.getenv("AWSREGISTRY_EXPORT_DIR", "data")

    # The region settings are properties so they are resolved at access time
    # and pick up environment changes made after the config is created.
    @property
    def DEFAULT_REGION_NAME(self) -> str:
        return os.getenv("AWSREGISTRY_DEFAULT_REGION", "us-east-1")

    @property
    def STRICT_PARSING(self) -> bool:
        return os.getenv("AWSREGISTRY_STRICT_PARSING", "False").lower() in _TRUTHY

    @property
    def DEFAULT_REGION(self) -> RegionId:
        name = self.DEFAULT_REGION_NAME
        if self.STRICT_PARSING:
            try:
                return parse_strict(IdentifierKind.REGION, name)
            except IdentifierNotFoundError as e:
                raise ConfigError(f"AWSREGISTRY_DEFAULT_REGION is not a known region: '{name}'") from e
        region = parse(IdentifierKind.REGION, name)
        if region is RegionId.UNKNOWN and name != "unknown":
            logging.getLogger(__name__).warning(
                "Unknown AWSREGISTRY_DEFAULT_REGION '%s' - falling back to %s",
                name,
                region.name,
            )
        return region

    def validate_instance(self):
        if self.LOG_LEVEL.upper() not in _LOG_LEVELS:
            raise ConfigError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}.")
        # Resolving the region raises ConfigError in strict mode.
        self.DEFAULT_REGION


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
