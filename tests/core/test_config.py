# tests/core/test_config.py
"""
Tests for the Config class, particularly default region resolution.
"""

import logging

import pytest

from awsregistry.core.config import Config
from awsregistry.core.exceptions import ConfigError
from awsregistry.models.identifiers import RegionId


class TestDefaultRegion:
    """Tests for the Config.DEFAULT_REGION property."""

    def test_default_region_from_env_var(self, monkeypatch):
        monkeypatch.setenv("AWSREGISTRY_DEFAULT_REGION", "eu-central-2")
        assert Config().DEFAULT_REGION is RegionId.EU_CENTRAL_2

    def test_default_region_without_env_var(self, monkeypatch):
        monkeypatch.delenv("AWSREGISTRY_DEFAULT_REGION", raising=False)
        assert Config().DEFAULT_REGION is RegionId.US_EAST_1

    def test_unknown_region_falls_back_with_warning(self, monkeypatch, caplog):
        monkeypatch.setenv("AWSREGISTRY_DEFAULT_REGION", "mars-north-9")
        with caplog.at_level(logging.WARNING, logger="awsregistry.core.config"):
            region = Config().DEFAULT_REGION

        assert region is RegionId.UNKNOWN
        assert "mars-north-9" in caplog.text

    def test_unknown_region_raises_in_strict_mode(self, monkeypatch):
        monkeypatch.setenv("AWSREGISTRY_DEFAULT_REGION", "mars-north-9")
        monkeypatch.setenv("AWSREGISTRY_STRICT_PARSING", "yes")

        with pytest.raises(ConfigError) as exc_info:
            Config().DEFAULT_REGION

        assert "mars-north-9" in str(exc_info.value)

    def test_known_region_in_strict_mode(self, monkeypatch):
        monkeypatch.setenv("AWSREGISTRY_DEFAULT_REGION", "ap-southeast-7")
        monkeypatch.setenv("AWSREGISTRY_STRICT_PARSING", "true")
        assert Config().DEFAULT_REGION is RegionId.AP_SOUTHEAST_7


class TestValidateInstance:
    def test_valid_configuration(self):
        Config().validate_instance()

    def test_invalid_log_level(self):
        cfg = Config()
        cfg.LOG_LEVEL = "LOUD"
        with pytest.raises(ConfigError):
            cfg.validate_instance()

    def test_strict_mode_rejects_unknown_region(self, monkeypatch):
        monkeypatch.setenv("AWSREGISTRY_DEFAULT_REGION", "nowhere-1")
        monkeypatch.setenv("AWSREGISTRY_STRICT_PARSING", "1")
        with pytest.raises(ConfigError):
            Config().validate_instance()

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


class TestInstanceSettings:
    def test_settings_are_read_per_instance(self, monkeypatch):
        monkeypatch.setenv("AWSREGISTRY_EXPORT_DIR", "exports")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        cfg = Config()

        assert cfg.EXPORT_DIR == "exports"
        assert cfg.LOG_LEVEL == "DEBUG"

    def test_export_dir_default(self, monkeypatch):
        monkeypatch.delenv("AWSREGISTRY_EXPORT_DIR", raising=False)
        assert Config().EXPORT_DIR == "data"
