# tests/conftest.py

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`) so the
    configuration is predictable and isolated from the actual environment.
    """
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("AWSREGISTRY_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWSREGISTRY_STRICT_PARSING", "False")


@pytest.fixture
def snapshot_path():
    """Path to the committed identifier snapshot."""
    return DATA_DIR / "identifier_snapshot.json"
