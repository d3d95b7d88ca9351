"""
Pytest configuration and shared fixtures for YoBit client tests.
"""

import pytest

from tests.mocks import RecordingTransport
from yobit_client.core.api_client import YobitClient
from yobit_client.utilities.constants import (
    ENV_API_HOST,
    ENV_API_KEY,
    ENV_API_SECRET,
    ENV_NONCE_FILE,
    ENV_PROXY_URL,
    ENV_TIMEOUT,
)

TEST_KEY = "k"
TEST_SECRET = "s"
TEST_NONCE = 1000


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "property" in path:
            item.add_marker(pytest.mark.property)


@pytest.fixture
def transport() -> RecordingTransport:
    """Mock transport that records requests."""
    return RecordingTransport()


@pytest.fixture
def client(transport) -> YobitClient:
    """Client with fixed credentials and nonce over the mock transport."""
    return YobitClient(TEST_KEY, TEST_SECRET, nonce=TEST_NONCE, transport=transport)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove YOBIT_* variables and run from an empty directory."""
    for name in (
        ENV_API_KEY,
        ENV_API_SECRET,
        ENV_API_HOST,
        ENV_PROXY_URL,
        ENV_TIMEOUT,
        ENV_NONCE_FILE,
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
