"""
Shared pytest fixtures and configuration

Loads .env once, puts backend/ on the import path and provides the
HTTP fakes used across the test suite.
"""

import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from dotenv import load_dotenv

# Load .env file
ENV_FILE = Path(__file__).resolve().parent / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE)

# Add backend to path for imports
PROJECT_ROOT = Path(__file__).resolve().parent
BACKEND_DIR = PROJECT_ROOT / "backend"

if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def json_bodies(self):
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def recording_transport():
    """Factory: recording_transport(handler) -> RecordingTransport"""
    return RecordingTransport


@pytest.fixture
def mock_proxy_client():
    """Mock proxy client for use case tests"""
    mock = MagicMock()
    mock.base_url = "http://proxy.test"
    mock.acquire_token = AsyncMock()
    mock.resolve_manifest_url = AsyncMock(return_value="https://media.test/live/file.mpd")
    mock.resolve_media_uris = AsyncMock()
    return mock


@pytest.fixture
def mock_player():
    """Mock stream player"""
    mock = AsyncMock()
    mock.initialize = AsyncMock(return_value=None)
    mock.reset = AsyncMock(return_value=None)
    mock.is_playing = True
    return mock


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "asyncio: async tests")
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "integration: integration tests")
