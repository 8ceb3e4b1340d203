"""Shared fixtures for the Lucent test suite."""
import io
import base64
from unittest.mock import MagicMock, AsyncMock

import pytest
from PIL import Image

from lucent_service.config import reload_settings, reset_llm_config
from lucent_service.llm.llm_adapter import reset_llm_clients
from lucent_service.observability import reset_metrics


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Fresh settings, clients and metrics for every test; no request log files."""
    monkeypatch.setenv("LUCENT_LOGGING_ENABLED", "false")
    monkeypatch.delenv("LUCENT_PROVIDER_TIMEOUT", raising=False)
    monkeypatch.delenv("LUCENT_MAX_IMAGE_MB", raising=False)
    reload_settings()
    reset_llm_config()
    reset_llm_clients()
    reset_metrics()
    yield
    reset_llm_clients()
    reset_llm_config()


def _png_bytes(size=(64, 96), color="blue") -> bytes:
    img = Image.new("RGB", size, color=color)
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    """A small valid PNG image."""
    return _png_bytes()


@pytest.fixture
def photo_data_uri(png_bytes):
    """A valid photo as a base64 data URI."""
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def mock_client():
    """A provider client whose calls are AsyncMocks."""
    client = MagicMock()
    client.generate_json = AsyncMock()
    client.generate_image = AsyncMock()
    return client
