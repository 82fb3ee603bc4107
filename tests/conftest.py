"""Test configuration and fixtures."""

import json
from typing import Callable

import httpx
import pytest

from forum.config import StorageSettings


def make_storage_settings(**overrides) -> StorageSettings:
    """Helper function to build storage settings for tests.

    Args:
        **overrides: Fields to override on the default test settings

    Returns:
        StorageSettings with test credentials
    """
    values = {
        "access_key": "test-access-key",
        "secret_key": "test-secret-key",
        "bucket": "test-bucket",
        "zone": "z0",
    }
    values.update(overrides)
    return StorageSettings(**values)


def json_response(status_code: int, payload: dict | None = None) -> httpx.Response:
    """Helper function to build a Qiniu-style JSON response."""
    content = json.dumps(payload).encode() if payload is not None else b""
    return httpx.Response(
        status_code,
        content=content,
        headers={"Content-Type": "application/json"},
    )


class RecordingTransport(httpx.MockTransport):
    """Mock transport that records every request it handles."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def storage_settings() -> StorageSettings:
    """Storage settings with test credentials."""
    return make_storage_settings()
