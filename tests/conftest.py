"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration, automatic API test
skipping, and access to the recorded response payloads under ``tests/data``.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress
import json
import logging
import os
from pathlib import Path
from typing import Any

import httpx
import pytest

DATA_DIR = Path(__file__).parent / "data"

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_brave_env(request, monkeypatch):
    """Ensure a clean BRAVE_* environment for each test.

    Opt-out: @pytest.mark.allow_env_pollution or @pytest.mark.api
    """
    if request.node.get_closest_marker("allow_env_pollution") or (
        "api" in request.node.keywords
    ):
        return

    for key in list(os.environ.keys()):
        if key.startswith("BRAVE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("dateparser").setLevel(logging.WARNING)


# =============================================================================
# Pytest Hooks
# =============================================================================

API_TESTS_REASON = "API tests require ENABLE_API_TESTS=1"


def _api_tests_enabled() -> bool:
    return bool(os.getenv("ENABLE_API_TESTS"))


def pytest_collection_modifyitems(items):
    """Automatically skip API tests when not explicitly enabled."""
    if _api_tests_enabled():
        return
    skip_api = pytest.mark.skip(reason=API_TESTS_REASON)
    for item in items:
        if "api" in item.keywords:
            item.add_marker(skip_api)


@pytest.fixture
def brave_api_key():
    """Return BRAVE_API_KEY or skip the test if unavailable."""
    key = os.getenv("BRAVE_API_KEY")
    if not key:
        pytest.skip("BRAVE_API_KEY not set")
    return key


# =============================================================================
# Recorded Payloads
# =============================================================================


@pytest.fixture
def load_payload() -> Callable[[str], bytes]:
    """Return raw bytes of a recorded payload, e.g. ``load_payload("web")``."""

    def load(name: str) -> bytes:
        return (DATA_DIR / f"{name}.json").read_bytes()

    return load


@pytest.fixture
def load_json(load_payload) -> Callable[[str], Any]:
    """Return a recorded payload parsed into a JSON tree for editing."""

    def load(name: str) -> Any:
        return json.loads(load_payload(name))

    return load


# =============================================================================
# HTTP Doubles
# =============================================================================


class RecordingTransport(httpx.MockTransport):
    """MockTransport that serves one canned response and records requests."""

    def __init__(
        self,
        body: bytes,
        *,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(status_code, content=body, headers=headers)

        super().__init__(handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Factory for ``RecordingTransport`` instances."""
    return RecordingTransport
