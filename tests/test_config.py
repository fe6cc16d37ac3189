"""Configuration boundary tests."""

from __future__ import annotations

import pytest

from brave_search._http import DEFAULT_BASE_URL
from brave_search.config import API_KEY_ENV_VAR, Config
from brave_search.errors import ConfigurationError

pytestmark = pytest.mark.unit


def test_config_auto_resolves_api_key_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """API key should be auto-resolved from environment."""
    monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")

    cfg = Config()

    assert cfg.api_key == "env-key"
    assert cfg.base_url == DEFAULT_BASE_URL


def test_explicit_api_key_takes_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")

    cfg = Config(api_key="explicit-key")

    assert cfg.api_key == "explicit-key"


def test_missing_api_key_raises_clear_error() -> None:
    with pytest.raises(ConfigurationError) as exc:
        Config()

    assert exc.value.hint is not None
    assert API_KEY_ENV_VAR in exc.value.hint


@pytest.mark.parametrize("timeout_s", [0, -1.5])
def test_non_positive_timeout_is_rejected(timeout_s: float) -> None:
    with pytest.raises(ConfigurationError, match="timeout_s"):
        Config(api_key="k", timeout_s=timeout_s)


@pytest.mark.parametrize("base_url", ["api.search.brave.com", "ftp://example.com/", ""])
def test_non_http_base_url_is_rejected(base_url: str) -> None:
    with pytest.raises(ConfigurationError, match="base_url"):
        Config(api_key="k", base_url=base_url)


def test_base_url_gains_trailing_slash() -> None:
    cfg = Config(api_key="k", base_url="http://localhost:8080/res/v1")

    assert cfg.base_url == "http://localhost:8080/res/v1/"


def test_config_is_immutable() -> None:
    cfg = Config(api_key="k")

    with pytest.raises(AttributeError):
        cfg.api_key = "other"  # type: ignore[misc]


def test_str_and_repr_redact_the_key() -> None:
    cfg = Config(api_key="super-secret")

    assert "super-secret" not in str(cfg)
    assert "super-secret" not in repr(cfg)
    assert "[REDACTED]" in str(cfg)
