"""Resolución de configuración y del token bearer."""

from __future__ import annotations

import httpx
import pytest

from core.config import AppSettings, SpotifyToolsConfig, resolve_runtime_config
from core.credentials import describe_token_source, resolve_access_token
from core.errors import ConfigValidationError, MissingCredentialError
from core.services.toolset import create_spotify_tools


def test_defaults_are_filled():
    runtime = resolve_runtime_config()

    assert runtime.access_token is None
    assert runtime.token_source_name == "SPOTIFY_ACCESS_TOKEN"
    assert runtime.api_base_url == "https://api.spotify.com/v1"
    assert runtime.default_user_id is None


def test_trailing_slash_is_stripped():
    runtime = resolve_runtime_config({"api_base_url": "https://api.test/v1/"})
    assert runtime.api_base_url == "https://api.test/v1"


def test_existing_config_is_returned_as_is():
    runtime = SpotifyToolsConfig(access_token="A")
    assert resolve_runtime_config(runtime) is runtime


@pytest.mark.parametrize("bad_url", ["not-a-url", "", "/relative/path"])
def test_malformed_base_url_fails(bad_url):
    with pytest.raises(ConfigValidationError) as exc_info:
        resolve_runtime_config({"api_base_url": bad_url})

    assert exc_info.value.errors
    assert exc_info.value.errors[0]["loc"] == ("api_base_url",)


def test_unknown_config_key_fails():
    with pytest.raises(ConfigValidationError):
        resolve_runtime_config({"accessTokn": "typo"})


def test_runtime_config_is_frozen():
    runtime = resolve_runtime_config({"access_token": "A"})
    with pytest.raises(Exception):
        runtime.access_token = "B"  # type: ignore[misc]


def test_malformed_base_url_fails_before_any_request():
    calls: list[httpx.Request] = []
    transport = httpx.MockTransport(lambda request: calls.append(request) or httpx.Response(200, json={}))

    with pytest.raises(ConfigValidationError):
        create_spotify_tools({"api_base_url": "not-a-url"}, transport=transport)

    assert calls == []


def test_explicit_token_wins_over_env(monkeypatch):
    monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "B")
    runtime = resolve_runtime_config({"access_token": "A"})

    assert resolve_access_token(runtime) == "A"
    assert describe_token_source(runtime) == "config"


def test_env_token_is_used_when_no_explicit_token(monkeypatch):
    monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "  B  ")
    runtime = resolve_runtime_config()

    assert resolve_access_token(runtime) == "B"
    assert describe_token_source(runtime) == "SPOTIFY_ACCESS_TOKEN"


def test_custom_token_source_name(monkeypatch):
    monkeypatch.setenv("MY_SPOTIFY_TOKEN", "C")
    runtime = resolve_runtime_config({"token_source_name": "MY_SPOTIFY_TOKEN"})

    assert resolve_access_token(runtime) == "C"


def test_blank_explicit_token_falls_back_to_env(monkeypatch):
    monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "B")
    runtime = resolve_runtime_config({"access_token": "   "})

    assert resolve_access_token(runtime) == "B"


def test_missing_token_names_the_fallback_source():
    runtime = resolve_runtime_config({"token_source_name": "MY_SPOTIFY_TOKEN"})

    with pytest.raises(MissingCredentialError) as exc_info:
        resolve_access_token(runtime)

    assert exc_info.value.source_name == "MY_SPOTIFY_TOKEN"
    assert "MY_SPOTIFY_TOKEN" in str(exc_info.value)
    assert describe_token_source(runtime) is None


def test_app_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("SPOTIFY_TOOLS_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("SPOTIFY_TOOLS_USER_AGENT", "agent-test/1.0")

    settings = AppSettings()

    assert settings.http_timeout_seconds == 2.5
    assert settings.user_agent == "agent-test/1.0"


def test_app_settings_default_has_no_timeout():
    assert AppSettings().http_timeout_seconds is None
