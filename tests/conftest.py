from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

API_BASE = "https://api.test/v1"


class FakeSpotify:
    """Transport httpx que responde por (método, path) y registra cada request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json_body: Any = None,
        text: str | None = None,
    ) -> None:
        kwargs: dict[str, Any] = {}
        if text is not None:
            kwargs["text"] = text
        elif json_body is not None:
            kwargs["json"] = json_body
        self.routes[(method, f"/v1{path}")] = {"status_code": status, **kwargs}

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": {"status": 404, "message": "no route"}})
        return httpx.Response(**route)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_spotify() -> FakeSpotify:
    return FakeSpotify()


@pytest.fixture
def config() -> dict[str, Any]:
    return {"access_token": "test-token", "api_base_url": API_BASE}


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPOTIFY_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("SPOTIFY_TOOLS_HTTP_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("SPOTIFY_TOOLS_LOG_LEVEL", raising=False)
