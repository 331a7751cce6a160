"""Wrapper de httpx para la Web API de Spotify.

Por qué un wrapper:
- Estandariza timeouts, headers y el mapeo de errores HTTP -> `RemoteApiError`.
- Facilita testeo: se inyecta un `httpx.MockTransport` en vez de red real.

Política:
- Sin reintentos, sin caché, sin pooling: cada llamada abre y cierra su cliente.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import AppSettings, SpotifyToolsConfig
from core.errors import RemoteApiError
from core.interfaces.requester import HttpMethod, SpotifyRequester

logger = logging.getLogger(__name__)

MAX_ERROR_DETAIL_CHARS = 400


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del toolset.

    Por qué un builder:
    - Centraliza timeout/headers para que todas las operaciones se comporten igual.
    - Permite inyectar un transporte alternativo en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


class SpotifyApiClient(SpotifyRequester):
    """Request Executor: una llamada autenticada por invocación de `request`."""

    def __init__(
        self,
        runtime: SpotifyToolsConfig,
        token: str,
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._runtime = runtime
        self._token = token
        self._settings = settings or AppSettings()
        self._transport = transport

    async def request(self, method: HttpMethod, path: str, body: Any | None = None) -> Any:
        url = f"{self._runtime.api_base_url}{path}"
        headers = {"Authorization": f"Bearer {self._token}"}

        logger.debug("Spotify %s %s", method, path)
        async with build_async_client(
            self._settings,
            extra_headers=headers,
            transport=self._transport,
        ) as client:
            if body is None:
                resp = await client.request(method, url)
            else:
                # `json=` serializa y fija Content-Type: application/json.
                resp = await client.request(method, url, json=body)

        if not resp.is_success:
            detail = resp.text[:MAX_ERROR_DETAIL_CHARS]
            logger.debug("Spotify %s %s -> HTTP %s", method, path, resp.status_code)
            raise RemoteApiError(resp.status_code, detail)

        if not resp.content:
            return None
        return resp.json()
