"""Contrato del ejecutor de requests contra la Web API.

Por qué Protocol:
- Los handlers de operación solo necesitan "haz esta llamada y dame JSON";
  no les importa si debajo hay httpx, un stub de tests u otro transporte.
"""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable

HttpMethod = Literal["GET", "POST"]


@runtime_checkable
class SpotifyRequester(Protocol):
    """Contrato mínimo del Request Executor.

    Reglas de diseño:
    - `request` es asíncrono porque siempre hace I/O (HTTP).
    - `path` ya incluye la query string; se concatena a la URL base.
    - Un status no-2xx se traduce en `RemoteApiError`; nunca reintenta.
    """

    async def request(self, method: HttpMethod, path: str, body: Any | None = None) -> Any:
        """Ejecuta la llamada y devuelve el JSON parseado."""

        ...
