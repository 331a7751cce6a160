"""Taxonomía de errores del Core.

Por qué una jerarquía propia:
- La CLI y los adaptadores (LangChain/MCP) capturan `SpotifyToolsError` sin
  conocer cada caso concreto.
- Los errores de validación de input NO viven aquí: son `pydantic.ValidationError`
  y se propagan intactos al llamador.
"""

from __future__ import annotations

from typing import Any


class SpotifyToolsError(Exception):
    """Base de todos los fallos del toolset."""


class ConfigValidationError(SpotifyToolsError):
    """Configuración mal formada (p.ej. `api_base_url` que no es URL)."""

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class MissingCredentialError(SpotifyToolsError):
    """No hay token explícito ni en la variable de entorno esperada."""

    def __init__(self, source_name: str) -> None:
        super().__init__(
            f"Missing Spotify access token. Pass access_token in config or set {source_name}."
        )
        self.source_name = source_name


class UserResolutionError(SpotifyToolsError):
    """No se pudo determinar la cuenta destino para crear la playlist."""


class RemoteApiError(SpotifyToolsError):
    """Respuesta no-2xx de la API de Spotify."""

    def __init__(self, status: int, detail: str) -> None:
        super().__init__(f"Spotify API request failed ({status}): {detail}")
        self.status = status
        self.detail = detail
