"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Separa dos cosas distintas:
  * `AppSettings`: ajustes ambientales del proceso (timeout, user-agent, logs).
  * `SpotifyToolsConfig`: la configuración de runtime de un toolset concreto,
    construida una vez por factory y congelada después.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigValidationError

DEFAULT_TOKEN_SOURCE_NAME = "SPOTIFY_ACCESS_TOKEN"
DEFAULT_API_BASE_URL = "https://api.spotify.com/v1"

_URL_ADAPTER = TypeAdapter(AnyUrl)


class AppSettings(BaseSettings):
    """Configuración ambiental de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPOTIFY_TOOLS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout; el llamador impone deadlines.",
    )
    user_agent: str = Field(
        default="spotify-agent-tools/0.1",
        min_length=1,
        description="User-Agent para peticiones a la Web API.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING...).",
    )


class SpotifyToolsConfig(BaseModel):
    """Configuración de runtime de un toolset.

    Invariantes:
    - `api_base_url` es una URL absoluta válida (sin `/` final).
    - `token_source_name` siempre tiene valor, aunque el llamador no lo pase.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    access_token: str | None = Field(
        default=None,
        description="Token bearer explícito; gana sobre la variable de entorno.",
    )
    token_source_name: str = Field(
        default=DEFAULT_TOKEN_SOURCE_NAME,
        min_length=1,
        description="Nombre de la variable de entorno de fallback para el token.",
    )
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="URL base de la Web API de Spotify.",
    )
    default_user_id: str | None = Field(
        default=None,
        description="Cuenta destino por defecto para crear playlists.",
    )

    @field_validator("api_base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"api_base_url must be an absolute URL, got {value!r}") from exc
        return value.rstrip("/")


def resolve_runtime_config(
    config: SpotifyToolsConfig | Mapping[str, Any] | None = None,
) -> SpotifyToolsConfig:
    """Convierte una configuración parcial en un `SpotifyToolsConfig` completo.

    Falla con `ConfigValidationError` antes de cualquier actividad de red.
    """

    if isinstance(config, SpotifyToolsConfig):
        return config
    try:
        return SpotifyToolsConfig.model_validate(dict(config or {}))
    except ValidationError as exc:
        raise ConfigValidationError(
            f"Invalid Spotify tools configuration: {exc}",
            errors=exc.errors(include_url=False),
        ) from exc
