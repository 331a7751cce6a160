"""Modelos del dominio (Pydantic v2).

Dos familias:
- Inputs de operación: el contrato que ve el agente (validación estricta,
  incluida la guarda `confirm=True` de la única operación que escribe).
- Outputs de operación: estructuras estables con defaults defensivos, para
  aislar al llamador de campos opcionales/nulos de la API remota.

Nota:
- Los outputs se serializan en camelCase (`model_dump(by_alias=True)`), que es
  la forma que consumen los agentes.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class _InputModel(BaseModel):
    # strict: sin coerción (`"5"` no es 5, `1` no es True).
    model_config = ConfigDict(extra="ignore", strict=True)


class GetMeInput(_InputModel):
    """Sin parámetros: el perfil es siempre el del token."""


class SearchTracksInput(_InputModel):
    query: str = Field(
        ...,
        min_length=1,
        description="Texto de búsqueda (canción, artista, álbum...).",
    )
    limit: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Número máximo de pistas (1-50).",
    )
    offset: int = Field(
        default=0,
        ge=0,
        description="Desplazamiento dentro de los resultados.",
    )
    market: str | None = Field(
        default=None,
        min_length=2,
        max_length=2,
        description="Código de mercado ISO 3166-1 alpha-2 (opcional).",
    )


class ListMyPlaylistsInput(_InputModel):
    limit: int = Field(
        default=20,
        ge=1,
        le=50,
        description="Número máximo de playlists (1-50).",
    )
    offset: int = Field(
        default=0,
        ge=0,
        description="Desplazamiento dentro de las playlists.",
    )


class CreatePlaylistInput(_InputModel):
    """Input de la operación mutante.

    Por qué `confirm: Literal[True]`:
    - La guarda de escritura vive en el contrato de entrada, no en un `if`
      dentro del handler: sin `confirm=true` explícito no hay validación posible.
    """

    user_id: str | None = Field(
        default=None,
        min_length=1,
        description="Cuenta destino. Si falta se usa la cuenta por defecto o /me.",
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Nombre de la playlist.",
    )
    description: str | None = Field(
        default=None,
        max_length=300,
        description="Descripción de la playlist (opcional).",
    )
    public: bool = Field(
        default=False,
        description="Si la playlist es pública.",
    )
    collaborative: bool = Field(
        default=False,
        description="Si la playlist es colaborativa (solo posible si no es pública).",
    )
    confirm: Literal[True] = Field(
        ...,
        description="Debe ser exactamente true para autorizar la escritura.",
    )

    @field_validator("collaborative")
    @classmethod
    def _collaborative_requires_private(cls, value: bool, info: ValidationInfo) -> bool:
        if value and info.data.get("public"):
            raise ValueError("Spotify collaborative playlists must be non-public.")
        return value


class _OutputModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SpotifyProfile(_OutputModel):
    id: str = ""
    display_name: str | None = None
    email: str | None = None
    country: str | None = None
    product: str | None = None
    followers: int = 0
    uri: str | None = None


class TrackSummary(_OutputModel):
    id: str = ""
    name: str = ""
    artists: list[str] = Field(default_factory=list)
    album: str | None = None
    duration_ms: int = 0
    popularity: int = 0
    uri: str = ""
    external_url: str | None = None


class TrackSearchResult(_OutputModel):
    total: int = 0
    limit: int = 0
    offset: int = 0
    tracks: list[TrackSummary] = Field(default_factory=list)


class PlaylistSummary(_OutputModel):
    """Playlist propia; `public` es tri-estado porque Spotify puede reportar null."""

    id: str = ""
    name: str = ""
    description: str | None = None
    public: bool | None = None
    collaborative: bool = False
    owner_id: str | None = None
    tracks_total: int = 0
    snapshot_id: str | None = None
    external_url: str | None = None


class PlaylistPage(_OutputModel):
    total: int = 0
    limit: int = 0
    offset: int = 0
    playlists: list[PlaylistSummary] = Field(default_factory=list)


class CreatedPlaylist(_OutputModel):
    id: str = ""
    name: str = ""
    public: bool | None = None
    collaborative: bool = False
    description: str | None = None
    snapshot_id: str | None = None
    external_url: str | None = None
    owner_id: str | None = None
