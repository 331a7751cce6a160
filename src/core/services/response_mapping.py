"""Normalización de respuestas crudas de la Web API.

Este módulo es la frontera de confianza con datos externos: el JSON de Spotify
se trata como parcialmente no fiable (campos ausentes, null o con tipo
incorrecto). Nada de este JSON crudo sale de aquí; solo modelos del dominio
con defaults estables.
"""

from __future__ import annotations

import math
from typing import Any

from core.domain.models import (
    CreatedPlaylist,
    ListMyPlaylistsInput,
    PlaylistPage,
    PlaylistSummary,
    SearchTracksInput,
    SpotifyProfile,
    TrackSearchResult,
    TrackSummary,
)


def _obj(value: object) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _items(value: object) -> list[Any]:
    return value if isinstance(value, list) else []


def _text(value: object, default: str = "") -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _optional_text(value: object) -> str | None:
    # Cadena vacía se considera ausente.
    return _text(value) or None


def _number(value: object, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _tri_state(payload: dict[str, Any], key: str) -> bool | None:
    """null -> None; clave ausente -> False; resto -> bool(valor)."""

    value = payload.get(key, False)
    if value is None:
        return None
    return bool(value)


def _external_url(payload: dict[str, Any]) -> str | None:
    return _optional_text(_obj(payload.get("external_urls")).get("spotify"))


def map_profile(payload: object) -> SpotifyProfile:
    data = _obj(payload)
    return SpotifyProfile(
        id=_text(data.get("id")),
        display_name=_optional_text(data.get("display_name")),
        email=_optional_text(data.get("email")),
        country=_optional_text(data.get("country")),
        product=_optional_text(data.get("product")),
        followers=_number(_obj(data.get("followers")).get("total"), 0),
        uri=_optional_text(data.get("uri")),
    )


def map_track(payload: object) -> TrackSummary:
    track = _obj(payload)
    artists = [
        name
        for name in (_optional_text(_obj(artist).get("name")) for artist in _items(track.get("artists")))
        if name
    ]
    return TrackSummary(
        id=_text(track.get("id")),
        name=_text(track.get("name")),
        artists=artists,
        album=_optional_text(_obj(track.get("album")).get("name")),
        duration_ms=_number(track.get("duration_ms"), 0),
        popularity=_number(track.get("popularity"), 0),
        uri=_text(track.get("uri")),
        external_url=_external_url(track),
    )


def map_track_search(payload: object, params: SearchTracksInput) -> TrackSearchResult:
    tracks = _obj(_obj(payload).get("tracks"))
    items = _items(tracks.get("items"))
    return TrackSearchResult(
        total=_number(tracks.get("total"), len(items)),
        limit=_number(tracks.get("limit"), params.limit),
        offset=_number(tracks.get("offset"), params.offset),
        tracks=[map_track(item) for item in items],
    )


def map_playlist(payload: object) -> PlaylistSummary:
    playlist = _obj(payload)
    return PlaylistSummary(
        id=_text(playlist.get("id")),
        name=_text(playlist.get("name")),
        description=_optional_text(playlist.get("description")),
        public=_tri_state(playlist, "public"),
        collaborative=bool(playlist.get("collaborative")),
        owner_id=_optional_text(_obj(playlist.get("owner")).get("id")),
        tracks_total=_number(_obj(playlist.get("tracks")).get("total"), 0),
        snapshot_id=_optional_text(playlist.get("snapshot_id")),
        external_url=_external_url(playlist),
    )


def map_playlist_page(payload: object, params: ListMyPlaylistsInput) -> PlaylistPage:
    data = _obj(payload)
    items = _items(data.get("items"))
    return PlaylistPage(
        total=_number(data.get("total"), len(items)),
        limit=_number(data.get("limit"), params.limit),
        offset=_number(data.get("offset"), params.offset),
        playlists=[map_playlist(item) for item in items],
    )


def map_created_playlist(payload: object) -> CreatedPlaylist:
    data = _obj(payload)
    return CreatedPlaylist(
        id=_text(data.get("id")),
        name=_text(data.get("name")),
        public=_tri_state(data, "public"),
        collaborative=bool(data.get("collaborative")),
        description=_optional_text(data.get("description")),
        snapshot_id=_optional_text(data.get("snapshot_id")),
        external_url=_external_url(data),
        owner_id=_optional_text(_obj(data.get("owner")).get("id")),
    )
