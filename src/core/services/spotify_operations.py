"""Handlers de las cuatro operaciones sobre la cuenta de Spotify.

Cada handler:
1) resuelve el token (explícito o variable de entorno),
2) construye path + query y llama al Request Executor,
3) normaliza la respuesta cruda a un modelo del dominio.

`SpotifyOperations` captura una `SpotifyToolsConfig` congelada; no hay más
estado compartido entre invocaciones, así que las llamadas concurrentes son
independientes.
"""

from __future__ import annotations

import logging
from urllib.parse import quote, urlencode

import httpx

from adapters.http_client import SpotifyApiClient
from core.config import AppSettings, SpotifyToolsConfig
from core.credentials import resolve_access_token
from core.domain.models import (
    CreatedPlaylist,
    CreatePlaylistInput,
    GetMeInput,
    ListMyPlaylistsInput,
    PlaylistPage,
    SearchTracksInput,
    SpotifyProfile,
    TrackSearchResult,
)
from core.errors import UserResolutionError
from core.interfaces.requester import SpotifyRequester
from core.services.response_mapping import (
    map_created_playlist,
    map_playlist_page,
    map_profile,
    map_track_search,
)

logger = logging.getLogger(__name__)


def search_tracks_query(params: SearchTracksInput) -> str:
    query: dict[str, str] = {
        "q": params.query,
        "type": "track",
        "limit": str(params.limit),
        "offset": str(params.offset),
    }
    if params.market:
        query["market"] = params.market.upper()
    return urlencode(query)


def list_playlists_query(params: ListMyPlaylistsInput) -> str:
    return urlencode({"limit": str(params.limit), "offset": str(params.offset)})


class SpotifyOperations:
    """Operation Handlers ligados a una configuración de runtime."""

    def __init__(
        self,
        runtime: SpotifyToolsConfig,
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._runtime = runtime
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def runtime(self) -> SpotifyToolsConfig:
        return self._runtime

    def _requester(self) -> SpotifyRequester:
        token = resolve_access_token(self._runtime)
        return SpotifyApiClient(
            self._runtime,
            token,
            settings=self._settings,
            transport=self._transport,
        )

    async def get_me(self, params: GetMeInput) -> SpotifyProfile:
        payload = await self._requester().request("GET", "/me")
        return map_profile(payload)

    async def search_tracks(self, params: SearchTracksInput) -> TrackSearchResult:
        path = f"/search?{search_tracks_query(params)}"
        payload = await self._requester().request("GET", path)
        return map_track_search(payload, params)

    async def list_my_playlists(self, params: ListMyPlaylistsInput) -> PlaylistPage:
        path = f"/me/playlists?{list_playlists_query(params)}"
        payload = await self._requester().request("GET", path)
        return map_playlist_page(payload, params)

    async def create_playlist(self, params: CreatePlaylistInput) -> CreatedPlaylist:
        requester = self._requester()
        user_id = params.user_id or await self._resolve_user_id(requester)

        body = params.model_dump(
            include={"name", "description", "public", "collaborative"},
            exclude_none=True,
        )

        logger.info("Creating Spotify playlist %r for user %s", params.name, user_id)
        payload = await requester.request(
            "POST",
            f"/users/{quote(user_id, safe='')}/playlists",
            body,
        )
        return map_created_playlist(payload)

    async def _resolve_user_id(self, requester: SpotifyRequester) -> str:
        if self._runtime.default_user_id:
            return self._runtime.default_user_id

        me = await requester.request("GET", "/me")
        user_id = me.get("id") if isinstance(me, dict) else None
        if user_id is None or not str(user_id).strip():
            raise UserResolutionError(
                "Failed to resolve authenticated Spotify user id from /me endpoint."
            )
        return str(user_id)
