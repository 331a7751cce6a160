"""Normalización defensiva del JSON de la Web API."""

from __future__ import annotations

import pytest

from core.domain.models import ListMyPlaylistsInput, SearchTracksInput
from core.services.response_mapping import (
    map_created_playlist,
    map_playlist_page,
    map_profile,
    map_track,
    map_track_search,
)


def test_search_example_maps_to_stable_shape():
    params = SearchTracksInput(query="song", limit=7, offset=3)
    raw = {
        "tracks": {
            "total": 1,
            "items": [
                {
                    "id": "t1",
                    "name": "Song",
                    "artists": [{"name": "Artist"}],
                    "album": {"name": "Album"},
                    "duration_ms": 1000,
                    "popularity": 50,
                    "uri": "spotify:track:t1",
                    "external_urls": {"spotify": "https://x"},
                }
            ],
        }
    }

    result = map_track_search(raw, params)

    assert result.model_dump(by_alias=True) == {
        "total": 1,
        "limit": 7,
        "offset": 3,
        "tracks": [
            {
                "id": "t1",
                "name": "Song",
                "artists": ["Artist"],
                "album": "Album",
                "durationMs": 1000,
                "popularity": 50,
                "uri": "spotify:track:t1",
                "externalUrl": "https://x",
            }
        ],
    }


def test_search_prefers_remote_paging_values():
    params = SearchTracksInput(query="q", limit=5, offset=0)
    result = map_track_search({"tracks": {"total": 99, "limit": 20, "offset": 40, "items": []}}, params)

    assert (result.total, result.limit, result.offset) == (99, 20, 40)


@pytest.mark.parametrize("items", [None, "nope", {"0": {}}, 42])
def test_non_list_track_items_are_treated_as_empty(items):
    params = SearchTracksInput(query="q")
    result = map_track_search({"tracks": {"items": items}}, params)

    assert result.tracks == []
    assert result.total == 0


@pytest.mark.parametrize("raw", [None, [], "oops", {"tracks": None}, {"tracks": "x"}])
def test_search_tolerates_garbage_payload(raw):
    result = map_track_search(raw, SearchTracksInput(query="q", limit=3, offset=6))

    assert (result.total, result.limit, result.offset, result.tracks) == (0, 3, 6, [])


def test_total_falls_back_to_item_count():
    result = map_track_search({"tracks": {"items": [{}, {}]}}, SearchTracksInput(query="q"))
    assert result.total == 2


def test_track_defaults_and_artist_filtering():
    track = map_track(
        {
            "artists": [{"name": "A"}, {"name": None}, {}, "bogus", {"name": ""}, {"name": "B"}],
            "album": None,
            "duration_ms": "not-a-number",
            "popularity": True,
        }
    )

    assert track.id == ""
    assert track.name == ""
    assert track.artists == ["A", "B"]
    assert track.album is None
    assert track.duration_ms == 0
    assert track.popularity == 0
    assert track.uri == ""
    assert track.external_url is None


def test_profile_mapping():
    profile = map_profile(
        {
            "id": "u1",
            "display_name": "Ana",
            "email": "",
            "country": "ES",
            "product": "premium",
            "followers": {"total": 12},
            "uri": "spotify:user:u1",
        }
    )

    assert profile.model_dump(by_alias=True) == {
        "id": "u1",
        "displayName": "Ana",
        "email": None,
        "country": "ES",
        "product": "premium",
        "followers": 12,
        "uri": "spotify:user:u1",
    }


def test_profile_mapping_of_empty_payload():
    profile = map_profile({})

    assert profile.id == ""
    assert profile.display_name is None
    assert profile.followers == 0
    assert profile.uri is None


def test_playlist_page_mapping():
    raw = {
        "items": [
            {
                "id": "p1",
                "name": "Mix",
                "description": "",
                "public": None,
                "collaborative": True,
                "owner": {"id": "u1"},
                "tracks": {"total": 30},
                "snapshot_id": "snap",
                "external_urls": {"spotify": "https://open.spotify.com/playlist/p1"},
            },
            {"id": "p2", "name": "Other", "public": True},
            {"id": "p3"},
        ]
    }

    page = map_playlist_page(raw, ListMyPlaylistsInput(limit=20, offset=0))

    assert (page.total, page.limit, page.offset) == (3, 20, 0)
    first, second, third = page.playlists
    assert first.model_dump(by_alias=True) == {
        "id": "p1",
        "name": "Mix",
        "description": None,
        "public": None,
        "collaborative": True,
        "ownerId": "u1",
        "tracksTotal": 30,
        "snapshotId": "snap",
        "externalUrl": "https://open.spotify.com/playlist/p1",
    }
    assert second.public is True
    assert second.collaborative is False
    assert third.public is False
    assert third.owner_id is None
    assert third.tracks_total == 0


def test_created_playlist_mapping():
    created = map_created_playlist(
        {
            "id": "p9",
            "name": "Road trip",
            "public": False,
            "collaborative": False,
            "description": "summer",
            "snapshot_id": "s1",
            "external_urls": {"spotify": "https://open.spotify.com/playlist/p9"},
            "owner": {"id": "u1"},
        }
    )

    assert created.model_dump(by_alias=True) == {
        "id": "p9",
        "name": "Road trip",
        "public": False,
        "collaborative": False,
        "description": "summer",
        "snapshotId": "s1",
        "externalUrl": "https://open.spotify.com/playlist/p9",
        "ownerId": "u1",
    }


def test_numeric_ids_are_stringified():
    assert map_created_playlist({"id": 123}).id == "123"
