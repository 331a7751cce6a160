"""Registro de operaciones y fachada de tools.

Por qué un único registro:
- Hay un solo conjunto canónico de pares (schema, handler). Tanto la fachada
  de tools (LangChain) como el adaptador MCP son proyecciones finas de este
  registro; ninguno duplica validación ni ejecución.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import BaseModel

from core.config import AppSettings, SpotifyToolsConfig, resolve_runtime_config
from core.domain.models import (
    CreatePlaylistInput,
    GetMeInput,
    ListMyPlaylistsInput,
    SearchTracksInput,
)
from core.services.spotify_operations import SpotifyOperations

ToolInput = BaseModel | Mapping[str, Any] | None


@dataclass(frozen=True)
class OperationDefinition:
    name: str
    description: str
    input_model: type[BaseModel]
    run: Callable[[SpotifyOperations, Any], Awaitable[BaseModel]]


OPERATIONS: tuple[OperationDefinition, ...] = (
    OperationDefinition(
        name="spotify_get_me",
        description="Fetch the current Spotify account profile for the authenticated user.",
        input_model=GetMeInput,
        run=SpotifyOperations.get_me,
    ),
    OperationDefinition(
        name="spotify_search_tracks",
        description="Search Spotify tracks by query string and return compact track metadata.",
        input_model=SearchTracksInput,
        run=SpotifyOperations.search_tracks,
    ),
    OperationDefinition(
        name="spotify_list_my_playlists",
        description="List Spotify playlists for the authenticated user account.",
        input_model=ListMyPlaylistsInput,
        run=SpotifyOperations.list_my_playlists,
    ),
    OperationDefinition(
        name="spotify_create_playlist",
        description=(
            "Create a Spotify playlist for the authenticated user. "
            "Requires explicit confirm=true guardrail."
        ),
        input_model=CreatePlaylistInput,
        run=SpotifyOperations.create_playlist,
    ),
)

OPERATIONS_BY_NAME: dict[str, OperationDefinition] = {op.name: op for op in OPERATIONS}


@dataclass(frozen=True)
class SpotifyTool:
    """Fachada de una operación: nombre + descripción + schema + execute."""

    name: str
    description: str
    input_schema: type[BaseModel]
    execute: Callable[[ToolInput], Awaitable[BaseModel]]

    def json_schema(self) -> dict[str, Any]:
        return self.input_schema.model_json_schema()


def validate_input(definition: OperationDefinition, raw: ToolInput) -> BaseModel:
    """Valida el input contra el schema de la operación.

    `pydantic.ValidationError` se propaga sin tocar.
    """

    if isinstance(raw, definition.input_model):
        return raw
    if isinstance(raw, BaseModel):
        raw = raw.model_dump()
    return definition.input_model.model_validate(dict(raw or {}))


def bind_operation(definition: OperationDefinition, operations: SpotifyOperations) -> SpotifyTool:
    async def execute(raw: ToolInput = None) -> BaseModel:
        params = validate_input(definition, raw)
        return await definition.run(operations, params)

    return SpotifyTool(
        name=definition.name,
        description=definition.description,
        input_schema=definition.input_model,
        execute=execute,
    )


def build_operations(
    config: SpotifyToolsConfig | Mapping[str, Any] | None = None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SpotifyOperations:
    runtime = resolve_runtime_config(config)
    return SpotifyOperations(runtime, settings=settings, transport=transport)


def create_spotify_tools(
    config: SpotifyToolsConfig | Mapping[str, Any] | None = None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, SpotifyTool]:
    """Construye las cuatro tools a partir de una configuración parcial.

    La configuración se resuelve una sola vez aquí; una config inválida falla
    con `ConfigValidationError` antes de cualquier llamada de red.
    """

    operations = build_operations(config, settings=settings, transport=transport)
    return {op.name: bind_operation(op, operations) for op in OPERATIONS}


async def execute_spotify_tool(
    name: str,
    arguments: ToolInput,
    config: SpotifyToolsConfig | Mapping[str, Any] | None = None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BaseModel:
    """Ejecuta una operación puntual resolviendo la config en cada llamada."""

    definition = OPERATIONS_BY_NAME[name]
    operations = build_operations(config, settings=settings, transport=transport)
    return await bind_operation(definition, operations).execute(arguments)
