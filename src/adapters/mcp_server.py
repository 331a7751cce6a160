"""Adaptador MCP (Model Context Protocol) sobre stdio.

Por qué existe:
- Republica las mismas cuatro operaciones para clientes MCP.
- Reutiliza el registro del Core: cambia solo el empaquetado (JSON Schema en
  vez de clase Pydantic, resultado como `TextContent` JSON).

Nota:
- El transporte es stdout; cualquier log debe ir a stderr.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from core.config import AppSettings, SpotifyToolsConfig
from core.services.toolset import OPERATIONS, bind_operation, build_operations

logger = logging.getLogger(__name__)

SERVER_NAME = "spotify-agent-tools"


@dataclass(frozen=True)
class McpToolDefinition:
    name: str
    description: str
    input_schema: dict[str, Any]
    execute: Callable[[Mapping[str, Any] | None], Awaitable[dict[str, Any]]]


def create_spotify_mcp_tools(
    config: SpotifyToolsConfig | Mapping[str, Any] | None = None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, McpToolDefinition]:
    operations = build_operations(config, settings=settings, transport=transport)
    tools: dict[str, McpToolDefinition] = {}
    for definition in OPERATIONS:
        bound = bind_operation(definition, operations)

        async def execute(arguments: Mapping[str, Any] | None = None, _bound=bound) -> dict[str, Any]:
            result = await _bound.execute(arguments)
            return result.model_dump(mode="json", by_alias=True)

        tools[definition.name] = McpToolDefinition(
            name=definition.name,
            description=definition.description,
            input_schema=definition.input_model.model_json_schema(),
            execute=execute,
        )
    return tools


def build_mcp_server(tools: dict[str, McpToolDefinition]) -> Server:
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(name=t.name, description=t.description, inputSchema=t.input_schema)
            for t in tools.values()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        tool = tools.get(name)
        if tool is None:
            raise ValueError(f"Unknown tool: {name}")
        logger.info("MCP call %s", name)
        result = await tool.execute(arguments or {})
        return [TextContent(type="text", text=json.dumps(result, ensure_ascii=False))]

    return server


async def serve_stdio(
    config: SpotifyToolsConfig | Mapping[str, Any] | None = None,
    *,
    settings: AppSettings | None = None,
) -> None:
    server = build_mcp_server(create_spotify_mcp_tools(config, settings=settings))
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
