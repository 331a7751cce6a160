"""Proyección de las tools a LangChain (`StructuredTool`).

Por qué un adaptador:
- El Core expone `SpotifyTool` sin depender de ningún framework de agentes.
- Aquí solo se reempaqueta: mismo nombre, descripción, schema y `execute`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from langchain_core.tools import StructuredTool

from core.services.toolset import SpotifyTool


def to_langchain_tool(tool: SpotifyTool) -> StructuredTool:
    async def _run(**kwargs: Any) -> dict[str, Any]:
        result = await tool.execute(kwargs)
        return result.model_dump(mode="json", by_alias=True)

    return StructuredTool.from_function(
        coroutine=_run,
        name=tool.name,
        description=tool.description,
        args_schema=tool.input_schema,
    )


def to_langchain_tools(tools: dict[str, SpotifyTool] | Iterable[SpotifyTool]) -> list[StructuredTool]:
    items = tools.values() if isinstance(tools, dict) else tools
    return [to_langchain_tool(tool) for tool in items]
