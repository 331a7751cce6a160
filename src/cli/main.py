"""CLI (Typer) para ejecutar las tools de Spotify desde la terminal.

Por qué una CLI:
- Permite probar cada operación a mano con la misma validación que ve el agente.
- Expone el servidor MCP (`mcp`) y el diagnóstico (`doctor`).

Salida:
- Tablas/paneles Rich por defecto; `--json` imprime el output camelCase tal cual.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, NoReturn, Optional

import httpx
import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.mcp_server import serve_stdio
from cli import doctor
from cli.ui_components import (
    build_created_playlist_panel,
    build_playlists_table,
    build_profile_panel,
    build_tools_table,
    build_tracks_table,
    print_banner,
)
from core.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_TOKEN_SOURCE_NAME,
    AppSettings,
    SpotifyToolsConfig,
    resolve_runtime_config,
)
from core.errors import SpotifyToolsError
from core.services.toolset import SpotifyTool, create_spotify_tools

app = typer.Typer(no_args_is_help=True, help="Spotify tools for AI agents (profile, search, playlists).")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@dataclass(frozen=True)
class CliState:
    runtime: SpotifyToolsConfig
    json_output: bool


def configure_logging(level: str) -> None:
    """Logs a stderr vía Rich (stdout queda libre para JSON/MCP)."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    _err_console.print(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(code=1)


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


def _tool(ctx: typer.Context, name: str) -> SpotifyTool:
    return create_spotify_tools(_state(ctx).runtime, settings=AppSettings())[name]


def _execute(ctx: typer.Context, name: str, arguments: dict[str, Any]) -> BaseModel:
    tool = _tool(ctx, name)
    try:
        return asyncio.run(tool.execute(arguments))
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}" for err in exc.errors()
        )
        _fail(f"invalid input for {name}: {details}")
    except SpotifyToolsError as exc:
        _fail(str(exc))
    except httpx.HTTPError as exc:
        _fail(f"network error calling Spotify: {type(exc).__name__}: {exc}")


def _emit_json(result: BaseModel) -> None:
    payload = result.model_dump(mode="json", by_alias=True)
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.callback()
def main(
    ctx: typer.Context,
    token: Optional[str] = typer.Option(None, "--token", help="Explicit access token (wins over env)."),
    token_env: str = typer.Option(
        DEFAULT_TOKEN_SOURCE_NAME, "--token-env", help="Env var read when --token is not given."
    ),
    api_base_url: str = typer.Option(DEFAULT_API_BASE_URL, "--api-base-url", help="Spotify Web API base URL."),
    user_id: Optional[str] = typer.Option(None, "--user-id", help="Default account for create-playlist."),
    json_output: bool = typer.Option(False, "--json", help="Print raw JSON output."),
) -> None:
    configure_logging(AppSettings().log_level)
    try:
        runtime = resolve_runtime_config(
            {
                "access_token": token,
                "token_source_name": token_env,
                "api_base_url": api_base_url,
                "default_user_id": user_id,
            }
        )
    except SpotifyToolsError as exc:
        _fail(str(exc))
    ctx.obj = CliState(runtime=runtime, json_output=json_output)


@app.command()
def me(ctx: typer.Context) -> None:
    """Show the profile of the authenticated account."""

    result = _execute(ctx, "spotify_get_me", {})
    if _state(ctx).json_output:
        _emit_json(result)
        return
    _console.print(build_profile_panel(result))


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Search text."),
    limit: int = typer.Option(10, "--limit", "-l", help="1-50 results."),
    offset: int = typer.Option(0, "--offset", help="Result offset."),
    market: Optional[str] = typer.Option(None, "--market", "-m", help="2-letter market code."),
) -> None:
    """Search tracks."""

    arguments: dict[str, Any] = {"query": query, "limit": limit, "offset": offset}
    if market is not None:
        arguments["market"] = market
    result = _execute(ctx, "spotify_search_tracks", arguments)
    if _state(ctx).json_output:
        _emit_json(result)
        return
    _console.print(build_tracks_table(result))


@app.command()
def playlists(
    ctx: typer.Context,
    limit: int = typer.Option(20, "--limit", "-l", help="1-50 playlists."),
    offset: int = typer.Option(0, "--offset", help="Playlist offset."),
) -> None:
    """List the playlists of the authenticated account."""

    result = _execute(ctx, "spotify_list_my_playlists", {"limit": limit, "offset": offset})
    if _state(ctx).json_output:
        _emit_json(result)
        return
    _console.print(build_playlists_table(result))


@app.command(name="create-playlist")
def create_playlist(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Playlist name."),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    public: bool = typer.Option(False, "--public", help="Make the playlist public."),
    collaborative: bool = typer.Option(False, "--collaborative", help="Make it collaborative (non-public only)."),
    user_id: Optional[str] = typer.Option(None, "--user-id", help="Target account id."),
    confirm: bool = typer.Option(False, "--confirm", help="Required: authorizes the write."),
) -> None:
    """Create a playlist (requires --confirm)."""

    arguments: dict[str, Any] = {
        "name": name,
        "public": public,
        "collaborative": collaborative,
        "confirm": confirm,
    }
    if description is not None:
        arguments["description"] = description
    if user_id is not None:
        arguments["user_id"] = user_id
    result = _execute(ctx, "spotify_create_playlist", arguments)
    if _state(ctx).json_output:
        _emit_json(result)
        return
    _console.print(build_created_playlist_panel(result))


@app.command()
def tools(ctx: typer.Context) -> None:
    """List the registered tools and their inputs."""

    registered = create_spotify_tools(_state(ctx).runtime)
    if _state(ctx).json_output:
        payload = [
            {"name": t.name, "description": t.description, "inputSchema": t.json_schema()}
            for t in registered.values()
        ]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    print_banner(_console)
    _console.print(build_tools_table(registered.values()))


@app.command()
def mcp(ctx: typer.Context) -> None:
    """Serve the tools over MCP (stdio transport)."""

    asyncio.run(serve_stdio(_state(ctx).runtime, settings=AppSettings()))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
