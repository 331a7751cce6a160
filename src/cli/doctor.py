"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, SpotifyToolsConfig
from core.credentials import describe_token_source
from core.domain.models import GetMeInput
from core.errors import SpotifyToolsError
from core.services.spotify_operations import SpotifyOperations

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(runtime: SpotifyToolsConfig, settings: AppSettings) -> tuple[bool, str]:
    try:
        profile = await SpotifyOperations(runtime, settings=settings).get_me(GetMeInput())
    except SpotifyToolsError as exc:
        return False, str(exc)
    except Exception as exc:
        return False, f"{type(exc).__name__}: {exc}"
    return True, f"authenticated as {profile.id or '?'}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    runtime: SpotifyToolsConfig = ctx.obj.runtime

    table = Table(title="spotify-agent-tools Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    source = describe_token_source(runtime)
    if source:
        table.add_row("Access token", "OK", f"from {source}")
    else:
        table.add_row("Access token", "MISSING", f"pass --token or set {runtime.token_source_name}")
    table.add_row("API base_url", "OK", runtime.api_base_url)
    table.add_row(
        "HTTP timeout",
        "OK",
        "none" if settings.http_timeout_seconds is None else f"{settings.http_timeout_seconds}s",
    )

    # Connectivity (best-effort)
    if source:
        ok_api, detail_api = asyncio.run(_check_api(runtime, settings))
        table.add_row("GET /me", "OK" if ok_api else "FAIL", detail_api)
    else:
        table.add_row("GET /me", "SKIPPED", "no access token")

    _console.print(table)

    if not source:
        _console.print(
            "\n[yellow]Note:[/yellow] Token acquisition (OAuth) is out of scope; "
            "export a short-lived access token before running the tools."
        )
