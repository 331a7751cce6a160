"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CreatedPlaylist, PlaylistPage, SpotifyProfile, TrackSearchResult
from core.services.toolset import SpotifyTool


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Solo en modos interactivos; nunca con `--json` ni en el servidor MCP.
    """

    title = Text("spotify-agent-tools", style="bold green")
    subtitle = Text("Perfil • Búsqueda • Playlists", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(1, 4)))


def _format_duration(ms: int) -> str:
    minutes, seconds = divmod(max(ms, 0) // 1000, 60)
    return f"{minutes}:{seconds:02d}"


def _yes_no(value: bool | None) -> str:
    if value is None:
        return "?"
    return "yes" if value else "no"


def build_profile_panel(profile: SpotifyProfile) -> Panel:
    body = Text()
    body.append(f"{profile.display_name or profile.id}\n", style="bold")
    body.append(f"id: {profile.id}\n")
    if profile.email:
        body.append(f"email: {profile.email}\n")
    if profile.country:
        body.append(f"country: {profile.country}\n")
    if profile.product:
        body.append(f"product: {profile.product}\n")
    body.append(f"followers: {profile.followers}")
    if profile.uri:
        body.append(f"\n{profile.uri}", style="dim")
    return Panel(body, title=Text("Spotify profile", style="bold green"), border_style="green")


def build_tracks_table(result: TrackSearchResult) -> Table:
    if result.tracks:
        title = f"Tracks ({result.offset + 1}-{result.offset + len(result.tracks)} of {result.total})"
    else:
        title = f"Tracks (0 of {result.total})"
    table = Table(title=title)
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Artists", style="cyan")
    table.add_column("Album", style="white")
    table.add_column("Duration", style="green", no_wrap=True)
    table.add_column("URI", style="magenta")
    for i, track in enumerate(result.tracks, result.offset + 1):
        table.add_row(
            str(i),
            track.name,
            ", ".join(track.artists),
            track.album or "",
            _format_duration(track.duration_ms),
            track.uri,
        )
    return table


def build_playlists_table(page: PlaylistPage) -> Table:
    table = Table(title=f"Playlists ({page.total} total)")
    table.add_column("Name", style="bold white")
    table.add_column("Tracks", style="green", justify="right")
    table.add_column("Public", style="cyan")
    table.add_column("Collab", style="cyan")
    table.add_column("Owner", style="white")
    table.add_column("ID", style="magenta")
    for playlist in page.playlists:
        table.add_row(
            playlist.name,
            str(playlist.tracks_total),
            _yes_no(playlist.public),
            _yes_no(playlist.collaborative),
            playlist.owner_id or "",
            playlist.id,
        )
    return table


def build_created_playlist_panel(playlist: CreatedPlaylist) -> Panel:
    body = Text()
    body.append(f"{playlist.name}\n", style="bold")
    body.append(f"id: {playlist.id}\n")
    body.append(f"public: {_yes_no(playlist.public)}  collaborative: {_yes_no(playlist.collaborative)}")
    if playlist.external_url:
        body.append(f"\n{playlist.external_url}", style="dim")
    return Panel(body, title=Text("Playlist created", style="bold green"), border_style="green")


def build_tools_table(tools: Iterable[SpotifyTool]) -> Table:
    table = Table(title="Registered tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Inputs", style="dim")
    for tool in tools:
        fields = ", ".join(tool.input_schema.model_fields) or "-"
        table.add_row(tool.name, tool.description, fields)
    return table
