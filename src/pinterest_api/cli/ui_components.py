"""Rich UI components for the CLI.

Keeps command logic apart from visual details; tables and panels are
shared between commands.
"""

from __future__ import annotations

from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pinterest_api.core.domain.models import ApiObject, Board, Pin, User
from pinterest_api.core.http import Response


def _count(obj: ApiObject, key: str) -> str:
    counts = getattr(obj, "counts", None) or {}
    value = counts.get(key)
    return "" if value is None else str(value)


def build_users_table(users: Iterable[User], *, title: str = "Users") -> Table:
    table = Table(title=title)
    table.add_column("Id", style="dim", no_wrap=True)
    table.add_column("Username", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Followers", style="green", justify="right")
    table.add_column("Pins", style="green", justify="right")
    for user in users:
        name = " ".join(part for part in (user.first_name, user.last_name) if part)
        table.add_row(user.id or "", user.username or "", name, _count(user, "followers"), _count(user, "pins"))
    return table


def build_boards_table(boards: Iterable[Board], *, title: str = "Boards") -> Table:
    table = Table(title=title)
    table.add_column("Id", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Pins", style="green", justify="right")
    table.add_column("URL", style="magenta")
    for board in boards:
        table.add_row(board.id or "", board.name or "", _count(board, "pins"), board.url or "")
    return table


def build_pins_table(pins: Iterable[Pin], *, title: str = "Pins") -> Table:
    table = Table(title=title)
    table.add_column("Id", style="dim", no_wrap=True)
    table.add_column("Note", style="white")
    table.add_column("Link", style="magenta")
    table.add_column("Saves", style="green", justify="right")
    for pin in pins:
        note = (pin.note or "").strip()
        if len(note) > 60:
            note = note[:59].rstrip() + "…"
        table.add_row(pin.id or "", note, pin.link or "", _count(pin, "saves"))
    return table


def build_error_panel(response: Response) -> Panel:
    """Panel describing a non-ok API response."""

    body = Text()
    body.append(f"HTTP {response.status_code}", style="bold")
    body.append(f"  {response.request.method} {response.request.path}\n", style="dim")
    body.append(response.error_message() or "No error message in the response.")
    return Panel(body, title=Text("API error", style="bold red"), border_style="red")
