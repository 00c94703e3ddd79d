"""Command line front-end (Typer + Rich).

Commands are thin: they build an `Api` over the httpx transport, call one
operation and render the result. Pagination is only followed with
`--all`, one page at a time.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from pinterest_api.adapters.authentication import HttpxAuthentication
from pinterest_api.adapters.json_exporter import export_objects_json
from pinterest_api.cli import doctor
from pinterest_api.cli.ui_components import (
    build_boards_table,
    build_error_panel,
    build_pins_table,
    build_users_table,
)
from pinterest_api.core.config import ApiSettings
from pinterest_api.core.domain.models import ApiObject, Board, Pin, User
from pinterest_api.core.errors import InvalidArgument, MappingError, RateLimitReached
from pinterest_api.core.http import Response
from pinterest_api.core.services.api import Api

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Pinterest API client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def build_authentication(settings: ApiSettings) -> HttpxAuthentication:
    return HttpxAuthentication(settings=settings)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _run(operation: Callable[[Api], Awaitable[T]]) -> T:
    """Run `operation` against a fresh client, mapping errors to exit codes."""

    settings = ApiSettings()

    async def runner() -> T:
        async with build_authentication(settings) as auth:
            return await operation(Api(auth))

    try:
        return asyncio.run(runner())
    except RateLimitReached as exc:
        _console.print(f"[yellow]{exc}[/yellow]")
        raise typer.Exit(code=2) from exc
    except (InvalidArgument, MappingError) as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc


def _ensure_ok(response: Response) -> None:
    if not response.ok():
        _console.print(build_error_panel(response))
        raise typer.Exit(code=1)


async def _collect(api: Api, response: Response, *, follow: bool, max_pages: int | None) -> tuple[Response, list[ApiObject]]:
    if not response.ok():
        return response, []
    items: list[ApiObject] = []
    async for page in api.iter_pages(response, max_pages=max_pages if follow else 1):
        items.extend(page.items)
    return response, items


def _export(items: list[ApiObject], json_path: Path | None) -> None:
    if json_path is None:
        return
    out = export_objects_json(objects=items, output_path=json_path)
    _console.print(f"[green]Saved {len(items)} item(s) to:[/green] {out}")


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Override PINTEREST_LOG_LEVEL."),
) -> None:
    configure_logging(log_level or ApiSettings().log_level)


@app.command()
def me() -> None:
    """Show the authenticated user."""

    response = _run(lambda api: api.get_current_user())
    _ensure_ok(response)
    user: User = response.result
    _console.print(build_users_table([user], title="Current user"))


@app.command()
def user(username: str = typer.Argument(..., help="Username or id.")) -> None:
    """Show a user."""

    response = _run(lambda api: api.get_user(username))
    _ensure_ok(response)
    found: User = response.result
    _console.print(build_users_table([found]))


@app.command()
def boards(
    follow: bool = typer.Option(False, "--all", help="Follow pagination until the last page."),
    max_pages: int = typer.Option(None, "--max-pages", min=1, help="Stop after N pages."),
    json_path: Path = typer.Option(None, "--json", help="Export the boards to a JSON file."),
) -> None:
    """List the boards of the authenticated user."""

    async def operation(api: Api) -> tuple[Response, list[ApiObject]]:
        return await _collect(api, await api.get_user_boards(), follow=follow, max_pages=max_pages)

    response, items = _run(operation)
    _ensure_ok(response)
    found: list[Board] = [item for item in items if isinstance(item, Board)]
    _console.print(build_boards_table(found))
    _export(items, json_path)


@app.command(name="board-pins")
def board_pins(
    board_id: str = typer.Argument(..., help="Board id."),
    follow: bool = typer.Option(False, "--all", help="Follow pagination until the last page."),
    max_pages: int = typer.Option(None, "--max-pages", min=1, help="Stop after N pages."),
    json_path: Path = typer.Option(None, "--json", help="Export the pins to a JSON file."),
) -> None:
    """List the pins of a board."""

    async def operation(api: Api) -> tuple[Response, list[ApiObject]]:
        return await _collect(api, await api.get_board_pins(board_id), follow=follow, max_pages=max_pages)

    response, items = _run(operation)
    _ensure_ok(response)
    found: list[Pin] = [item for item in items if isinstance(item, Pin)]
    _console.print(build_pins_table(found, title=f"Pins of board {board_id}"))
    _export(items, json_path)


def run() -> None:
    app()
