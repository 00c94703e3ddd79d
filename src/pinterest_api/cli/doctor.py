"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from pinterest_api.adapters.http_client import build_async_client
from pinterest_api.core.config import ApiSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: ApiSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ApiSettings()

    table = Table(title="Pinterest API Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.access_token is not None and settings.access_token.get_secret_value().strip():
        table.add_row("Access token", "OK", "Token configured")
    else:
        table.add_row("Access token", "MISSING", "Run `pinterest-api doctor setup-token`")
    table.add_row("API root", "OK", settings.api_root())
    table.add_row("User config", "OK" if get_user_env_file().exists() else "NONE", str(get_user_env_file()))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings.base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup-token")
def setup_token() -> None:
    """Interactive token setup (stores config in the user config .env)."""

    token = typer.prompt("Access token", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("the access token is required")

    api_version = typer.prompt("API version", default="v1", show_default=True).strip()

    env_path = write_user_env_vars(
        {
            "PINTEREST_ACCESS_TOKEN": token,
            "PINTEREST_API_VERSION": api_version or "v1",
        }
    )

    _console.print(f"[green]Saved token to:[/green] {env_path}")
