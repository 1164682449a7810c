"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.lemonsqueezy_client import LemonSqueezyClient
from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import LemonSqueezyError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Call `/v1/users/me` to validate both connectivity and the API key."""

    try:
        client = LemonSqueezyClient(settings=settings)
        envelope = await client.get_me()
    except (LemonSqueezyError, httpx.HTTPError) as exc:
        return False, str(exc)
    email = envelope.data.attributes.email or envelope.data.id
    return True, f"Authenticated as {email}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    print_banner(_console)

    table = Table(title="Lemon Squeezy Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    has_key = settings.api_key is not None and bool(settings.api_key.get_secret_value().strip())
    table.add_row("API key", "OK" if has_key else "MISSING", "set" if has_key else "LEMONSQUEEZY_API_KEY not set")
    table.add_row("API host", "OK", f"{settings.api_scheme}://{settings.api_host}")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "NONE", str(get_user_env_file()))

    ok_api = False
    if has_key:
        ok_api, detail_api = asyncio.run(_check_api(settings))
        table.add_row("API access", "OK" if ok_api else "FAIL", detail_api)
    else:
        table.add_row("API access", "SKIPPED", "No API key")

    _console.print(table)

    if not has_key:
        _console.print(
            "\n[yellow]Note:[/yellow] run `lemonsqueezy doctor setup-key` to store an API key."
        )
    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="setup-key")
def setup_key() -> None:
    """Store the API key in the user config .env (no manual editing)."""

    api_key = typer.prompt("Lemon Squeezy API key", hide_input=True, confirmation_prompt=False).strip()
    if not api_key:
        raise typer.BadParameter("api key is required")

    host = typer.prompt("API host", default=AppSettings().api_host, show_default=True).strip()

    env_path = write_user_env_vars(
        {
            "LEMONSQUEEZY_API_KEY": api_key,
            "LEMONSQUEEZY_API_HOST": host,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
