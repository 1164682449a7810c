"""CLI principal (Typer).

Comandos:
- `me`: usuario dueño de la API key.
- `list RESOURCE`: listado paginado (`--page`, `--page-size`, `--include`, `--filter`).
- `get RESOURCE ID`: un recurso por ID.
- `doctor ...`: diagnósticos y configuración (ver `cli.doctor`).

Los errores tipados del cliente se presentan con Rich y salen con código 1.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable

import httpx
import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import dump_envelope, export_envelope_json
from adapters.lemonsqueezy_client import LemonSqueezyClient
from cli import doctor
from cli.ui_components import build_errors_panel, build_pagination_text, build_resources_table
from core.config import AppSettings
from core.domain.errors import LemonSqueezyAPIError, MissingAPIKeyError, UnknownError
from core.logging_config import configure_logging

app = typer.Typer(no_args_is_help=True, help="Lemon Squeezy API client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


class ResourceName(str, Enum):
    ORDERS = "orders"
    ORDER_ITEMS = "order-items"
    STORES = "stores"
    PRODUCTS = "products"
    VARIANTS = "variants"
    FILES = "files"
    SUBSCRIPTIONS = "subscriptions"


_GETTERS: dict[ResourceName, Callable[..., Awaitable[Any]]] = {
    ResourceName.ORDERS: LemonSqueezyClient.get_order,
    ResourceName.ORDER_ITEMS: LemonSqueezyClient.get_order_item,
    ResourceName.STORES: LemonSqueezyClient.get_store,
    ResourceName.PRODUCTS: LemonSqueezyClient.get_product,
    ResourceName.VARIANTS: LemonSqueezyClient.get_variant,
    ResourceName.FILES: LemonSqueezyClient.get_file,
    ResourceName.SUBSCRIPTIONS: LemonSqueezyClient.get_subscription,
}

_LISTERS: dict[ResourceName, Callable[..., Awaitable[Any]]] = {
    ResourceName.ORDERS: LemonSqueezyClient.get_orders,
    ResourceName.ORDER_ITEMS: LemonSqueezyClient.get_order_items,
    ResourceName.STORES: LemonSqueezyClient.get_stores,
    ResourceName.PRODUCTS: LemonSqueezyClient.get_products,
    ResourceName.VARIANTS: LemonSqueezyClient.get_variants,
    ResourceName.FILES: LemonSqueezyClient.get_files,
    ResourceName.SUBSCRIPTIONS: LemonSqueezyClient.get_subscriptions,
}


def build_client() -> LemonSqueezyClient:
    """Crea el cliente desde la configuración (env / .env)."""

    try:
        return LemonSqueezyClient(settings=AppSettings())
    except MissingAPIKeyError as exc:
        _console.print(f"[red]{exc}[/red]")
        _console.print("Run [bold]lemonsqueezy doctor setup-key[/bold] to store one.")
        raise typer.Exit(code=2) from exc


def parse_filters(values: list[str] | None) -> dict[str, str]:
    filters: dict[str, str] = {}
    for raw in values or []:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected key=value, got {raw!r}", param_hint="--filter")
        filters[key.strip()] = value.strip()
    return filters


def _run(coro: Awaitable[Any]) -> Any:
    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except LemonSqueezyAPIError as exc:
        _console.print(build_errors_panel(exc.errors, status_code=exc.status_code))
        raise typer.Exit(code=1) from exc
    except UnknownError as exc:
        status = f" (HTTP {exc.status_code})" if exc.status_code is not None else ""
        _console.print(f"[red]Unexpected response{status}:[/red] {escape(exc.message or '<binary body>')}")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        _console.print(f"[red]Transport error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _render(envelope: BaseModel, *, title: str, as_json: bool, output: Path | None) -> None:
    if output is not None:
        path = export_envelope_json(envelope=envelope, output_path=output)
        _console.print(f"[green]Saved:[/green] {path}")
    if as_json:
        _console.print_json(data=dump_envelope(envelope))
        return

    data = getattr(envelope, "data")
    resources = data if isinstance(data, list) else [data]
    _console.print(build_resources_table(resources, title=title))
    meta = getattr(envelope, "meta", None)
    if meta is not None:
        _console.print(build_pagination_text(meta))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(2) from exc
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def me(
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON envelope."),
) -> None:
    """Show the user that owns the API key."""

    client = build_client()
    envelope = _run(client.get_me())
    _render(envelope, title="User", as_json=as_json, output=None)


@app.command(name="list")
def list_resources(
    resource: ResourceName = typer.Argument(..., case_sensitive=False),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number (1-based)."),
    page_size: int | None = typer.Option(None, "--page-size", "-s", min=1, max=100),
    include: list[str] | None = typer.Option(None, "--include", "-i", help="Related resources to include."),
    filters: list[str] | None = typer.Option(None, "--filter", "-f", help="Filter as key=value."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON envelope."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the envelope to a JSON file."),
) -> None:
    """List resources of one type."""

    parsed_filters = parse_filters(filters)
    client = build_client()
    lister = _LISTERS[resource]
    envelope = _run(
        lister(
            client,
            page,
            page_size,
            include=include or (),
            filters=parsed_filters or None,
        )
    )
    _render(envelope, title=resource.value.replace("-", " ").title(), as_json=as_json, output=output)


@app.command(name="get")
def get_resource(
    resource: ResourceName = typer.Argument(..., case_sensitive=False),
    resource_id: str = typer.Argument(..., metavar="ID"),
    include: list[str] | None = typer.Option(None, "--include", "-i", help="Related resources to include."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON envelope."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the envelope to a JSON file."),
) -> None:
    """Get one resource by ID."""

    client = build_client()
    getter = _GETTERS[resource]
    envelope = _run(getter(client, resource_id, include=include or ()))
    _render(envelope, title=resource.value.replace("-", " ").title(), as_json=as_json, output=output)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
