"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import APIErrorObject, Meta, Resource

# Atributos candidatos para la columna "Name", en orden de preferencia.
_LABEL_ATTRIBUTES = ("name", "product_name", "user_email", "identifier")
_STATUS_ATTRIBUTES = ("status_formatted", "status")


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Lemon Squeezy", style="bold yellow")
    subtitle = Text("Orders • Products • Subscriptions", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="yellow", padding=(1, 4)))


def _first_attribute(attributes: Any, names: Sequence[str]) -> str:
    for name in names:
        value = getattr(attributes, name, None)
        if value not in (None, ""):
            return str(value)
    return ""


def build_resources_table(resources: Sequence[Resource[Any]], *, title: str) -> Table:
    """Tabla Rich con una fila por recurso."""

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Type", style="white")
    table.add_column("Name", style="green")
    table.add_column("Status", style="magenta")
    table.add_column("Created", style="dim")

    for resource in resources:
        attrs = resource.attributes
        created = getattr(attrs, "created_at", None)
        table.add_row(
            resource.id,
            resource.type,
            _first_attribute(attrs, _LABEL_ATTRIBUTES),
            _first_attribute(attrs, _STATUS_ATTRIBUTES),
            created.isoformat() if created else "",
        )
    return table


def build_pagination_text(meta: Meta | None) -> Text:
    if meta is None:
        return Text("")
    page = meta.page
    return Text(
        f"Page {page.current_page}/{page.last_page} • {page.per_page} per page • {page.total} total",
        style="dim",
    )


def build_errors_panel(errors: Sequence[APIErrorObject], *, status_code: int | None = None) -> Panel:
    """Panel para errores estructurados devueltos por la API."""

    body = Text()
    for err in errors:
        heading = err.title or "Error"
        if err.status is not None:
            heading = f"[{err.status}] {heading}"
        body.append(heading + "\n", style="bold")
        if err.detail:
            body.append(err.detail + "\n")
        if err.source:
            body.append(f"source: {err.source}\n", style="dim")
    title = "API error" if status_code is None else f"API error (HTTP {status_code})"
    return Panel(body, title=Text(title, style="bold red"), border_style="red")
