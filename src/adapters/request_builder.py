"""Construcción de URL y firma de requests.

Responsabilidad:
- Componer la URL final: paginación, query del caller y query fija de la ruta,
  en ese orden.
- Codificar la query dejando literales `:`, `(` y `)` (la sintaxis de filtros
  del backend los usa y no soporta doble codificación).
- Firmar el `httpx.Request` con Bearer + headers JSON:API.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Mapping
from urllib.parse import quote

import httpx

from adapters.http_client import JSON_API_MEDIA_TYPE
from core.config import AppSettings
from core.domain.routes import APIRoute, QueryItem, resolve_route

DEFAULT_PAGE_SIZE = 10

# Además de los no reservados (letras, dígitos, `-._~`).
_QUERY_SAFE = ":()"


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
    PUT = "PUT"
    PATCH = "PATCH"


def pagination_query(page_number: int | None, page_size: int = DEFAULT_PAGE_SIZE) -> list[QueryItem]:
    """`page[size]` y `page[number]`, solo si se pidió una página."""

    if page_number is None:
        return []
    return [
        QueryItem("page[size]", str(page_size)),
        QueryItem("page[number]", str(page_number)),
    ]


def include_query(include: Iterable[str]) -> list[QueryItem]:
    names = [name.strip() for name in include if name and name.strip()]
    if not names:
        return []
    return [QueryItem("include", ",".join(names))]


def filter_query(filters: Mapping[str, object] | None) -> list[QueryItem]:
    if not filters:
        return []
    return [QueryItem(f"filter[{key}]", str(value)) for key, value in filters.items()]


def encode_query(items: Iterable[QueryItem]) -> str:
    return "&".join(
        f"{quote(item.name, safe=_QUERY_SAFE)}={quote(item.value, safe=_QUERY_SAFE)}"
        for item in items
    )


def build_url(
    route: APIRoute,
    query_items: Iterable[QueryItem] = (),
    page_number: int | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
    settings: AppSettings | None = None,
) -> str:
    """Devuelve la URL absoluta para `route`."""

    settings = settings or AppSettings()
    resolved = resolve_route(route)

    combined = pagination_query(page_number, page_size)
    combined.extend(query_items)
    if resolved.query_items:
        combined.extend(resolved.query_items)

    url = f"{settings.api_scheme}://{settings.api_host}{resolved.path}"
    if combined:
        url = f"{url}?{encode_query(combined)}"

    # Rutas estáticas + identificadores simples: si esto falla es un bug, no un error de usuario.
    parsed = httpx.URL(url)
    assert parsed.scheme and parsed.host, f"invalid URL assembled for {route!r}"
    return url


def sign_request(
    request: httpx.Request,
    *,
    method: HTTPMethod,
    api_key: str,
    user_agent: str | None = None,
) -> None:
    """Añade auth, headers JSON:API y método al request (mutación in-place).

    `AsyncClient.send` no mezcla los headers por defecto del cliente, así que
    el User-Agent se fija aquí, en el propio request.
    """

    request.headers["Authorization"] = f"Bearer {api_key}"
    request.headers["Content-Type"] = JSON_API_MEDIA_TYPE
    request.headers["Accept"] = JSON_API_MEDIA_TYPE
    if user_agent:
        request.headers["User-Agent"] = user_agent
    request.method = method.value


def build_request(
    method: HTTPMethod,
    url: str,
    *,
    api_key: str,
    body: bytes | None = None,
    user_agent: str | None = None,
) -> httpx.Request:
    request = httpx.Request(method.value, url, content=body)
    sign_request(request, method=method, api_key=api_key, user_agent=user_agent)
    return request
