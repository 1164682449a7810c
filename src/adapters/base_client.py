"""Cliente base de la API de Lemon Squeezy.

Responsabilidad:
- Orquestar una llamada: ruta -> URL -> request firmado -> transporte -> decodificación.
- Guardar la API key como valor inmutable del cliente (nada global).

Cada llamada es independiente: no hay estado mutable compartido, ni caché,
ni reintentos. Las operaciones públicas viven en `adapters.resources` y se
componen en `adapters.lemonsqueezy_client.LemonSqueezyClient`.
"""

from __future__ import annotations

import logging
from typing import Iterable, TypeVar

from pydantic import SecretStr

from adapters.http_client import build_async_client
from adapters.request_builder import DEFAULT_PAGE_SIZE, HTTPMethod, build_request, build_url
from adapters.response_decoder import decode_or_raise
from core.config import AppSettings
from core.domain.errors import MissingAPIKeyError
from core.domain.routes import APIRoute, QueryItem
from core.interfaces.transport import AsyncTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseLemonSqueezyClient:
    """Plomería común a todas las operaciones de recursos."""

    def __init__(
        self,
        api_key: str | SecretStr | None = None,
        *,
        settings: AppSettings | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()

        key = api_key if api_key is not None else self._settings.api_key
        if isinstance(key, str):
            key = SecretStr(key)
        if key is None or not key.get_secret_value().strip():
            raise MissingAPIKeyError(
                "A Lemon Squeezy API key is required. "
                "Pass api_key=... or set LEMONSQUEEZY_API_KEY."
            )
        self._api_key: SecretStr = key
        self._transport = transport

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self._settings.api_host!r}, api_key=**********)"

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def _page_size(self, page_size: int | None) -> int:
        return page_size if page_size is not None else self._settings.default_page_size

    async def _call(
        self,
        route: APIRoute,
        response_type: type[T],
        *,
        method: HTTPMethod = HTTPMethod.GET,
        query_items: Iterable[QueryItem] = (),
        page_number: int | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        body: bytes | None = None,
    ) -> T:
        url = build_url(
            route,
            query_items=query_items,
            page_number=page_number,
            page_size=page_size,
            settings=self._settings,
        )
        request = build_request(
            method,
            url,
            api_key=self._api_key.get_secret_value(),
            body=body,
            user_agent=self._settings.user_agent,
        )
        logger.debug(
            "lemonsqueezy_request method=%s path=%s",
            method.value,
            request.url.path,
            extra={
                "method": method.value,
                "path": request.url.path,
                "has_query": bool(request.url.query),
            },
        )

        if self._transport is not None:
            response = await self._transport.send(request)
            data = await response.aread()
        else:
            async with build_async_client(self._settings) as client:
                response = await client.send(request)
                data = await response.aread()

        logger.debug(
            "lemonsqueezy_response status_code=%s size=%s",
            response.status_code,
            len(data),
            extra={"status_code": response.status_code, "size": len(data)},
        )
        return decode_or_raise(response_type, data, status_code=response.status_code)
