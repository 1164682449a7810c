"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y User-Agent para todas las llamadas a la API.
- Facilita testeo: se puede sustituir por un cliente sobre `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

JSON_API_MEDIA_TYPE = "application/vnd.api+json"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - No añade reintentos: el cliente propaga los errores de transporte tal cual.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": JSON_API_MEDIA_TYPE,
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
