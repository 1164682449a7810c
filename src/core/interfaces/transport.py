"""Contrato del transporte HTTP.

Por qué Protocol:
- El cliente solo necesita "enviar request, recibir respuesta".
- `httpx.AsyncClient` ya lo cumple; en tests basta con un cliente sobre
  `httpx.MockTransport`, sin herencia ni stubs propios.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class AsyncTransport(Protocol):
    """Contrato mínimo de transporte.

    Reglas de diseño:
    - `send` es asíncrono y es el único punto de suspensión de una llamada.
    - Errores de red (DNS, TLS, timeout) se propagan tal cual, sin reintentos.
    """

    async def send(self, request: httpx.Request) -> httpx.Response:
        ...
