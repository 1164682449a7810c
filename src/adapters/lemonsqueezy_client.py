"""Cliente público de la API de Lemon Squeezy.

Uso:

    client = LemonSqueezyClient(api_key="...")
    orders = await client.get_orders(page_number=2, page_size=5)
    order = await client.get_order(orders.data[0].id, include=["order-items"])

Errores:
- `LemonSqueezyAPIError` si la API devuelve un error estructurado.
- `UnknownError` si la respuesta no encaja con ningún esquema conocido.
- Excepciones de `httpx` para fallos de red.
"""

from __future__ import annotations

from adapters.resources import (
    FilesAPI,
    OrderItemsAPI,
    OrdersAPI,
    ProductsAPI,
    StoresAPI,
    SubscriptionsAPI,
    UsersAPI,
    VariantsAPI,
)


class LemonSqueezyClient(
    UsersAPI,
    StoresAPI,
    ProductsAPI,
    VariantsAPI,
    FilesAPI,
    OrdersAPI,
    OrderItemsAPI,
    SubscriptionsAPI,
):
    """Cliente completo: todas las operaciones de recursos sobre la misma plomería."""
