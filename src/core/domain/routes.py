"""Tabla de rutas de la API.

Por qué un conjunto cerrado de dataclasses:
- Cada endpoint es una variante concreta (`Order("42")`, `Stores()`...), así
  que no existe forma de construir una ruta desconocida a partir de un string.
- `resolve_route` hace `match` sobre la unión `APIRoute`; un type checker
  avisa si se añade una variante y no se resuelve.

Las rutas son inmutables, se crean por llamada y nunca se guardan.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, TypeAlias, assert_never
from urllib.parse import quote

ResourceID: TypeAlias = str | int

API_PREFIX = "/v1"


class QueryItem(NamedTuple):
    """Par nombre/valor de query string. El orden de emisión importa."""

    name: str
    value: str


class ResolvedPath(NamedTuple):
    path: str
    query_items: tuple[QueryItem, ...] | None = None


def _segment(resource_id: ResourceID) -> str:
    # Identificadores opacos: percent-encoding estándar sin caracteres seguros.
    return quote(str(resource_id), safe="")


@dataclass(frozen=True)
class Me:
    pass


@dataclass(frozen=True)
class Orders:
    pass


@dataclass(frozen=True)
class Order:
    order_id: ResourceID


@dataclass(frozen=True)
class Stores:
    pass


@dataclass(frozen=True)
class Store:
    store_id: ResourceID


@dataclass(frozen=True)
class Products:
    pass


@dataclass(frozen=True)
class Product:
    product_id: ResourceID


@dataclass(frozen=True)
class Variants:
    pass


@dataclass(frozen=True)
class Variant:
    variant_id: ResourceID


@dataclass(frozen=True)
class Files:
    pass


@dataclass(frozen=True)
class File:
    file_id: ResourceID


@dataclass(frozen=True)
class OrderItems:
    pass


@dataclass(frozen=True)
class OrderItem:
    order_item_id: ResourceID


@dataclass(frozen=True)
class Subscriptions:
    pass


@dataclass(frozen=True)
class Subscription:
    subscription_id: ResourceID


APIRoute: TypeAlias = (
    Me
    | Orders
    | Order
    | Stores
    | Store
    | Products
    | Product
    | Variants
    | Variant
    | Files
    | File
    | OrderItems
    | OrderItem
    | Subscriptions
    | Subscription
)


def resolve_route(route: APIRoute) -> ResolvedPath:
    """Devuelve el path (con identificadores interpolados) y la query fija de la ruta."""

    match route:
        case Me():
            return ResolvedPath(f"{API_PREFIX}/users/me")
        case Orders():
            return ResolvedPath(f"{API_PREFIX}/orders")
        case Order(order_id=order_id):
            return ResolvedPath(f"{API_PREFIX}/orders/{_segment(order_id)}")
        case Stores():
            return ResolvedPath(f"{API_PREFIX}/stores")
        case Store(store_id=store_id):
            return ResolvedPath(f"{API_PREFIX}/stores/{_segment(store_id)}")
        case Products():
            return ResolvedPath(f"{API_PREFIX}/products")
        case Product(product_id=product_id):
            return ResolvedPath(f"{API_PREFIX}/products/{_segment(product_id)}")
        case Variants():
            return ResolvedPath(f"{API_PREFIX}/variants")
        case Variant(variant_id=variant_id):
            return ResolvedPath(f"{API_PREFIX}/variants/{_segment(variant_id)}")
        case Files():
            return ResolvedPath(f"{API_PREFIX}/files")
        case File(file_id=file_id):
            return ResolvedPath(f"{API_PREFIX}/files/{_segment(file_id)}")
        case OrderItems():
            return ResolvedPath(f"{API_PREFIX}/order-items")
        case OrderItem(order_item_id=order_item_id):
            return ResolvedPath(f"{API_PREFIX}/order-items/{_segment(order_item_id)}")
        case Subscriptions():
            return ResolvedPath(f"{API_PREFIX}/subscriptions")
        case Subscription(subscription_id=subscription_id):
            return ResolvedPath(f"{API_PREFIX}/subscriptions/{_segment(subscription_id)}")
        case _:
            assert_never(route)
