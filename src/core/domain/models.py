"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los envelopes genéricos (`DataAndIncluded`, `DataIncludedAndMeta`) fijan el
  contrato JSON:API: `data` obligatorio; `included`, `meta`, `errors` opcionales.

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
- Los atributos de recursos son snake_case en el wire; `meta.page` es camelCase.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeAlias, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

ResourceT = TypeVar("ResourceT")
IncludedT = TypeVar("IncludedT")
MetaT = TypeVar("MetaT")
AttributesT = TypeVar("AttributesT")


# ---------------------------------------------------------------------------
# Errores estructurados
# ---------------------------------------------------------------------------


class APIErrorObject(BaseModel):
    """Un error JSON:API devuelto por el backend."""

    model_config = ConfigDict(extra="ignore")

    status: str | int | None = Field(
        default=None,
        description="Código HTTP aplicable al error (string en JSON:API).",
    )
    title: str | None = Field(
        default=None,
        description="Resumen corto del problema.",
    )
    detail: str | None = Field(
        default=None,
        description="Explicación específica de esta ocurrencia.",
    )
    code: str | int | None = Field(
        default=None,
        description="Código de error propio de la aplicación.",
    )
    source: dict[str, Any] | None = Field(
        default=None,
        description="Referencia al origen (p.ej. {'pointer': '/data/attributes/x'}).",
    )
    meta: dict[str, Any] | None = None


class APIErrorDocument(BaseModel):
    """Forma de una respuesta de error: solo `errors`, sin `data`."""

    model_config = ConfigDict(extra="ignore")

    errors: list[APIErrorObject] = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class Page(BaseModel):
    """Contadores de paginación (`meta.page`)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    current_page: int
    # `from`/`to` llegan como null en páginas vacías.
    from_: int | None = Field(default=None, alias="from")
    last_page: int
    per_page: int
    to: int | None = None
    total: int


class Meta(BaseModel):
    """Información de paginación para peticiones paginadas."""

    model_config = ConfigDict(extra="ignore")

    page: Page


class PaginationLinks(BaseModel):
    model_config = ConfigDict(extra="ignore")

    first: str | None = None
    last: str | None = None
    next: str | None = None
    prev: str | None = None


class DataAndIncluded(BaseModel, Generic[ResourceT, IncludedT]):
    """Envelope de un recurso (o lista) con relacionados opcionales."""

    model_config = ConfigDict(extra="ignore")

    data: ResourceT = Field(..., description="El objeto u objetos pedidos.")
    included: IncludedT | None = Field(
        default=None,
        description="Recursos relacionados pedidos con el parámetro `include`.",
    )
    errors: list[APIErrorObject] | None = Field(
        default=None,
        description="Errores asociados a la petición (fallos parciales).",
    )


class DataIncludedAndMeta(BaseModel, Generic[ResourceT, IncludedT, MetaT]):
    """Envelope de listados: añade `meta` (paginación) y `links`."""

    model_config = ConfigDict(extra="ignore")

    data: ResourceT = Field(..., description="El objeto u objetos pedidos.")
    meta: MetaT | None = Field(
        default=None,
        description="Información de paginación.",
    )
    included: IncludedT | None = Field(
        default=None,
        description="Recursos relacionados pedidos con el parámetro `include`.",
    )
    errors: list[APIErrorObject] | None = Field(
        default=None,
        description="Errores asociados a la petición (fallos parciales).",
    )
    links: PaginationLinks | None = None


# ---------------------------------------------------------------------------
# Recursos (objetos JSON:API)
# ---------------------------------------------------------------------------


class Resource(BaseModel, Generic[AttributesT]):
    """Objeto de recurso JSON:API: `type` + `id` + `attributes`."""

    model_config = ConfigDict(extra="ignore")

    type: str
    id: str
    attributes: AttributesT
    relationships: dict[str, Any] | None = None
    links: dict[str, Any] | None = None


class IncludedResource(Resource[dict[str, Any]]):
    """Recurso relacionado con atributos sin tipar (puede ser de cualquier tipo)."""


Included: TypeAlias = list[IncludedResource]


class _Attributes(BaseModel):
    model_config = ConfigDict(extra="ignore")

    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserAttributes(_Attributes):
    name: str | None = None
    email: str | None = None
    color: str | None = None
    avatar_url: str | None = None
    has_custom_avatar: bool | None = None


class StoreAttributes(_Attributes):
    name: str | None = None
    slug: str | None = None
    domain: str | None = None
    url: str | None = None
    avatar_url: str | None = None
    plan: str | None = None
    country: str | None = None
    country_nicename: str | None = None
    currency: str | None = None
    total_sales: int | None = None
    total_revenue: int | None = None
    thirty_day_sales: int | None = None
    thirty_day_revenue: int | None = None


class OrderAttributes(_Attributes):
    store_id: int | None = None
    customer_id: int | None = None
    identifier: str | None = None
    order_number: int | None = None
    user_name: str | None = None
    user_email: str | None = None
    currency: str | None = None
    currency_rate: str | None = None
    subtotal: int | None = None
    discount_total: int | None = None
    tax: int | None = None
    total: int | None = None
    subtotal_usd: int | None = None
    discount_total_usd: int | None = None
    tax_usd: int | None = None
    total_usd: int | None = None
    tax_name: str | None = None
    tax_rate: str | float | None = None
    status: str | None = None
    status_formatted: str | None = None
    refunded: bool | None = None
    refunded_at: datetime | None = None
    subtotal_formatted: str | None = None
    discount_total_formatted: str | None = None
    tax_formatted: str | None = None
    total_formatted: str | None = None
    first_order_item: dict[str, Any] | None = None
    urls: dict[str, Any] | None = None
    test_mode: bool | None = None


class OrderItemAttributes(_Attributes):
    order_id: int | None = None
    product_id: int | None = None
    variant_id: int | None = None
    product_name: str | None = None
    variant_name: str | None = None
    price: int | None = None
    quantity: int | None = None
    test_mode: bool | None = None


class ProductAttributes(_Attributes):
    store_id: int | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    status: str | None = None
    status_formatted: str | None = None
    thumb_url: str | None = None
    large_thumb_url: str | None = None
    price: int | None = None
    price_formatted: str | None = None
    from_price: int | None = None
    to_price: int | None = None
    pay_what_you_want: bool | None = None
    buy_now_url: str | None = None
    test_mode: bool | None = None


class VariantAttributes(_Attributes):
    product_id: int | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    price: int | None = None
    is_subscription: bool | None = None
    interval: str | None = None
    interval_count: int | None = None
    has_free_trial: bool | None = None
    trial_interval: str | None = None
    trial_interval_count: int | None = None
    pay_what_you_want: bool | None = None
    min_price: int | None = None
    suggested_price: int | None = None
    has_license_keys: bool | None = None
    license_activation_limit: int | None = None
    is_license_limit_unlimited: bool | None = None
    license_length_value: int | None = None
    license_length_unit: str | None = None
    is_license_length_unlimited: bool | None = None
    sort: int | None = None
    status: str | None = None
    status_formatted: str | None = None
    test_mode: bool | None = None


class FileAttributes(_Attributes):
    variant_id: int | None = None
    identifier: str | None = None
    name: str | None = None
    extension: str | None = None
    download_url: str | None = None
    size: int | None = None
    size_formatted: str | None = None
    version: str | None = None
    sort: int | None = None
    status: str | None = None
    test_mode: bool | None = None


class SubscriptionAttributes(_Attributes):
    store_id: int | None = None
    customer_id: int | None = None
    order_id: int | None = None
    order_item_id: int | None = None
    product_id: int | None = None
    variant_id: int | None = None
    product_name: str | None = None
    variant_name: str | None = None
    user_name: str | None = None
    user_email: str | None = None
    status: str | None = None
    status_formatted: str | None = None
    card_brand: str | None = None
    card_last_four: str | None = None
    pause: dict[str, Any] | None = None
    cancelled: bool | None = None
    trial_ends_at: datetime | None = None
    billing_anchor: int | None = None
    urls: dict[str, Any] | None = None
    renews_at: datetime | None = None
    ends_at: datetime | None = None
    test_mode: bool | None = None


class User(Resource[UserAttributes]):
    pass


class Store(Resource[StoreAttributes]):
    pass


class Order(Resource[OrderAttributes]):
    pass


class OrderItem(Resource[OrderItemAttributes]):
    pass


class Product(Resource[ProductAttributes]):
    pass


class Variant(Resource[VariantAttributes]):
    pass


class File(Resource[FileAttributes]):
    pass


class Subscription(Resource[SubscriptionAttributes]):
    pass
