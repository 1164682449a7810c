"""Operaciones de API: productos."""

from __future__ import annotations

from typing import Iterable, Mapping, TypeAlias

from adapters.base_client import BaseLemonSqueezyClient
from adapters.request_builder import filter_query, include_query
from core.domain import routes
from core.domain.models import DataAndIncluded, DataIncludedAndMeta, Included, Meta, Product
from core.domain.routes import ResourceID

ProductResponse: TypeAlias = DataAndIncluded[Product, Included]
ProductListResponse: TypeAlias = DataIncludedAndMeta[list[Product], Included, Meta]


class ProductsAPI(BaseLemonSqueezyClient):
    async def get_product(
        self,
        product_id: ResourceID,
        *,
        include: Iterable[str] = (),
    ) -> ProductResponse:
        """Devuelve un producto por ID.

        Args:
            product_id: ID del recurso.
            include: relacionados a incluir en `included`.
        """

        return await self._call(
            routes.Product(product_id),
            ProductResponse,
            query_items=include_query(include),
        )

    async def get_products(
        self,
        page_number: int | None = 1,
        page_size: int | None = None,
        *,
        include: Iterable[str] = (),
        filters: Mapping[str, object] | None = None,
    ) -> ProductListResponse:
        """Lista paginada de productos.

        Args:
            page_number: página (1-based). `None` omite la paginación.
            page_size: recursos por página (por defecto, `default_page_size`).
            filters: `{"store_id": 1}` -> `filter[store_id]=1`.
        """

        return await self._call(
            routes.Products(),
            ProductListResponse,
            query_items=[*filter_query(filters), *include_query(include)],
            page_number=page_number,
            page_size=self._page_size(page_size),
        )
