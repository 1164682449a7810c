"""Operaciones de API: items de orden."""

from __future__ import annotations

from typing import Iterable, Mapping, TypeAlias

from adapters.base_client import BaseLemonSqueezyClient
from adapters.request_builder import filter_query, include_query
from core.domain import routes
from core.domain.models import DataAndIncluded, DataIncludedAndMeta, Included, Meta, OrderItem
from core.domain.routes import ResourceID

OrderItemResponse: TypeAlias = DataAndIncluded[OrderItem, Included]
OrderItemListResponse: TypeAlias = DataIncludedAndMeta[list[OrderItem], Included, Meta]


class OrderItemsAPI(BaseLemonSqueezyClient):
    async def get_order_item(
        self,
        order_item_id: ResourceID,
        *,
        include: Iterable[str] = (),
    ) -> OrderItemResponse:
        """Devuelve un item de orden por ID.

        Args:
            order_item_id: ID del recurso.
            include: relacionados a incluir en `included`.
        """

        return await self._call(
            routes.OrderItem(order_item_id),
            OrderItemResponse,
            query_items=include_query(include),
        )

    async def get_order_items(
        self,
        page_number: int | None = 1,
        page_size: int | None = None,
        *,
        include: Iterable[str] = (),
        filters: Mapping[str, object] | None = None,
    ) -> OrderItemListResponse:
        """Lista paginada de items de orden.

        Args:
            page_number: página (1-based). `None` omite la paginación.
            page_size: recursos por página (por defecto, `default_page_size`).
            filters: `{"store_id": 1}` -> `filter[store_id]=1`.
        """

        return await self._call(
            routes.OrderItems(),
            OrderItemListResponse,
            query_items=[*filter_query(filters), *include_query(include)],
            page_number=page_number,
            page_size=self._page_size(page_size),
        )
