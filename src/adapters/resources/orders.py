"""Operaciones de API: órdenes."""

from __future__ import annotations

from typing import Iterable, Mapping, TypeAlias

from adapters.base_client import BaseLemonSqueezyClient
from adapters.request_builder import filter_query, include_query
from core.domain import routes
from core.domain.models import DataAndIncluded, DataIncludedAndMeta, Included, Meta, Order
from core.domain.routes import ResourceID

OrderResponse: TypeAlias = DataAndIncluded[Order, Included]
OrderListResponse: TypeAlias = DataIncludedAndMeta[list[Order], Included, Meta]


class OrdersAPI(BaseLemonSqueezyClient):
    async def get_order(
        self,
        order_id: ResourceID,
        *,
        include: Iterable[str] = (),
    ) -> OrderResponse:
        """Devuelve una orden por ID.

        Args:
            order_id: ID del recurso.
            include: relacionados a incluir en `included`.
        """

        return await self._call(
            routes.Order(order_id),
            OrderResponse,
            query_items=include_query(include),
        )

    async def get_orders(
        self,
        page_number: int | None = 1,
        page_size: int | None = None,
        *,
        include: Iterable[str] = (),
        filters: Mapping[str, object] | None = None,
    ) -> OrderListResponse:
        """Lista paginada de órdenes.

        Args:
            page_number: página (1-based). `None` omite la paginación.
            page_size: recursos por página (por defecto, `default_page_size`).
            filters: `{"store_id": 1}` -> `filter[store_id]=1`.
        """

        return await self._call(
            routes.Orders(),
            OrderListResponse,
            query_items=[*filter_query(filters), *include_query(include)],
            page_number=page_number,
            page_size=self._page_size(page_size),
        )
