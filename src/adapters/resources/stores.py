"""Operaciones de API: tiendas."""

from __future__ import annotations

from typing import Iterable, Mapping, TypeAlias

from adapters.base_client import BaseLemonSqueezyClient
from adapters.request_builder import filter_query, include_query
from core.domain import routes
from core.domain.models import DataAndIncluded, DataIncludedAndMeta, Included, Meta, Store
from core.domain.routes import ResourceID

StoreResponse: TypeAlias = DataAndIncluded[Store, Included]
StoreListResponse: TypeAlias = DataIncludedAndMeta[list[Store], Included, Meta]


class StoresAPI(BaseLemonSqueezyClient):
    async def get_store(
        self,
        store_id: ResourceID,
        *,
        include: Iterable[str] = (),
    ) -> StoreResponse:
        """Devuelve una tienda por ID."""

        return await self._call(
            routes.Store(store_id),
            StoreResponse,
            query_items=include_query(include),
        )

    async def get_stores(
        self,
        page_number: int | None = 1,
        page_size: int | None = None,
        *,
        include: Iterable[str] = (),
        filters: Mapping[str, object] | None = None,
    ) -> StoreListResponse:
        """Lista paginada de las tiendas del usuario."""

        return await self._call(
            routes.Stores(),
            StoreListResponse,
            query_items=[*filter_query(filters), *include_query(include)],
            page_number=page_number,
            page_size=self._page_size(page_size),
        )
