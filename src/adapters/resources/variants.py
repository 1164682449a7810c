"""Operaciones de API: variantes de producto."""

from __future__ import annotations

from typing import Iterable, Mapping, TypeAlias

from adapters.base_client import BaseLemonSqueezyClient
from adapters.request_builder import filter_query, include_query
from core.domain import routes
from core.domain.models import DataAndIncluded, DataIncludedAndMeta, Included, Meta, Variant
from core.domain.routes import ResourceID

VariantResponse: TypeAlias = DataAndIncluded[Variant, Included]
VariantListResponse: TypeAlias = DataIncludedAndMeta[list[Variant], Included, Meta]


class VariantsAPI(BaseLemonSqueezyClient):
    async def get_variant(
        self,
        variant_id: ResourceID,
        *,
        include: Iterable[str] = (),
    ) -> VariantResponse:
        """Devuelve una variante por ID.

        Args:
            variant_id: ID del recurso.
            include: relacionados a incluir en `included`.
        """

        return await self._call(
            routes.Variant(variant_id),
            VariantResponse,
            query_items=include_query(include),
        )

    async def get_variants(
        self,
        page_number: int | None = 1,
        page_size: int | None = None,
        *,
        include: Iterable[str] = (),
        filters: Mapping[str, object] | None = None,
    ) -> VariantListResponse:
        """Lista paginada de variantes de producto.

        Args:
            page_number: página (1-based). `None` omite la paginación.
            page_size: recursos por página (por defecto, `default_page_size`).
            filters: p.ej. `{"product_id": 7}` -> `filter[product_id]=7`.
        """

        return await self._call(
            routes.Variants(),
            VariantListResponse,
            query_items=[*filter_query(filters), *include_query(include)],
            page_number=page_number,
            page_size=self._page_size(page_size),
        )
