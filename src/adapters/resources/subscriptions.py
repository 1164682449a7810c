"""Operaciones de API: suscripciones."""

from __future__ import annotations

from typing import Iterable, Mapping, TypeAlias

from adapters.base_client import BaseLemonSqueezyClient
from adapters.request_builder import filter_query, include_query
from core.domain import routes
from core.domain.models import DataAndIncluded, DataIncludedAndMeta, Included, Meta, Subscription
from core.domain.routes import ResourceID

SubscriptionResponse: TypeAlias = DataAndIncluded[Subscription, Included]
SubscriptionListResponse: TypeAlias = DataIncludedAndMeta[list[Subscription], Included, Meta]


class SubscriptionsAPI(BaseLemonSqueezyClient):
    async def get_subscription(
        self,
        subscription_id: ResourceID,
        *,
        include: Iterable[str] = (),
    ) -> SubscriptionResponse:
        """Devuelve una suscripción por ID.

        Args:
            subscription_id: ID del recurso.
            include: relacionados a incluir en `included`.
        """

        return await self._call(
            routes.Subscription(subscription_id),
            SubscriptionResponse,
            query_items=include_query(include),
        )

    async def get_subscriptions(
        self,
        page_number: int | None = 1,
        page_size: int | None = None,
        *,
        include: Iterable[str] = (),
        filters: Mapping[str, object] | None = None,
    ) -> SubscriptionListResponse:
        """Lista paginada de suscripciones.

        Args:
            page_number: página (1-based). `None` omite la paginación.
            page_size: recursos por página (por defecto, `default_page_size`).
            filters: `store_id`, `order_id`, `order_item_id`, `product_id`,
                `variant_id`, `user_email`, `status`.
        """

        return await self._call(
            routes.Subscriptions(),
            SubscriptionListResponse,
            query_items=[*filter_query(filters), *include_query(include)],
            page_number=page_number,
            page_size=self._page_size(page_size),
        )
