"""Operaciones de API: usuario autenticado."""

from __future__ import annotations

from typing import TypeAlias

from adapters.base_client import BaseLemonSqueezyClient
from core.domain import routes
from core.domain.models import DataAndIncluded, Included, User

UserResponse: TypeAlias = DataAndIncluded[User, Included]


class UsersAPI(BaseLemonSqueezyClient):
    async def get_me(self) -> UserResponse:
        """Devuelve el usuario dueño de la API key."""

        return await self._call(routes.Me(), UserResponse)
