"""Operaciones de API: archivos descargables.

Los archivos cuelgan de una variante; `download_url` es firmado y caduca.
"""

from __future__ import annotations

from typing import Iterable, Mapping, TypeAlias

from adapters.base_client import BaseLemonSqueezyClient
from adapters.request_builder import filter_query, include_query
from core.domain import routes
from core.domain.models import DataAndIncluded, DataIncludedAndMeta, File, Included, Meta
from core.domain.routes import ResourceID

FileResponse: TypeAlias = DataAndIncluded[File, Included]
FileListResponse: TypeAlias = DataIncludedAndMeta[list[File], Included, Meta]


class FilesAPI(BaseLemonSqueezyClient):
    async def get_file(
        self,
        file_id: ResourceID,
        *,
        include: Iterable[str] = (),
    ) -> FileResponse:
        return await self._call(
            routes.File(file_id),
            FileResponse,
            query_items=include_query(include),
        )

    async def get_files(
        self,
        page_number: int | None = 1,
        page_size: int | None = None,
        *,
        include: Iterable[str] = (),
        filters: Mapping[str, object] | None = None,
    ) -> FileListResponse:
        return await self._call(
            routes.Files(),
            FileListResponse,
            query_items=[*filter_query(filters), *include_query(include)],
            page_number=page_number,
            page_size=self._page_size(page_size),
        )
