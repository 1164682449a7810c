"""Decodificación de respuestas con fallback en tres niveles.

1. El tipo de éxito esperado -> se devuelve.
2. Si no encaja, el documento de error JSON:API -> `LemonSqueezyAPIError`.
3. Si tampoco, `UnknownError` con el cuerpo crudo (texto UTF-8 si lo es).

El código HTTP no decide nada aquí: la API manda cuerpos de error
estructurados en respuestas no-2xx y se decodifican igual.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from core.domain.errors import LemonSqueezyAPIError, UnknownError
from core.domain.models import APIErrorDocument

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _as_text(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def decode_or_raise(response_type: type[T], data: bytes, *, status_code: int | None = None) -> T:
    """Decodifica `data` como `response_type` o lanza el error tipado correspondiente."""

    try:
        return _adapter(response_type).validate_json(data)
    except ValidationError as exc:
        success_error = exc

    try:
        document = APIErrorDocument.model_validate_json(data)
    except ValidationError:
        logger.warning(
            "lemonsqueezy_unknown_response status_code=%s size=%s",
            status_code,
            len(data),
            extra={"status_code": status_code, "size": len(data)},
        )
        raise UnknownError(
            _as_text(data),
            raw=data,
            status_code=status_code,
            validation_error=success_error,
        ) from success_error

    logger.info(
        "lemonsqueezy_api_error status_code=%s errors=%s",
        status_code,
        len(document.errors),
        extra={"status_code": status_code, "error_count": len(document.errors)},
    )
    raise LemonSqueezyAPIError(document.errors, status_code=status_code)
