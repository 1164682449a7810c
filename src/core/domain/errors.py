"""Errores tipados del cliente.

Taxonomía:
- `LemonSqueezyAPIError`: el backend devolvió un error estructurado que entendemos.
- `UnknownError`: el cuerpo no encaja ni con el éxito ni con el error estructurado.
- Errores de transporte: son excepciones de `httpx` y se propagan sin envolver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import ValidationError

    from core.domain.models import APIErrorObject


class LemonSqueezyError(Exception):
    """Base de todos los errores del cliente."""


class MissingAPIKeyError(LemonSqueezyError, ValueError):
    """No hay API key ni por argumento ni en la configuración."""


class LemonSqueezyAPIError(LemonSqueezyError):
    """Error estructurado devuelto por la API (lista `errors` de JSON:API)."""

    def __init__(self, errors: list[APIErrorObject], status_code: int | None = None) -> None:
        self.errors = errors
        self.status_code = status_code
        super().__init__(self._summary())

    def _summary(self) -> str:
        parts: list[str] = []
        for err in self.errors:
            text = err.detail or err.title or "error"
            if err.status is not None:
                text = f"[{err.status}] {text}"
            parts.append(text)
        return "; ".join(parts) or "Lemon Squeezy API error"


class UnknownError(LemonSqueezyError):
    """Respuesta indescifrable.

    `message` es el cuerpo interpretado como UTF-8 (None si no es texto válido).
    `validation_error` conserva el diagnóstico del intento de decodificar el éxito.
    """

    def __init__(
        self,
        message: str | None,
        *,
        raw: bytes = b"",
        status_code: int | None = None,
        validation_error: ValidationError | None = None,
    ) -> None:
        self.message = message
        self.raw = raw
        self.status_code = status_code
        self.validation_error = validation_error
        super().__init__(message or "Unknown error (undecodable response body)")
