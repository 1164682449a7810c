"""Exportación JSON de respuestas.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Se exporta con los nombres del wire (aliases), igual que los devuelve la API.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel


def dump_envelope(envelope: BaseModel) -> dict[str, object]:
    return envelope.model_dump(mode="json", by_alias=True, exclude_none=True)


def export_envelope_json(*, envelope: BaseModel, output_path: Path) -> Path:
    """Exporta un envelope a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = dump_envelope(envelope)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
