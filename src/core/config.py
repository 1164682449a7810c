"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/cliente API) lean config de forma consistente.
- La API key vive como `SecretStr`: nunca se imprime ni se loguea.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "lemonsqueezy"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "lemonsqueezy"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lemonsqueezy"
    return Path.home() / ".config" / "lemonsqueezy"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# lemonsqueezy user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.

    Nota:
    - `api_scheme`/`api_host` son constantes de despliegue, no estado de runtime.
      Se exponen aquí solo para poder apuntar a un host de pruebas.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEMONSQUEEZY_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="API key de Lemon Squeezy (Bearer token).",
    )
    api_scheme: str = Field(
        default="https",
        pattern=r"^https?$",
        description="Esquema de la API.",
    )
    api_host: str = Field(
        default="api.lemonsqueezy.com",
        min_length=1,
        description="Host de la API (sin esquema ni path).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="lemonsqueezy-python/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )

    default_page_size: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Tamaño de página por defecto en listados.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Nivel de log para la CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value
