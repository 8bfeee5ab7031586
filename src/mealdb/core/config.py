"""Configuración del cliente.

Centraliza variables de entorno (pydantic-settings) para que los adaptadores
HTTP lean la misma configuración que la CLI.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://themealdb.com/api/json/v1/1/"


class AppSettings(BaseSettings):
    """Configuración central del cliente TheMealDB.

    Todas las variables se leen con prefijo `MEALDB_` (p.ej. `MEALDB_BASE_URL`).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEALDB_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="URL base de la API JSON (termina en '/').",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout.",
    )
    user_agent: str = Field(
        default="mealdb-client/0.1",
        min_length=1,
        description="User-Agent enviado a la API.",
    )

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        # Los endpoints se concatenan directamente sobre la base.
        return value if value.endswith("/") else value + "/"
