"""Modelos del dominio (Pydantic v2).

Notas:
- La API no garantiza un esquema fijo, así que los registros viajan como
  `dict[str, Any]` (`ResultItem`) sin tocar.
- Los sobres (`MealsPayload`, `CategoriesPayload`) solo tipan el campo que se
  inspecciona; el resto del JSON se conserva con `extra="allow"`.
- `MealSummary` y `CategoryRecord` son vistas de lectura para la CLI.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

ResultItem = dict[str, Any]


class ApiPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _non_object_top_level(cls, data: Any) -> Any:
        # `null`, listas o escalares en la raíz: el campo esperado no existe.
        if not isinstance(data, dict):
            return {}
        return data


class MealsPayload(ApiPayload):
    """Cuerpo de `search`, `lookup`, `random`, `filter` y `list`."""

    meals: Any = Field(
        default=None,
        description="Lista de registros, o null/\"\" cuando no hay resultados.",
    )


class CategoriesPayload(ApiPayload):
    """Cuerpo de `categories.php`."""

    categories: Any = Field(
        default=None,
        description="Lista de categorías, o null/\"\" cuando no hay resultados.",
    )


class MealSummary(BaseModel):
    """Vista mínima de una receta (id, nombre y clasificación)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = Field(default=None, alias="idMeal")
    name: str | None = Field(default=None, alias="strMeal")
    category: str | None = Field(default=None, alias="strCategory")
    area: str | None = Field(default=None, alias="strArea")
    thumbnail: str | None = Field(default=None, alias="strMealThumb")


class CategoryRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = Field(default=None, alias="idCategory")
    name: str | None = Field(default=None, alias="strCategory")
    thumbnail: str | None = Field(default=None, alias="strCategoryThumb")
    description: str | None = Field(default=None, alias="strCategoryDescription")
