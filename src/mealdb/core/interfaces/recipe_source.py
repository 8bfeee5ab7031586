"""Contrato de una fuente de recetas.

`RecipeSource` es un Protocol: cualquier objeto con estas corrutinas (el
cliente HTTP real o un fake en tests) sirve a la CLI.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mealdb.core.domain.models import ResultItem


@runtime_checkable
class RecipeSource(Protocol):
    """Una corrutina por endpoint de TheMealDB.

    Reglas:
    - Cada método hace como mucho una petición y no guarda estado.
    - Un resultado vacío o un fallo de red se reportan con `MealDBError`.
    """

    async def search_by_name(self, term: str) -> list[ResultItem]: ...

    async def search_by_letter(self, letter: str) -> list[ResultItem]: ...

    async def search_by_id(self, meal_id: int) -> ResultItem: ...

    async def random_meal(self) -> ResultItem: ...

    async def list_categories(self) -> list[ResultItem]: ...

    async def filter_by_ingredient(self, term: str) -> list[ResultItem]: ...

    async def filter_by_area(self, term: str) -> list[ResultItem]: ...

    async def filter_by_category(self, term: str) -> list[ResultItem]: ...

    async def category_filter_list(self) -> list[str]: ...

    async def ingredient_filter_list(self) -> list[ResultItem]: ...

    async def area_filter_list(self) -> list[str]: ...
