"""Modelos y entidades del dominio.

El dominio no conoce HTTP ni la CLI: solo la forma de los datos de TheMealDB.
"""

from mealdb.core.domain.models import (
    ApiPayload,
    CategoriesPayload,
    CategoryRecord,
    MealSummary,
    MealsPayload,
    ResultItem,
)

__all__ = [
    "ApiPayload",
    "CategoriesPayload",
    "CategoryRecord",
    "MealSummary",
    "MealsPayload",
    "ResultItem",
]
