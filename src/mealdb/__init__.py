"""Cliente asíncrono para la API pública de TheMealDB."""

import logging

from mealdb.adapters.mealdb_api import (
    MealDBClient,
    area_filter_list,
    category_filter_list,
    filter_by_area,
    filter_by_category,
    filter_by_ingredient,
    ingredient_filter_list,
    list_categories,
    random_meal,
    search_by_id,
    search_by_letter,
    search_by_name,
)
from mealdb.core.config import AppSettings
from mealdb.core.exceptions import MealDBError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "MealDBClient",
    "MealDBError",
    "area_filter_list",
    "category_filter_list",
    "filter_by_area",
    "filter_by_category",
    "filter_by_ingredient",
    "ingredient_filter_list",
    "list_categories",
    "random_meal",
    "search_by_id",
    "search_by_letter",
    "search_by_name",
]
