"""Interfaces/abstracciones del Core.

Los adaptadores concretos implementan estos contratos (Protocol).
"""

from mealdb.core.interfaces.recipe_source import RecipeSource

__all__ = ["RecipeSource"]
