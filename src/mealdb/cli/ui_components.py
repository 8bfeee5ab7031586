"""Componentes de UI para CLI (Rich).

Tablas y paneles para los resultados del cliente; los comandos solo deciden
qué componente usar.
"""

from __future__ import annotations

from typing import Any, Iterable

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mealdb.core.domain.models import CategoryRecord, MealSummary, ResultItem

# La API expone los ingredientes como strIngredient1..20 / strMeasure1..20.
_MAX_INGREDIENTS = 20


def build_meals_table(records: Iterable[ResultItem], *, title: str = "Meals") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Meal", style="white")
    table.add_column("Category", style="green")
    table.add_column("Area", style="magenta")
    for record in records:
        meal = MealSummary.model_validate(record)
        table.add_row(meal.id or "", meal.name or "", meal.category or "", meal.area or "")
    return table


def build_categories_table(records: Iterable[ResultItem]) -> Table:
    table = Table(title="Categories")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Category", style="white")
    table.add_column("Description", style="dim")
    for record in records:
        category = CategoryRecord.model_validate(record)
        description = (category.description or "").strip()
        if len(description) > 80:
            description = description[:77] + "..."
        table.add_row(category.id or "", category.name or "", description)
    return table


def build_names_table(names: Iterable[str | None], *, title: str) -> Table:
    """Tabla de una columna para las listas de filtros (categorías/áreas)."""

    table = Table(title=title)
    table.add_column("Name", style="white")
    for name in names:
        table.add_row(name or "")
    return table


def build_ingredients_table(records: Iterable[ResultItem]) -> Table:
    table = Table(title="Ingredients")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Ingredient", style="white")
    for record in records:
        table.add_row(str(record.get("idIngredient") or ""), str(record.get("strIngredient") or ""))
    return table


def ingredient_lines(record: ResultItem) -> list[str]:
    """Pares medida + ingrediente de una receta completa, en orden."""

    lines: list[str] = []
    for i in range(1, _MAX_INGREDIENTS + 1):
        ingredient = record.get(f"strIngredient{i}")
        if not isinstance(ingredient, str) or not ingredient.strip():
            continue
        measure = record.get(f"strMeasure{i}")
        measure = measure.strip() if isinstance(measure, str) else ""
        lines.append(f"{measure} {ingredient.strip()}".strip())
    return lines


def build_meal_panel(record: ResultItem) -> Panel:
    """Panel con el detalle de una receta (lookup/random)."""

    meal = MealSummary.model_validate(record)
    header = Text()
    header.append(meal.name or "(unnamed)", style="bold cyan")
    if meal.category or meal.area:
        header.append(f"\n{meal.category or '-'} • {meal.area or '-'}", style="dim")

    parts: list[Any] = [header]
    ingredients = ingredient_lines(record)
    if ingredients:
        body = Text("\nIngredients:\n", style="bold")
        for line in ingredients:
            body.append(f"- {line}\n")
        parts.append(body)

    instructions = record.get("strInstructions")
    if isinstance(instructions, str) and instructions.strip():
        parts.append(Text("\n" + instructions.strip()))

    return Panel(Group(*parts), title=f"Meal {meal.id or ''}".strip(), border_style="cyan")
