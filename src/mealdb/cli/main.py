"""CLI de desarrollo sobre el cliente TheMealDB (Typer + Rich).

Los comandos delegan en un `RecipeSource` (por defecto `MealDBClient`) y solo
se ocupan de presentar el resultado: tablas Rich, JSON por stdout o fichero.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import typer
from rich.console import Console, RenderableType
from rich.logging import RichHandler

from mealdb.adapters.json_exporter import dump_results, export_results_json
from mealdb.adapters.mealdb_api import MealDBClient
from mealdb.cli import doctor
from mealdb.cli.ui_components import (
    build_categories_table,
    build_ingredients_table,
    build_meal_panel,
    build_meals_table,
    build_names_table,
)
from mealdb.core.config import AppSettings
from mealdb.core.exceptions import MealDBError
from mealdb.core.interfaces.recipe_source import RecipeSource

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Query TheMealDB from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


class ListKind(str, Enum):
    """Filter lists exposed by `list.php`."""

    CATEGORIES = "categories"
    INGREDIENTS = "ingredients"
    AREAS = "areas"


@dataclass
class CliState:
    settings: AppSettings = field(default_factory=AppSettings)
    as_json: bool = False
    output: Path | None = None


def build_source(settings: AppSettings) -> RecipeSource:
    return MealDBClient(settings)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )
    # httpx/httpcore son muy verbosos en DEBUG.
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _state(ctx: typer.Context) -> CliState:
    state = ctx.find_object(CliState)
    return state if state is not None else CliState()


def _call(state: CliState, op: Callable[[RecipeSource], Awaitable[T]]) -> T:
    source = build_source(state.settings)
    try:
        return asyncio.run(op(source))
    except MealDBError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _emit(state: CliState, results: Any, render: Callable[[Any], RenderableType]) -> None:
    if state.output is not None:
        path = export_results_json(results=results, output_path=state.output)
        _err_console.print(f"[green]Saved results to:[/green] {path}")
    if state.as_json:
        typer.echo(dump_results(results))
        return
    _console.print(render(results))


@app.callback()
def main(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print raw results as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write results to a JSON file."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override MEALDB_BASE_URL."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests."),
) -> None:
    _configure_logging(verbose)
    settings = AppSettings(base_url=base_url) if base_url else AppSettings()
    ctx.obj = CliState(settings=settings, as_json=as_json, output=output)


@app.command()
def search(ctx: typer.Context, name: str = typer.Argument(..., help="Meal name.")) -> None:
    """Search meals by name."""

    state = _state(ctx)
    meals = _call(state, lambda source: source.search_by_name(name))
    _emit(state, meals, build_meals_table)


@app.command()
def letter(ctx: typer.Context, value: str = typer.Argument(..., help="First letter.")) -> None:
    """Search meals by first letter."""

    state = _state(ctx)
    meals = _call(state, lambda source: source.search_by_letter(value))
    _emit(state, meals, build_meals_table)


@app.command()
def lookup(ctx: typer.Context, meal_id: int = typer.Argument(..., help="Meal id.")) -> None:
    """Show the full details of one meal."""

    state = _state(ctx)
    meal = _call(state, lambda source: source.search_by_id(meal_id))
    _emit(state, meal, build_meal_panel)


@app.command()
def random(ctx: typer.Context) -> None:
    """Show a random meal."""

    state = _state(ctx)
    meal = _call(state, lambda source: source.random_meal())
    _emit(state, meal, build_meal_panel)


@app.command()
def categories(ctx: typer.Context) -> None:
    """List meal categories with their descriptions."""

    state = _state(ctx)
    records = _call(state, lambda source: source.list_categories())
    _emit(state, records, build_categories_table)


@app.command(name="filter")
def filter_meals(
    ctx: typer.Context,
    ingredient: str | None = typer.Option(None, "--ingredient", "-i", help="Main ingredient."),
    area: str | None = typer.Option(None, "--area", "-a", help="Area (cuisine)."),
    category: str | None = typer.Option(None, "--category", "-c", help="Category."),
) -> None:
    """Filter meals by ingredient, area or category (exactly one)."""

    chosen = [v for v in (ingredient, area, category) if v is not None]
    if len(chosen) != 1:
        raise typer.BadParameter("pass exactly one of --ingredient, --area, --category")

    state = _state(ctx)
    if ingredient is not None:
        meals = _call(state, lambda source: source.filter_by_ingredient(ingredient))
    elif area is not None:
        meals = _call(state, lambda source: source.filter_by_area(area))
    else:
        meals = _call(state, lambda source: source.filter_by_category(category))
    _emit(state, meals, build_meals_table)


@app.command()
def lists(ctx: typer.Context, kind: ListKind = typer.Argument(..., help="Which filter list.")) -> None:
    """Show the values accepted by the filters."""

    state = _state(ctx)
    if kind is ListKind.CATEGORIES:
        names = _call(state, lambda source: source.category_filter_list())
        _emit(state, names, lambda r: build_names_table(r, title="Categories"))
    elif kind is ListKind.AREAS:
        names = _call(state, lambda source: source.area_filter_list())
        _emit(state, names, lambda r: build_names_table(r, title="Areas"))
    else:
        records = _call(state, lambda source: source.ingredient_filter_list())
        _emit(state, records, build_ingredients_table)


def run() -> None:
    app()
