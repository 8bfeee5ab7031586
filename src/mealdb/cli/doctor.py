"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from mealdb.adapters.mealdb_api import MealDBClient
from mealdb.core.config import AppSettings
from mealdb.core.exceptions import MealDBError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(client: MealDBClient) -> tuple[bool, str]:
    try:
        categories = await client.list_categories()
        return True, f"{len(categories)} categories"
    except MealDBError as exc:
        return False, str(exc)


def build_client(settings: AppSettings) -> MealDBClient:
    return MealDBClient(settings)


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the active configuration and check that the API answers."""

    settings = getattr(ctx.obj, "settings", None) or AppSettings()

    table = Table(title="MealDB Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    timeout = settings.http_timeout_seconds
    table.add_row("HTTP timeout", "OK", "none" if timeout is None else f"{timeout:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)

    ok_api, detail_api = asyncio.run(_check_api(build_client(settings)))
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] set MEALDB_BASE_URL (or .env) if you use a mirror of the API."
        )
        raise typer.Exit(code=1)
