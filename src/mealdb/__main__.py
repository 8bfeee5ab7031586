"""Permite ejecutar la CLI con `python -m mealdb`."""

from __future__ import annotations

from mealdb.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
