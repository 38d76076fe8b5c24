"""CLI интерфейсы проекта."""

from tsrecipes.interfaces.cli.recipe_commands import list_aggregates, recipe

__all__ = ["list_aggregates", "recipe"]
