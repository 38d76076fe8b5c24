"""Точка входа для CLI: python -m tsrecipes.interfaces.cli ..."""

from pathlib import Path
from typing import Optional

import click

from tsrecipes.common.config import RuntimeSettings, load_env
from tsrecipes.common.logging import setup_logging_from_settings
from tsrecipes.interfaces.cli.recipe_commands import list_aggregates, recipe

load_env()


@click.group()
@click.option(
    "--log-level",
    envvar="LOG_LEVEL",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Уровень логирования",
)
@click.option(
    "--log-file",
    envvar="LOG_FILE",
    type=click.Path(path_type=Path),
    default=None,
    help="Файл логов (опционально)",
)
def cli(log_level: str, log_file: Optional[Path]):
    """Рецепты признаков для временных рядов - CLI интерфейс."""
    settings = RuntimeSettings.from_env().model_copy(
        update={"log_level": log_level.upper(), "log_file": log_file}
    )
    setup_logging_from_settings(settings)


# Добавляем группы команд
cli.add_command(recipe, name="recipe")
cli.add_command(list_aggregates, name="aggregates")


if __name__ == "__main__":  # pragma: no cover
    cli()
