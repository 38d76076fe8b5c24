"""CLI команды для работы с рецептами."""

from pathlib import Path
from typing import Optional

import click
import pandas as pd
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tsrecipes.common.exceptions import ProjectBaseException
from tsrecipes.data.io import load_table, save_table
from tsrecipes.features.aggregates import AggregateRegistry
from tsrecipes.recipes.config_parser import build_recipe, parse_recipe_config

console = Console()


def _print_frame(frame: pd.DataFrame, title: str) -> None:
    table = Table(title=title)
    for column in frame.columns:
        table.add_column(str(column), style="cyan" if column == frame.columns[0] else None)
    for _, row in frame.iterrows():
        table.add_row(*[str(value) for value in row])
    console.print(table)


def _print_steps(steps) -> None:
    for number, step in enumerate(steps, start=1):
        console.print(f"  {number}. {escape(repr(step))}")


@click.group()
def recipe():
    """Команды для работы с рецептами."""
    pass


@recipe.command("bake")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Путь к конфигурации рецепта (YAML)",
)
@click.option(
    "--training",
    "-t",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Обучающие данные для prep (Parquet/CSV)",
)
@click.option(
    "--data",
    "-d",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Данные для bake (по умолчанию обучающие)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    required=True,
    help="Путь для сохранения результата (Parquet/CSV)",
)
def bake_recipe(config: Path, training: Path, data: Optional[Path], output: Path):
    """
    Подготовить рецепт на обучающих данных и применить его.

    Examples:
        $ python -m tsrecipes.interfaces.cli recipe bake
          -c recipe.yaml -t train.parquet -o baked.parquet
        $ python -m tsrecipes.interfaces.cli recipe bake
          -c recipe.yaml -t train.parquet -d future.csv -o future_baked.csv
    """
    try:
        console.print(f"[cyan]Загрузка конфигурации из {config}...[/cyan]")
        recipe_obj = build_recipe(parse_recipe_config(config))

        console.print(f"[cyan]Загрузка обучающих данных из {training}...[/cyan]")
        training_df = load_table(training)
        prepared = recipe_obj.prep(training_df)
        console.print(f"[green]Рецепт подготовлен: {len(prepared)} шаг(ов)[/green]")

        if data is None:
            baked = prepared.bake(training_df)
        else:
            console.print(f"[cyan]Загрузка данных из {data}...[/cyan]")
            baked = prepared.bake(load_table(data))

        save_table(baked, output)
        console.print(f"[green]Сохранено {len(baked)} строк, {baked.shape[1]} колонок в {output}[/green]")

    except (ProjectBaseException, FileNotFoundError) as e:
        console.print(f"[red]Ошибка: {escape(str(e))}[/red]")
        raise click.Abort()


@recipe.command("tidy")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Путь к конфигурации рецепта (YAML)",
)
@click.option(
    "--training",
    "-t",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Обучающие данные: показать колонки после prep",
)
def tidy_recipe(config: Path, training: Optional[Path]):
    """
    Показать шаги рецепта.

    Examples:
        $ python -m tsrecipes.interfaces.cli recipe tidy -c recipe.yaml
        $ python -m tsrecipes.interfaces.cli recipe tidy -c recipe.yaml -t train.parquet
    """
    try:
        recipe_obj = build_recipe(parse_recipe_config(config))
        if training is None:
            _print_frame(recipe_obj.tidy(), "Шаги рецепта")
            _print_steps(recipe_obj.steps)
            return

        prepared = recipe_obj.prep(load_table(training))
        _print_frame(prepared.tidy(), "Шаги рецепта (trained)")
        for number in range(1, len(prepared) + 1):
            _print_frame(prepared.tidy(number), f"Шаг {number}")
        _print_steps(prepared.steps)

    except (ProjectBaseException, FileNotFoundError) as e:
        console.print(f"[red]Ошибка: {escape(str(e))}[/red]")
        raise click.Abort()


@click.command("aggregates")
def list_aggregates():
    """Показать зарегистрированные агрегаты."""
    table = Table(title="Агрегаты")
    table.add_column("Название", style="cyan")
    table.add_column("Описание", style="magenta")

    for name in AggregateRegistry.list_all():
        doc = AggregateRegistry.get(name).__doc__ or ""
        table.add_row(name, doc.strip().splitlines()[0] if doc.strip() else "")

    console.print(table)
