"""Парсинг и валидация конфигураций рецептов."""

from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from tsrecipes.common.config import load_yaml_config
from tsrecipes.common.exceptions import ConfigurationError
from tsrecipes.features.aggregates import AggregateRegistry
from tsrecipes.recipes.base import Recipe
from tsrecipes.recipes import selectors
from tsrecipes.recipes.slidify import step_slidify


class ColumnSelectorConfig(BaseModel):
    """Селектор колонок по шаблону."""

    starts_with: Optional[str] = None
    ends_with: Optional[str] = None
    contains: Optional[str] = None
    matches: Optional[str] = None
    all_numeric: bool = False

    @model_validator(mode="after")
    def validate_single_rule(self) -> "ColumnSelectorConfig":
        """Ровно одно правило выбора."""
        rules = [
            self.starts_with is not None,
            self.ends_with is not None,
            self.contains is not None,
            self.matches is not None,
            self.all_numeric,
        ]
        if sum(rules) != 1:
            raise ValueError("Селектор должен задавать ровно одно правило")
        return self

    def to_selector(self) -> selectors.Where:
        """Построить селектор."""
        if self.starts_with is not None:
            return selectors.starts_with(self.starts_with)
        if self.ends_with is not None:
            return selectors.ends_with(self.ends_with)
        if self.contains is not None:
            return selectors.contains(self.contains)
        if self.matches is not None:
            return selectors.matches(self.matches)
        return selectors.all_numeric()


class SlidifyStepConfig(BaseModel):
    """Конфигурация шага скользящего окна."""

    type: Literal["slidify"] = "slidify"
    columns: List[Union[str, ColumnSelectorConfig]] = Field(
        ..., min_length=1, description="Колонки или селекторы"
    )
    period: int = Field(..., gt=0, description="Размер окна")
    aggregate: str = Field(..., description="Название агрегата из реестра")
    align: Literal["center", "left", "right"] = Field(
        "center", description="Выравнивание окна"
    )
    names: Optional[List[str]] = Field(None, description="Имена новых колонок")
    role: str = Field("predictor", description="Роль новых колонок")
    skip: bool = Field(False, description="Пропускать при bake новых данных")
    id: Optional[str] = Field(None, description="Идентификатор шага")

    @field_validator("aggregate")
    @classmethod
    def validate_aggregate(cls, v: str) -> str:
        """Валидация названия агрегата."""
        if not AggregateRegistry.is_registered(v):
            raise ValueError(
                f"Неизвестный агрегат: {v}. Доступные: {', '.join(AggregateRegistry.list_all())}"
            )
        return v.lower()


# Union всех типов шагов; новые типы добавляются сюда
StepConfigItem = SlidifyStepConfig


class RecipeConfig(BaseModel):
    """Полная конфигурация рецепта."""

    version: str = Field("1.0", description="Версия конфига")
    steps: List[StepConfigItem] = Field(..., description="Список шагов")


def parse_recipe_config(config_path: Union[str, Path, dict]) -> RecipeConfig:
    """
    Парсинг конфигурации рецепта из YAML файла или словаря.

    Args:
        config_path: Путь к YAML файлу или словарь конфигурации

    Returns:
        Валидированная конфигурация

    Raises:
        FileNotFoundError: Если файл не найден
        ConfigurationError: Если конфигурация невалидна
    """
    if isinstance(config_path, dict):
        config_dict: Dict[str, Any] = config_path
    else:
        config_dict = load_yaml_config(Path(config_path))

    try:
        return RecipeConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Невалидная конфигурация рецепта: {e}") from e


def validate_recipe_config(config: dict) -> tuple[bool, Optional[str]]:
    """
    Валидация конфигурации рецепта.

    Args:
        config: Словарь конфигурации

    Returns:
        Кортеж (is_valid, error_message)
    """
    try:
        RecipeConfig(**config)
        return True, None
    except ValidationError as e:
        return False, str(e)


def build_recipe(config: RecipeConfig) -> Recipe:
    """
    Построить рецепт по конфигурации.

    Args:
        config: Валидированная конфигурация

    Returns:
        Рецепт с шагами в порядке конфигурации
    """
    recipe = Recipe()
    for step_config in config.steps:
        columns = [
            column if isinstance(column, str) else column.to_selector()
            for column in step_config.columns
        ]
        recipe = recipe.add_step(
            step_slidify(
                *columns,
                period=step_config.period,
                aggregate=step_config.aggregate,
                align=step_config.align,
                names=step_config.names,
                role=step_config.role,
                skip=step_config.skip,
                id=step_config.id,
            )
        )
    return recipe
