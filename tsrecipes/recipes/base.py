"""Базовые классы шагов и рецепт препроцессинга."""

from __future__ import annotations

import logging
import random
import string
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

import pandas as pd

from tsrecipes.common.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_letters + string.digits


def rand_id(prefix: str = "step") -> str:
    """
    Сгенерировать идентификатор шага вида prefix_XXXXX.

    Args:
        prefix: Префикс, обычно название операции

    Returns:
        Идентификатор с 5 случайными символами
    """
    suffix = "".join(random.choices(_ID_ALPHABET, k=5))
    return f"{prefix}_{suffix}"


class PreparedStep(ABC):
    """
    Подготовленный шаг.

    Хранит только структурные привязки, полученные при prep,
    и может применяться к любому совместимому набору данных.
    """

    operation: str
    id: str
    skip: bool

    trained = True

    @abstractmethod
    def bake(self, data: pd.DataFrame) -> pd.DataFrame:
        """
        Применить шаг к данным.

        Args:
            data: Данные для преобразования

        Returns:
            Новый DataFrame, входные данные не изменяются
        """
        pass

    @abstractmethod
    def tidy(self) -> pd.DataFrame:
        """Описание шага в табличном виде."""
        pass


class Step(ABC):
    """Неподготовленный шаг рецепта (только конфигурация)."""

    operation: str
    id: str
    skip: bool

    trained = False

    @abstractmethod
    def prep(self, training: pd.DataFrame) -> PreparedStep:
        """
        Подготовить шаг по схеме обучающих данных.

        Args:
            training: Обучающие данные

        Returns:
            Неизменяемый подготовленный шаг
        """
        pass

    @abstractmethod
    def tidy(self) -> pd.DataFrame:
        """Описание шага в табличном виде."""
        pass


def _steps_summary(steps: tuple) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "number": list(range(1, len(steps) + 1)),
            "operation": [step.operation for step in steps],
            "trained": [step.trained for step in steps],
            "skip": [step.skip for step in steps],
            "id": [step.id for step in steps],
        }
    )


@dataclass(frozen=True)
class Recipe:
    """
    Последовательность шагов препроцессинга.

    Example:
        >>> recipe = Recipe().add_step(step_slidify("close", period=3, aggregate="mean"))
        >>> prepared = recipe.prep(train_df)
        >>> features = prepared.bake(test_df)
    """

    steps: tuple[Step, ...] = field(default_factory=tuple)

    def add_step(self, step: Step) -> Recipe:
        """Вернуть новый рецепт с добавленным шагом."""
        if not isinstance(step, Step):
            raise ConfigurationError(f"Ожидался шаг рецепта, получено: {step!r}")
        return Recipe(steps=self.steps + (step,))

    def prep(self, training: pd.DataFrame) -> PreparedRecipe:
        """
        Подготовить все шаги на обучающих данных.

        Каждый шаг подготавливается на данных, уже преобразованных
        предыдущими шагами, поэтому видит их новые колонки.

        Args:
            training: Обучающие данные

        Returns:
            Подготовленный рецепт
        """
        if not self.steps:
            logger.warning("Рецепт не содержит шагов")

        current = training
        prepared: list[PreparedStep] = []
        for number, step in enumerate(self.steps, start=1):
            logger.debug("Подготовка шага %d: %s (%s)", number, step.operation, step.id)
            prepared_step = step.prep(current)
            current = prepared_step.bake(current)
            prepared.append(prepared_step)

        logger.info("Рецепт подготовлен: %d шаг(ов), %d колонок", len(prepared), current.shape[1])
        return PreparedRecipe(steps=tuple(prepared), template=current)

    def tidy(self) -> pd.DataFrame:
        """Сводка по шагам: number, operation, trained, skip, id."""
        return _steps_summary(self.steps)

    def __len__(self) -> int:
        return len(self.steps)


@dataclass(frozen=True, eq=False)
class PreparedRecipe:
    """Подготовленный рецепт, применимый к новым данным."""

    steps: tuple[PreparedStep, ...]
    template: pd.DataFrame = field(repr=False)

    def bake(self, data: pd.DataFrame) -> pd.DataFrame:
        """
        Применить шаги к новым данным.

        Шаги с skip=True применяются только к обучающим данным при prep.

        Args:
            data: Данные для преобразования

        Returns:
            Преобразованные данные
        """
        current = data
        for step in self.steps:
            if step.skip:
                logger.debug("Шаг %s пропущен (skip=True)", step.id)
                continue
            current = step.bake(current)
        return current

    def juice(self) -> pd.DataFrame:
        """Обучающие данные после всех шагов (копия)."""
        return self.template.copy()

    def tidy(self, number: Optional[int] = None) -> pd.DataFrame:
        """
        Сводка по шагам или описание одного шага.

        Args:
            number: Номер шага, начиная с 1

        Raises:
            ConfigurationError: Если шага с таким номером нет
        """
        if number is None:
            return _steps_summary(self.steps)
        if not 1 <= number <= len(self.steps):
            raise ConfigurationError(
                f"Номер шага должен быть от 1 до {len(self.steps)}, получено: {number}"
            )
        return self.steps[number - 1].tidy()

    def __len__(self) -> int:
        return len(self.steps)
