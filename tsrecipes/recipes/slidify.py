"""
Шаг рецепта: скользящее окно с произвольной агрегирующей функцией.

Шаг проходит два состояния:
    - StepSlidify: конфигурация (селекторы колонок, окно, агрегат)
    - PreparedSlidify: конфигурация + колонки, разрешённые по схеме
      обучающих данных

Подготовка использует только схему данных (имена и типы колонок),
значения не читаются. Подготовленный шаг неизменяем и может
применяться к любым данным с теми же колонками, в том числе
другой длины (например, к строкам прогноза).
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

import pandas as pd

from tsrecipes.common.exceptions import ConfigurationError
from tsrecipes.common.validation import (
    check_columns_present,
    check_numeric_columns,
    check_unique_columns,
)
from tsrecipes.features.aggregates import AggregateFunc, describe_aggregate, resolve_aggregate
from tsrecipes.features.transformers.sliding import slidify_vec, validate_align, validate_period
from tsrecipes.recipes.base import PreparedStep, Step, rand_id
from tsrecipes.recipes.selectors import SelectorLike, as_selector, describe_selectors, resolve_columns

logger = logging.getLogger(__name__)

OPERATION = "slidify"


def _format_terms(terms: Sequence[str], trained: bool) -> str:
    status = " [trained]" if trained else ""
    return f"Rolling Apply on {', '.join(terms)}{status}"


@dataclass(frozen=True, repr=False)
class StepSlidify(Step):
    """
    Неподготовленный шаг скользящего окна.

    Attributes:
        columns: Имена колонок или селекторы
        period: Размер окна
        aggregate: Функция ndarray -> число или имя из AggregateRegistry
        align: Выравнивание окна (center, left, right)
        names: Имена новых колонок; None - перезапись исходных
        role: Роль новых колонок (передаётся как есть)
        skip: Пропускать шаг при bake новых данных
        id: Идентификатор шага
    """

    columns: Tuple[SelectorLike, ...]
    period: Optional[int] = None
    aggregate: Union[str, AggregateFunc, None] = None
    align: str = "center"
    names: Optional[Tuple[str, ...]] = None
    role: str = "predictor"
    skip: bool = False
    id: str = field(default_factory=lambda: rand_id(OPERATION))
    label: str = field(init=False, compare=False)

    operation = OPERATION

    def __post_init__(self) -> None:
        if self.aggregate is None:
            raise ConfigurationError("step_slidify(aggregate) is missing.")
        if self.period is None:
            raise ConfigurationError("step_slidify(period) is missing.")

        object.__setattr__(self, "columns", tuple(self.columns))
        for selector in self.columns:
            as_selector(selector)
        object.__setattr__(self, "period", validate_period(self.period))
        object.__setattr__(self, "align", validate_align(self.align))
        if self.names is not None:
            if isinstance(self.names, str):
                raise ConfigurationError("names должен быть списком имён, а не строкой")
            object.__setattr__(self, "names", tuple(self.names))

        object.__setattr__(self, "label", describe_aggregate(self.aggregate))
        object.__setattr__(self, "aggregate", resolve_aggregate(self.aggregate))

    def prep(self, training: pd.DataFrame) -> "PreparedSlidify":
        """
        Разрешить колонки по схеме обучающих данных.

        Args:
            training: Обучающие данные (значения не используются)

        Returns:
            Подготовленный шаг

        Raises:
            ConfigurationError: Если выбраны нечисловые колонки или число
                имён в names не совпадает с числом выбранных колонок
        """
        schema = dict(training.dtypes.items())
        columns = resolve_columns(self.columns, schema)
        check_numeric_columns(schema, columns)

        if self.names is not None and len(self.names) != len(columns):
            raise ConfigurationError(
                f"There were {len(columns)} term(s) selected but {len(self.names)} "
                "values for the new features were passed to `names`."
            )

        logger.debug("%s: выбраны колонки %s", self.id, columns)
        return PreparedSlidify(
            terms=tuple(describe_selectors(self.columns)),
            columns=tuple(columns),
            period=self.period,
            aggregate=self.aggregate,
            align=self.align,
            names=self.names,
            label=self.label,
            role=self.role,
            skip=self.skip,
            id=self.id,
        )

    def tidy(self) -> pd.DataFrame:
        """Описание по селекторам: terms, period, aggregate, align, role, skip, id."""
        terms = describe_selectors(self.columns)
        return _tidy_frame(terms, self)

    def __repr__(self) -> str:
        return _format_terms(describe_selectors(self.columns), trained=False)


@dataclass(frozen=True, repr=False)
class PreparedSlidify(PreparedStep):
    """Подготовленный шаг скользящего окна."""

    terms: Tuple[str, ...]
    columns: Tuple[str, ...]
    period: int
    aggregate: AggregateFunc
    align: str
    names: Optional[Tuple[str, ...]]
    label: str
    role: str
    skip: bool
    id: str

    operation = OPERATION

    def bake(self, data: pd.DataFrame) -> pd.DataFrame:
        """
        Применить скользящее окно к колонкам.

        Неполные окна у границ всегда считаются по доступной части
        (partial=True), поэтому края ряда заполнены значениями агрегата.

        Args:
            data: Данные с колонками, выбранными при prep

        Returns:
            Копия данных с перезаписанными или добавленными колонками

        Raises:
            DataError: Если в данных нет колонки, выбранной при prep
                или она повторяется
        """
        check_columns_present(data, self.columns)
        check_unique_columns(data, self.columns)

        result = data.copy()
        targets = self.names if self.names is not None else self.columns
        for column, target in zip(self.columns, targets):
            result[target] = slidify_vec(
                data[column],
                period=self.period,
                aggregate=self.aggregate,
                align=self.align,
                partial=True,
            )

        logger.debug("%s: обработано %d колонок, %d строк", self.id, len(self.columns), len(result))
        return result

    def tidy(self) -> pd.DataFrame:
        """Описание по колонкам: terms, period, aggregate, align, role, skip, id."""
        return _tidy_frame(list(self.columns), self)

    def __repr__(self) -> str:
        return _format_terms(self.columns, trained=True)


def _tidy_frame(terms: Sequence[str], step: Union[StepSlidify, PreparedSlidify]) -> pd.DataFrame:
    count = len(terms)
    return pd.DataFrame(
        {
            "terms": list(terms),
            "period": [step.period] * count,
            "aggregate": [step.label] * count,
            "align": [step.align] * count,
            "role": [step.role] * count,
            "skip": [step.skip] * count,
            "id": [step.id] * count,
        }
    )


def step_slidify(
    *columns: SelectorLike,
    period: Optional[int] = None,
    aggregate: Union[str, AggregateFunc, None] = None,
    align: str = "center",
    names: Optional[Sequence[str]] = None,
    role: str = "predictor",
    skip: bool = False,
    id: Optional[str] = None,
) -> StepSlidify:
    """
    Создать шаг скользящего окна.

    Args:
        *columns: Имена колонок или селекторы
        period: Размер окна
        aggregate: Функция ndarray -> число или имя из AggregateRegistry
        align: Выравнивание окна (center, left, right)
        names: Имена новых колонок, по одному на выбранную колонку
        role: Роль новых колонок
        skip: Пропускать шаг при bake новых данных
        id: Идентификатор шага (по умолчанию slidify_XXXXX)

    Returns:
        Неподготовленный шаг

    Example:
        >>> step = step_slidify("close", period=3, aggregate=np.mean, align="right",
        ...                     names=["close_ma3"])
    """
    kwargs = {}
    if id is not None:
        kwargs["id"] = id
    return StepSlidify(
        columns=columns,
        period=period,
        aggregate=aggregate,
        align=align,
        names=tuple(names) if names is not None and not isinstance(names, str) else names,
        role=role,
        skip=skip,
        **kwargs,
    )
