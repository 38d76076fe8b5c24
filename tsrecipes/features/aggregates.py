"""
Централизованный реестр агрегирующих функций для скользящих окон.
"""

import ast
import functools
import inspect
import warnings
from typing import Callable, Dict, List, Union

import numpy as np

from tsrecipes.common.exceptions import ConfigurationError

AggregateFunc = Callable[[np.ndarray], float]


class AggregateRegistry:
    """Централизованный реестр агрегирующих функций."""

    _aggregates: Dict[str, AggregateFunc] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[AggregateFunc], AggregateFunc]:
        """
        Декоратор для регистрации агрегата.

        Args:
            name: Название агрегата для регистрации

        Returns:
            Декоратор

        Example:
            >>> @AggregateRegistry.register("range")
            >>> def value_range(values):
            >>>     return values.max() - values.min()
        """

        def decorator(func: AggregateFunc) -> AggregateFunc:
            cls._aggregates[name.lower()] = func
            return func

        return decorator

    @classmethod
    def get(cls, name: str) -> AggregateFunc:
        """
        Получить агрегат по имени.

        Args:
            name: Название агрегата

        Returns:
            Агрегирующая функция

        Raises:
            ConfigurationError: Если агрегат не найден
        """
        name_lower = name.lower()
        if name_lower not in cls._aggregates:
            raise ConfigurationError(
                f"Неизвестный агрегат: {name}. "
                f"Доступные: {', '.join(cls.list_all())}"
            )
        return cls._aggregates[name_lower]

    @classmethod
    def list_all(cls) -> List[str]:
        """Список всех зарегистрированных агрегатов."""
        return sorted(cls._aggregates.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Проверить зарегистрирован ли агрегат."""
        return name.lower() in cls._aggregates


def resolve_aggregate(aggregate: Union[str, AggregateFunc]) -> AggregateFunc:
    """
    Получить функцию по имени или вернуть переданную функцию.

    Raises:
        ConfigurationError: Если aggregate не строка и не функция
    """
    if isinstance(aggregate, str):
        return AggregateRegistry.get(aggregate)
    if not callable(aggregate):
        raise ConfigurationError(f"aggregate должен быть функцией или именем, получено: {aggregate!r}")
    return aggregate


def describe_aggregate(aggregate: Union[str, AggregateFunc]) -> str:
    """
    Текстовая метка агрегата для tidy и repr.

    Args:
        aggregate: Имя из реестра или функция

    Returns:
        Имя для строк, __name__ для функций, текст выражения для lambda,
        развёрнутый вид для partial
    """
    if isinstance(aggregate, str):
        return aggregate.lower()
    if isinstance(aggregate, functools.partial):
        args = [describe_aggregate(aggregate.func)]
        args.extend(repr(arg) for arg in aggregate.args)
        args.extend(f"{key}={value!r}" for key, value in aggregate.keywords.items())
        return f"partial({', '.join(args)})"

    name = getattr(aggregate, "__name__", None)
    if name == "<lambda>":
        return _lambda_source(aggregate)
    if name:
        return name
    return type(aggregate).__name__


def _lambda_source(func: Callable) -> str:
    """
    Текст lambda-выражения из исходного кода.

    Берётся самый длинный фрагмент, начинающийся с "lambda", который
    разбирается как одно lambda-выражение. Если исходник недоступен
    (REPL, exec), возвращается "<lambda>".
    """
    try:
        source = inspect.getsource(func)
    except (OSError, TypeError):
        return "<lambda>"

    start = source.find("lambda")
    if start < 0:
        return "<lambda>"

    fragment = source[start:]
    for stop in range(len(fragment), 0, -1):
        candidate = fragment[:stop].strip()
        try:
            tree = ast.parse(candidate, mode="eval")
        except SyntaxError:
            continue
        if isinstance(tree.body, ast.Lambda):
            return ast.unparse(tree.body)
    return "<lambda>"


def _min_count(values: np.ndarray, count: int) -> bool:
    return np.count_nonzero(~np.isnan(values)) >= count


@AggregateRegistry.register("mean")
def window_mean(values: np.ndarray) -> float:
    """Среднее (NaN распространяется)."""
    return float(np.mean(values))


@AggregateRegistry.register("median")
def window_median(values: np.ndarray) -> float:
    return float(np.median(values))


@AggregateRegistry.register("sum")
def window_sum(values: np.ndarray) -> float:
    return float(np.sum(values))


@AggregateRegistry.register("min")
def window_min(values: np.ndarray) -> float:
    return float(np.min(values))


@AggregateRegistry.register("max")
def window_max(values: np.ndarray) -> float:
    return float(np.max(values))


@AggregateRegistry.register("std")
def window_std(values: np.ndarray) -> float:
    """Выборочное стандартное отклонение (ddof=1)."""
    if values.size < 2:
        return np.nan
    return float(np.std(values, ddof=1))


@AggregateRegistry.register("var")
def window_var(values: np.ndarray) -> float:
    """Выборочная дисперсия (ddof=1)."""
    if values.size < 2:
        return np.nan
    return float(np.var(values, ddof=1))


@AggregateRegistry.register("nanmean")
def window_nanmean(values: np.ndarray) -> float:
    """Среднее без учёта пропусков."""
    if not _min_count(values, 1):
        return np.nan
    return float(np.nanmean(values))


@AggregateRegistry.register("nanmedian")
def window_nanmedian(values: np.ndarray) -> float:
    if not _min_count(values, 1):
        return np.nan
    return float(np.nanmedian(values))


@AggregateRegistry.register("nansum")
def window_nansum(values: np.ndarray) -> float:
    """Сумма без учёта пропусков, для окна из одних NaN - NaN."""
    if not _min_count(values, 1):
        return np.nan
    return float(np.nansum(values))


@AggregateRegistry.register("nanmin")
def window_nanmin(values: np.ndarray) -> float:
    if not _min_count(values, 1):
        return np.nan
    return float(np.nanmin(values))


@AggregateRegistry.register("nanmax")
def window_nanmax(values: np.ndarray) -> float:
    if not _min_count(values, 1):
        return np.nan
    return float(np.nanmax(values))


@AggregateRegistry.register("nanstd")
def window_nanstd(values: np.ndarray) -> float:
    if not _min_count(values, 2):
        return np.nan
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", category=RuntimeWarning)
        return float(np.nanstd(values, ddof=1))
