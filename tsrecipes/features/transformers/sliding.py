"""Скользящее окно с произвольной агрегирующей функцией."""

import logging
from typing import Callable, Literal, Tuple, get_args

import numpy as np
import numpy.typing as npt
import pandas as pd

from tsrecipes.common.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

Alignment = Literal["center", "left", "right"]
ALIGNMENTS: Tuple[str, ...] = get_args(Alignment)


def validate_period(period: object) -> int:
    """
    Проверить размер окна.

    Args:
        period: Размер окна

    Returns:
        Размер окна

    Raises:
        ConfigurationError: Если period не положительное целое число
    """
    if isinstance(period, bool) or not isinstance(period, (int, np.integer)) or period < 1:
        raise ConfigurationError(
            f"period должен быть положительным целым числом, получено: {period!r}"
        )
    return int(period)


def validate_align(align: object) -> str:
    """
    Проверить тип выравнивания.

    Raises:
        ConfigurationError: Если выравнивание неизвестно
    """
    if align not in ALIGNMENTS:
        raise ConfigurationError(
            f"Неизвестное выравнивание: {align!r}. Доступные: {', '.join(ALIGNMENTS)}"
        )
    return str(align)


def window_bounds(period: int, align: str) -> Tuple[int, int]:
    """
    Количество значений до и после текущей позиции в окне.

    Для center при чётном period лишняя позиция уходит вперёд:
    period=4 даёт окно [i-1, i+2].

    Args:
        period: Размер окна
        align: Выравнивание (center, left, right)

    Returns:
        Кортеж (before, after), before + after == period - 1
    """
    period = validate_period(period)
    align = validate_align(align)

    if align == "right":
        return period - 1, 0
    if align == "left":
        return 0, period - 1

    before = (period - 1) // 2
    return before, period - 1 - before


def slidify_vec(
    values: npt.ArrayLike,
    period: int,
    aggregate: Callable[[np.ndarray], float],
    align: str = "center",
    partial: bool = False,
) -> np.ndarray:
    """
    Применить агрегирующую функцию к скользящему окну.

    Для каждой позиции i окно из period значений заканчивается на i (right),
    начинается с i (left) или примерно центрировано на i (center).
    Результат имеет ту же длину, что и вход.

    Неполные окна у границ ряда:
        - partial=False: в позицию записывается NaN
        - partial=True: агрегат считается по части окна внутри ряда

    Пропуски внутри окна передаются в aggregate как есть, обработка NaN
    остаётся на стороне функции (например, np.nanmean). Каждое окно
    передаётся копией, aggregate может изменять его на месте.

    Args:
        values: Числовой ряд
        period: Размер окна
        aggregate: Функция ndarray -> число
        align: Выравнивание окна
        partial: Считать ли неполные окна

    Returns:
        Массив float той же длины, что и values

    Raises:
        ConfigurationError: Если period, align или aggregate невалидны

    Example:
        >>> slidify_vec([1, 2, 3, 4, 5, 6], 3, np.mean, align="right")
        array([nan, nan,  2.,  3.,  4.,  5.])
    """
    if not callable(aggregate):
        raise ConfigurationError(f"aggregate должен быть функцией, получено: {aggregate!r}")

    before, after = window_bounds(period, align)
    if isinstance(values, pd.Series):
        x = values.to_numpy(dtype=np.float64, na_value=np.nan)
    else:
        x = np.asarray(values, dtype=np.float64)
    if x.ndim != 1:
        raise ConfigurationError(f"Ожидался одномерный ряд, получена размерность {x.ndim}")

    n = x.size
    result = np.full(n, np.nan, dtype=np.float64)

    for i in range(n):
        start = i - before
        stop = i + after + 1
        if start < 0 or stop > n:
            if not partial:
                continue
            start = max(start, 0)
            stop = min(stop, n)

        value = aggregate(x[start:stop].copy())
        if value is not None and not pd.isna(value):
            result[i] = value

    logger.debug(
        "slidify_vec: n=%d, period=%d, align=%s, partial=%s, nan=%d",
        n,
        before + after + 1,
        align,
        partial,
        int(np.isnan(result).sum()),
    )
    return result
