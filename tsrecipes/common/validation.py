"""Базовые валидаторы данных."""

from typing import Iterable, List, Mapping

import pandas as pd

from tsrecipes.common.exceptions import ConfigurationError, DataError


def is_numeric_dtype(dtype: object) -> bool:
    """
    Проверить что тип колонки числовой.

    Булевы колонки числовыми не считаются.

    Args:
        dtype: Тип колонки pandas/numpy

    Returns:
        True если тип числовой
    """
    return pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_bool_dtype(dtype)


def check_numeric_columns(schema: Mapping[str, object], columns: Iterable[str]) -> None:
    """
    Проверить что выбранные колонки числовые.

    Args:
        schema: Отображение имя колонки -> тип
        columns: Колонки для проверки

    Raises:
        ConfigurationError: Если хотя бы одна колонка не числовая
    """
    non_numeric = [col for col in columns if not is_numeric_dtype(schema[col])]
    if non_numeric:
        details = ", ".join(f"{col} ({schema[col]})" for col in non_numeric)
        raise ConfigurationError(f"Выбранные колонки должны быть числовыми: {details}")


def check_columns_present(data: pd.DataFrame, columns: Iterable[str]) -> None:
    """
    Проверить что данные содержат все колонки.

    Args:
        data: DataFrame для проверки
        columns: Необходимые колонки

    Raises:
        DataError: Если отсутствуют необходимые колонки
    """
    missing: List[str] = [col for col in columns if col not in data.columns]
    if missing:
        raise DataError(f"Колонки отсутствуют в данных: {missing}")


def check_unique_columns(data: pd.DataFrame, columns: Iterable[str]) -> None:
    """
    Проверить что выбранные колонки встречаются в данных один раз.

    Args:
        data: DataFrame для проверки
        columns: Колонки для проверки

    Raises:
        DataError: Если имя колонки повторяется
    """
    duplicated = set(data.columns[data.columns.duplicated()])
    repeated: List[str] = [col for col in columns if col in duplicated]
    if repeated:
        raise DataError(f"Колонки повторяются в данных: {repeated}")
