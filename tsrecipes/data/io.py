"""
Чтение и запись табличных данных (CSV, Parquet).
"""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from tsrecipes.common.exceptions import DataError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".parquet", ".csv")


def _check_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DataError(
            f"Unsupported file format: {suffix or '<none>'}. "
            f"Supported: {', '.join(SUPPORTED_SUFFIXES)}"
        )
    return suffix


def load_table(path: Union[str, Path]) -> pd.DataFrame:
    """
    Загрузить таблицу из файла, формат определяется по расширению.

    Args:
        path: Путь к .parquet или .csv файлу

    Returns:
        DataFrame

    Raises:
        FileNotFoundError: Если файл не найден
        DataError: Если формат не поддерживается
    """
    path = Path(path)
    suffix = _check_suffix(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    logger.info(f"Loading table from {path}")
    if suffix == ".parquet":
        df = pd.read_parquet(path)
    else:
        df = pd.read_csv(path)

    logger.debug(f"Loaded {len(df)} rows, {df.shape[1]} columns")
    return df


def save_table(df: pd.DataFrame, path: Union[str, Path]) -> Path:
    """
    Сохранить таблицу в файл, формат определяется по расширению.

    Args:
        df: Данные
        path: Путь к .parquet или .csv файлу

    Returns:
        Путь к сохранённому файлу

    Raises:
        DataError: Если формат не поддерживается
    """
    path = Path(path)
    suffix = _check_suffix(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".parquet":
        df.to_parquet(path, compression="snappy", index=False)
    else:
        df.to_csv(path, index=False)

    logger.info(f"Saved {len(df)} rows to {path}")
    return path
