"""Тесты для чтения и записи таблиц."""

from pathlib import Path

import pandas as pd
import pytest

from tsrecipes.common.exceptions import DataError
from tsrecipes.data.io import load_table, save_table


@pytest.fixture
def table() -> pd.DataFrame:
    return pd.DataFrame({"x": [1.0, 2.0, 3.0], "y": [1, 2, 3], "ticker": ["A", "B", "C"]})


@pytest.mark.parametrize("suffix", [".parquet", ".csv"])
def test_save_and_load(table, temp_dir: Path, suffix):
    """Тест сохранения и загрузки."""
    path = save_table(table, temp_dir / "nested" / f"data{suffix}")

    assert path.exists()
    pd.testing.assert_frame_equal(load_table(path), table)


def test_load_missing_file(temp_dir: Path):
    with pytest.raises(FileNotFoundError):
        load_table(temp_dir / "missing.parquet")


@pytest.mark.parametrize("name", ["data.json", "data"])
def test_unsupported_format(table, temp_dir: Path, name):
    with pytest.raises(DataError):
        save_table(table, temp_dir / name)
    with pytest.raises(DataError):
        load_table(temp_dir / name)
