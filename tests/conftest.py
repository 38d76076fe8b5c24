"""Конфигурация pytest и общие fixtures для тестов."""

import tempfile
from pathlib import Path
from typing import Generator

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Создает временную директорию для тестов."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir: Path) -> Path:
    """Создает временную директорию для конфигураций."""
    configs = temp_dir / "configs"
    configs.mkdir(parents=True, exist_ok=True)
    return configs


@pytest.fixture(autouse=True)
def set_test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Устанавливает тестовое окружение."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)


@pytest.fixture
def sample_series_data() -> pd.DataFrame:
    """Небольшой ряд с числовыми и нечисловыми колонками."""
    dates = pd.date_range("2024-01-01", periods=6, freq="1D")
    return pd.DataFrame(
        {
            "date": dates,
            "x": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
            "y": [10, 20, 30, 40, 50, 60],
            "label": ["a", "b", "c", "d", "e", "f"],
        }
    )


@pytest.fixture
def sample_price_data() -> pd.DataFrame:
    """Создать тестовые данные с ценами."""
    dates = pd.date_range("2024-01-01", periods=100, freq="1D")
    np.random.seed(42)

    return pd.DataFrame(
        {
            "close": 100 + np.cumsum(np.random.randn(100) * 0.5),
            "volume": np.random.randint(1000, 10000, 100),
            "feature1": np.random.randn(100),
            "is_holiday": np.random.rand(100) > 0.9,
        },
        index=dates,
    )
