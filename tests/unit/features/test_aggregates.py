"""Тесты для реестра агрегатов."""

import functools
import warnings

import numpy as np
import pytest

from tsrecipes.common.exceptions import ConfigurationError
from tsrecipes.features.aggregates import (
    AggregateRegistry,
    describe_aggregate,
    resolve_aggregate,
    window_mean,
)


@pytest.fixture
def clean_registry():
    """Сохранить и восстановить реестр."""
    saved = AggregateRegistry._aggregates.copy()
    yield
    AggregateRegistry._aggregates = saved


def test_builtin_aggregates_registered():
    """Тест что встроенные агрегаты зарегистрированы."""
    expected = {
        "mean",
        "median",
        "sum",
        "min",
        "max",
        "std",
        "var",
        "nanmean",
        "nanmedian",
        "nansum",
        "nanmin",
        "nanmax",
        "nanstd",
    }
    assert expected <= set(AggregateRegistry.list_all())


def test_list_all_sorted():
    """Тест что список отсортирован."""
    names = AggregateRegistry.list_all()
    assert names == sorted(names)


def test_register_custom(clean_registry):
    """Тест регистрации собственного агрегата."""

    @AggregateRegistry.register("Range")
    def value_range(values):
        return float(values.max() - values.min())

    assert AggregateRegistry.is_registered("range")
    assert AggregateRegistry.get("RANGE") is value_range


def test_get_unknown():
    """Тест получения неизвестного агрегата."""
    with pytest.raises(ConfigurationError, match="Доступные"):
        AggregateRegistry.get("nonexistent")


def test_resolve_aggregate():
    """Тест получения функции по имени или функции."""
    assert resolve_aggregate("mean") is window_mean
    assert resolve_aggregate(np.max) is np.max

    with pytest.raises(ConfigurationError):
        resolve_aggregate(42)


class TestBuiltinAggregates:
    """Тесты значений встроенных агрегатов."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("mean", 2.5),
            ("median", 2.5),
            ("sum", 10.0),
            ("min", 1.0),
            ("max", 4.0),
            ("std", np.std([1, 2, 3, 4], ddof=1)),
            ("var", np.var([1, 2, 3, 4], ddof=1)),
        ],
    )
    def test_values(self, name, expected):
        """Тест значений без пропусков."""
        result = AggregateRegistry.get(name)(np.array([1.0, 2.0, 3.0, 4.0]))
        assert result == pytest.approx(expected)

    @pytest.mark.parametrize("name", ["mean", "median", "sum", "min", "max", "std", "var"])
    def test_nan_propagates(self, name):
        """NaN распространяется в обычных агрегатах."""
        result = AggregateRegistry.get(name)(np.array([1.0, np.nan, 3.0]))
        assert np.isnan(result)

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("nanmean", 2.0),
            ("nanmedian", 2.0),
            ("nansum", 4.0),
            ("nanmin", 1.0),
            ("nanmax", 3.0),
            ("nanstd", np.std([1, 3], ddof=1)),
        ],
    )
    def test_nan_skipped(self, name, expected):
        """nan-агрегаты пропускают NaN."""
        result = AggregateRegistry.get(name)(np.array([1.0, np.nan, 3.0]))
        assert result == pytest.approx(expected)

    @pytest.mark.parametrize(
        "name", ["nanmean", "nanmedian", "nansum", "nanmin", "nanmax", "nanstd"]
    )
    def test_all_missing_window(self, name):
        """Окно из одних NaN даёт NaN без предупреждений."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = AggregateRegistry.get(name)(np.array([np.nan, np.nan]))
        assert np.isnan(result)

    @pytest.mark.parametrize("name", ["std", "var", "nanstd"])
    def test_single_value_dispersion(self, name):
        """Для одного значения дисперсия не определена."""
        assert np.isnan(AggregateRegistry.get(name)(np.array([5.0])))


class TestDescribeAggregate:
    """Тесты текстовой метки агрегата."""

    def test_string(self):
        assert describe_aggregate("MEAN") == "mean"

    def test_named_function(self):
        assert describe_aggregate(np.nanmean) == "nanmean"
        assert describe_aggregate(window_mean) == "window_mean"

    def test_partial(self):
        label = describe_aggregate(functools.partial(np.quantile, q=0.9))
        assert label == "partial(quantile, q=0.9)"

    def test_lambda(self):
        """Для lambda берётся текст выражения."""
        label = describe_aggregate(lambda values: values.mean())
        assert label == "lambda values: values.mean()"

    def test_lambda_with_trailing_comment(self):
        aggregate = lambda w: np.nanmax(w) - np.nanmin(w)  # noqa: E731  размах
        assert describe_aggregate(aggregate) == "lambda w: np.nanmax(w) - np.nanmin(w)"

    def test_callable_object(self):
        """Для объекта без __name__ берётся имя класса."""

        class Quantile:
            def __call__(self, values):
                return float(np.quantile(values, 0.9))

        assert describe_aggregate(Quantile()) == "Quantile"
