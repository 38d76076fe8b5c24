"""Тесты для рецепта и базовых шагов."""

import re

import numpy as np
import pandas as pd
import pytest

from tsrecipes.common.exceptions import ConfigurationError, DataError
from tsrecipes.recipes.base import PreparedRecipe, Recipe, Step, rand_id
from tsrecipes.recipes.selectors import starts_with
from tsrecipes.recipes.slidify import step_slidify


def test_rand_id_format():
    """Тест формата идентификатора."""
    step_id = rand_id("slidify")
    assert re.fullmatch(r"slidify_[A-Za-z0-9]{5}", step_id)


def test_step_is_abstract():
    """Тест что базовый шаг нельзя создать."""
    with pytest.raises(TypeError):
        Step()


class TestRecipe:
    """Тесты для Recipe."""

    def test_add_step_returns_new_recipe(self):
        recipe = Recipe()
        extended = recipe.add_step(step_slidify("x", period=3, aggregate=np.mean))

        assert len(recipe) == 0
        assert len(extended) == 1

    def test_add_invalid_step(self):
        with pytest.raises(ConfigurationError):
            Recipe().add_step("not a step")

    def test_steps_see_previous_columns(self, sample_series_data):
        """Следующий шаг видит колонки, добавленные предыдущим."""
        recipe = (
            Recipe()
            .add_step(step_slidify("x", period=2, aggregate=np.mean, align="right", names=["x_ma2"]))
            .add_step(step_slidify(starts_with("x_"), period=2, aggregate=np.max, align="right", names=["x_ma2_max"]))
        )
        prepared = recipe.prep(sample_series_data)
        baked = prepared.bake(sample_series_data)

        assert prepared.steps[1].columns == ("x_ma2",)
        np.testing.assert_allclose(baked["x_ma2"], [1, 1.5, 2.5, 3.5, 4.5, 5.5])
        np.testing.assert_allclose(baked["x_ma2_max"], [1, 1.5, 2.5, 3.5, 4.5, 5.5])

    def test_prep_errors_propagate(self, sample_series_data):
        recipe = Recipe().add_step(step_slidify("label", period=2, aggregate=np.mean))
        with pytest.raises(ConfigurationError):
            recipe.prep(sample_series_data)

    def test_empty_recipe(self, sample_series_data):
        prepared = Recipe().prep(sample_series_data)
        pd.testing.assert_frame_equal(prepared.bake(sample_series_data), sample_series_data)

    def test_tidy(self):
        recipe = Recipe().add_step(step_slidify("x", period=3, aggregate=np.mean, id="a"))
        tidy = recipe.tidy()

        assert tidy.to_dict("records") == [
            {"number": 1, "operation": "slidify", "trained": False, "skip": False, "id": "a"}
        ]


class TestPreparedRecipe:
    """Тесты для PreparedRecipe."""

    @pytest.fixture
    def prepared(self, sample_series_data) -> PreparedRecipe:
        recipe = (
            Recipe()
            .add_step(step_slidify("x", period=3, aggregate=np.mean, align="right", id="first"))
            .add_step(step_slidify("y", period=2, aggregate=np.sum, align="right", skip=True, id="second"))
        )
        return recipe.prep(sample_series_data)

    def test_skip_applied_only_on_training(self, prepared, sample_series_data):
        """Шаги с skip=True не применяются к новым данным."""
        juiced = prepared.juice()
        baked = prepared.bake(sample_series_data)

        np.testing.assert_allclose(juiced["y"], [10, 30, 50, 70, 90, 110])
        pd.testing.assert_series_equal(baked["y"], sample_series_data["y"])
        np.testing.assert_allclose(baked["x"], [1, 1.5, 2, 3, 4, 5])

    def test_juice_returns_copy(self, prepared):
        juiced = prepared.juice()
        juiced["x"] = 0.0
        assert not (prepared.juice()["x"] == 0.0).all()

    def test_bake_schema_drift(self, prepared, sample_series_data):
        with pytest.raises(DataError):
            prepared.bake(sample_series_data.drop(columns=["x"]))

    def test_tidy_summary(self, prepared):
        tidy = prepared.tidy()

        assert tidy["number"].tolist() == [1, 2]
        assert tidy["trained"].tolist() == [True, True]
        assert tidy["skip"].tolist() == [False, True]
        assert tidy["id"].tolist() == ["first", "second"]

    def test_tidy_step(self, prepared):
        tidy = prepared.tidy(2)
        assert tidy["terms"].tolist() == ["y"]
        assert tidy["period"].tolist() == [2]

    @pytest.mark.parametrize("number", [0, 3])
    def test_tidy_invalid_number(self, prepared, number):
        with pytest.raises(ConfigurationError):
            prepared.tidy(number)
