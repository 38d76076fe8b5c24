"""Рецепты препроцессинга: шаги с фазами prep и bake."""

from tsrecipes.recipes.base import PreparedRecipe, PreparedStep, Recipe, Step, rand_id
from tsrecipes.recipes.config_parser import (
    RecipeConfig,
    SlidifyStepConfig,
    build_recipe,
    parse_recipe_config,
    validate_recipe_config,
)
from tsrecipes.recipes.selectors import (
    all_numeric,
    all_of,
    contains,
    ends_with,
    matches,
    resolve_columns,
    starts_with,
    where,
)
from tsrecipes.recipes.slidify import PreparedSlidify, StepSlidify, step_slidify

__all__ = [
    "PreparedRecipe",
    "PreparedSlidify",
    "PreparedStep",
    "Recipe",
    "RecipeConfig",
    "SlidifyStepConfig",
    "Step",
    "StepSlidify",
    "all_numeric",
    "all_of",
    "build_recipe",
    "contains",
    "ends_with",
    "matches",
    "parse_recipe_config",
    "rand_id",
    "resolve_columns",
    "starts_with",
    "step_slidify",
    "validate_recipe_config",
    "where",
]
