"""Модуль генерации признаков."""

from tsrecipes.features.aggregates import (
    AggregateRegistry,
    describe_aggregate,
    resolve_aggregate,
)
from tsrecipes.features.transformers import slidify_vec, window_bounds

__all__ = [
    "AggregateRegistry",
    "describe_aggregate",
    "resolve_aggregate",
    "slidify_vec",
    "window_bounds",
]
