"""Модуль трансформации признаков."""

from tsrecipes.features.transformers.sliding import (
    ALIGNMENTS,
    Alignment,
    slidify_vec,
    window_bounds,
)

__all__ = [
    "ALIGNMENTS",
    "Alignment",
    "slidify_vec",
    "window_bounds",
]
