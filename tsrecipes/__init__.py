"""Рецепты признаков скользящего окна для временных рядов."""

__version__ = "0.1.0"
