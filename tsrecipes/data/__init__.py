"""Модуль работы с данными."""

from tsrecipes.data.io import load_table, save_table

__all__ = ["load_table", "save_table"]
