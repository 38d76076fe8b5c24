"""Внешние интерфейсы проекта."""
