"""
Пользовательские исключения для модулей проекта.
"""


class ProjectBaseException(Exception):
    """Базовое исключение для всех кастомных исключений проекта."""

    pass


class ConfigurationError(ProjectBaseException):
    """Ошибка конфигурации шага или рецепта (обнаруживается до применения)."""

    pass


class DataError(ProjectBaseException):
    """Ошибка данных при применении подготовленного шага."""

    pass
