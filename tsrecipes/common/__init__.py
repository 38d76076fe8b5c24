"""
Общие утилиты и исключения для всего проекта.
"""

from tsrecipes.common.exceptions import (
    ConfigurationError,
    DataError,
    ProjectBaseException,
)

__all__ = [
    "ConfigurationError",
    "DataError",
    "ProjectBaseException",
]
