"""Система управления конфигурациями."""

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from tsrecipes.common.exceptions import ConfigurationError


class Config(BaseModel):
    """Базовый класс конфигурации."""

    pass


class RuntimeSettings(Config):
    """Настройки окружения для CLI и логирования."""

    log_level: str = Field("INFO", description="Уровень логирования")
    log_format: Literal["json", "text"] = Field("text", description="Формат логов")
    log_file: Optional[Path] = Field(None, description="Файл логов")

    @classmethod
    def from_env(cls) -> "RuntimeSettings":
        """
        Собрать настройки из переменных окружения.

        Используются LOG_LEVEL, LOG_FORMAT и LOG_FILE.

        Returns:
            Настройки окружения
        """
        values: Dict[str, Any] = {}
        if os.getenv("LOG_LEVEL"):
            values["log_level"] = os.environ["LOG_LEVEL"].upper()
        if os.getenv("LOG_FORMAT"):
            values["log_format"] = os.environ["LOG_FORMAT"].lower()
        if os.getenv("LOG_FILE"):
            values["log_file"] = Path(os.environ["LOG_FILE"])
        return cls(**values)


def load_env() -> None:
    """Загружает переменные окружения из .env файла."""
    load_dotenv()


def load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """
    Загружает YAML конфигурацию из файла.

    Args:
        config_path: Путь к YAML файлу

    Returns:
        Словарь с конфигурацией

    Raises:
        FileNotFoundError: Если файл не найден
        yaml.YAMLError: Если файл содержит невалидный YAML
        ConfigurationError: Если корень документа не является словарём
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Конфигурационный файл не найден: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Ожидался словарь в корне {config_path}, получено: {type(config).__name__}"
        )
    return config

