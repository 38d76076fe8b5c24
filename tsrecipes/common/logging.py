"""Система логирования."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from tsrecipes.common.config import RuntimeSettings

_JSON_FORMAT = (
    "{"
    '"time": "{time:YYYY-MM-DD HH:mm:ss.SSS}", '
    '"level": "{level}", '
    '"message": "{message}", '
    '"file": "{file}", '
    '"line": {line}'
    "}"
)

_TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:"
    "<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    format_type: str = "json",
) -> None:
    """
    Настраивает систему логирования.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        log_file: Путь к файлу логов (опционально)
        rotation: Правило ротации логов
        retention: Правило хранения логов
        format_type: Формат логов (json или text)
    """
    logger.remove()

    log_format = _JSON_FORMAT if format_type == "json" else _TEXT_FORMAT

    logger.add(
        sys.stderr,
        format=log_format,
        level=level,
        colorize=format_type != "json",
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=log_format,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )

    logger.info(f"Логирование настроено: level={level}, format={format_type}")


def setup_logging_from_settings(settings: RuntimeSettings) -> None:
    """Настроить логирование по настройкам окружения."""
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        format_type=settings.log_format,
    )
