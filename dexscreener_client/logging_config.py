"""Настройка loguru для приложений, использующих клиент."""

from __future__ import annotations

import sys

from loguru import logger


def setup_logging(json: bool = False, level: str = "INFO") -> int:
    """Заменяет sink-и loguru одним stdout sink-ом и возвращает его id.

    Библиотека сама sink-и не трогает: вызывать из точки входа приложения.
    """

    logger.remove()
    if json:
        return logger.add(sys.stdout, level=level, serialize=True, backtrace=False)
    return logger.add(
        sys.stdout,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}",
        level=level,
        colorize=True,
        backtrace=False,
    )


__all__ = ["setup_logging"]
