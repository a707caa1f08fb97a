"""Loguru adapter for the structured logger port."""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from lambda_connect.config import DEFAULT_LOGGER_NAME, Settings

HUMAN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<level>{message}</level> | {extra}"
)


class LoguruLogger:
    """``StructuredLogger`` backed by the global loguru logger.

    Fields are bound onto the record, so they end up in ``record["extra"]``
    next to the logger ``name``.
    """

    __slots__ = ("_logger", "name")

    def __init__(self, name: str = DEFAULT_LOGGER_NAME) -> None:
        self.name = name
        self._logger = logger.bind(name=name)

    def debug(self, fields: dict[str, Any], message: str) -> None:
        self._logger.bind(**fields).debug(message)

    def info(self, fields: dict[str, Any], message: str) -> None:
        self._logger.bind(**fields).info(message)

    def warn(self, error_or_fields: BaseException | dict[str, Any], message: str) -> None:
        if isinstance(error_or_fields, BaseException):
            self._logger.opt(exception=error_or_fields).bind(
                error=repr(error_or_fields)
            ).warning(message)
            return
        self._logger.bind(**error_or_fields).warning(message)

    def __repr__(self) -> str:
        return f"LoguruLogger(name={self.name!r})"


def configure_logging(settings: Settings | None = None) -> int:
    """Replace loguru sinks with one stderr sink; return the new sink id."""
    settings = settings or Settings()
    logger.remove()
    if settings.log_serialize:
        return logger.add(sys.stderr, level=settings.log_level, serialize=True)
    return logger.add(sys.stderr, level=settings.log_level, format=HUMAN_FORMAT)


def default_logger(settings: Settings | None = None) -> LoguruLogger:
    settings = settings or Settings()
    return LoguruLogger(settings.logger_name)
