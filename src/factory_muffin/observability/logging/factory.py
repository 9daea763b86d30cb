"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

# faker logs every locale and provider lookup at DEBUG
FAKER_LOGGER = "faker"


class JsonLoggerFactory:
    """Route engine events through stdlib :mod:`logging`, rendered by structlog.

    ``json=False`` swaps the JSON renderer for structlog's console renderer,
    which reads better in pytest's captured output.  *faker_level* caps the
    faker package's own logger so a DEBUG run shows engine events only.
    """

    @staticmethod
    def configure(
        level: int | str = logging.INFO,
        *,
        json: bool = True,
        faker_level: int | str = logging.WARNING,
    ) -> None:
        root_level, faker_level = _level(level), _level(faker_level)
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
        )
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler()
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(root_level)
        logging.getLogger(FAKER_LOGGER).setLevel(faker_level)


def _level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def configure_logging(
    level: int | str = logging.INFO,
    *,
    json: bool = True,
    faker_level: int | str = logging.WARNING,
) -> None:
    """Shortcut for :meth:`JsonLoggerFactory.configure`."""
    JsonLoggerFactory.configure(level, json=json, faker_level=faker_level)


__all__ = ["FAKER_LOGGER", "JsonLoggerFactory", "configure_logging"]
