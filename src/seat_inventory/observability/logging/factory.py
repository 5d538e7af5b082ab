"""Observability – JsonLoggerFactory.

Routes structlog through the stdlib root logger so library log records and
seat inventory events share one handler and one output format.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from seat_inventory.config.inventory import InventorySettings

_CONTEXT_PROCESSORS: tuple[Any, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
)


class JsonLoggerFactory:
    """Process-wide logging setup; call once at startup."""

    @classmethod
    def configure_from(cls, settings: InventorySettings) -> None:
        """Apply ``log_level`` and ``json_logs`` from *settings*."""
        cls.configure(settings.log_level, json=settings.json_logs)

    @staticmethod
    def configure(level: int | str = logging.INFO, json: bool = True) -> None:
        """Replace the root handlers with one stderr handler rendering at *level*.

        ``json=False`` switches to structlog's console renderer for local runs.
        """
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())

        structlog.configure(
            processors=[
                *_CONTEXT_PROCESSORS,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
        )
        handler = logging.StreamHandler()
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )
        root = logging.getLogger()
        root.handlers = [handler]
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
