"""Observability – structured logging helpers."""
from seat_inventory.observability.logging.factory import JsonLoggerFactory
from seat_inventory.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
