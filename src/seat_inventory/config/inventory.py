"""Config – settings for the seat inventory service."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from seat_inventory.config.settings import Settings
from seat_inventory.config.errors import InvalidSettingValueError


@dataclasses.dataclass
class InventorySettings(Settings):
    """Runtime knobs, read from ``SEAT_INVENTORY_*`` environment variables."""

    _prefix: ClassVar[str] = "SEAT_INVENTORY"

    log_level: str = "INFO"
    json_logs: bool = True
    reservation_ttl_seconds: int = 900
    concurrency_retry_attempts: int = 3
    concurrency_retry_wait_seconds: float = 0.05

    def _validate(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")
        if self.reservation_ttl_seconds <= 0:
            raise InvalidSettingValueError(
                "reservation_ttl_seconds", self.reservation_ttl_seconds, "must be positive"
            )
        if self.concurrency_retry_attempts < 1:
            raise InvalidSettingValueError(
                "concurrency_retry_attempts", self.concurrency_retry_attempts, "must be at least 1"
            )
        if self.concurrency_retry_wait_seconds < 0:
            raise InvalidSettingValueError(
                "concurrency_retry_wait_seconds",
                self.concurrency_retry_wait_seconds,
                "must not be negative",
            )


__all__ = ["InventorySettings"]
