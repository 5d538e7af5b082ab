"""Config errors – raised while reading ``SEAT_INVENTORY_*`` settings."""
from __future__ import annotations

from seat_inventory.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be built; the service should refuse to start."""

    code = "config_error"


class MissingRequiredSettingError(ConfigError):
    code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable {setting_name} is required and has no default",
            setting=setting_name,
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting parsed, or failed to parse, into an unusable value.

    ``setting_name`` is the environment variable when the raw string was
    rejected, or the field name when a parsed value failed validation.
    """

    code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            setting=setting_name,
            reason=reason,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
