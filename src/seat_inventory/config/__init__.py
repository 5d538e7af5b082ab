"""Config – 12-factor settings for the seat inventory service."""

from seat_inventory.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from seat_inventory.config.inventory import InventorySettings
from seat_inventory.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "InventorySettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
