"""Unit tests for config settings, loaders and InventorySettings."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

import pytest

from seat_inventory.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    InventorySettings,
    MissingRequiredSettingError,
    Settings,
)
from seat_inventory.kernel.errors import ApplicationError

_INVENTORY_KEYS = (
    "SEAT_INVENTORY_LOG_LEVEL",
    "SEAT_INVENTORY_JSON_LOGS",
    "SEAT_INVENTORY_RESERVATION_TTL_SECONDS",
    "SEAT_INVENTORY_CONCURRENCY_RETRY_ATTEMPTS",
    "SEAT_INVENTORY_CONCURRENCY_RETRY_WAIT_SECONDS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _INVENTORY_KEYS:
        monkeypatch.delenv(key, raising=False)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


# ---------------------------------------------------------------------------
# InventorySettings
# ---------------------------------------------------------------------------


class TestInventorySettings:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader().load(InventorySettings)
        assert settings.log_level == "INFO"
        assert settings.json_logs is True
        assert settings.reservation_ttl_seconds == 900
        assert settings.concurrency_retry_attempts == 3
        assert settings.concurrency_retry_wait_seconds == 0.05

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEAT_INVENTORY_LOG_LEVEL", "debug")
        monkeypatch.setenv("SEAT_INVENTORY_JSON_LOGS", "no")
        monkeypatch.setenv("SEAT_INVENTORY_RESERVATION_TTL_SECONDS", "60")
        monkeypatch.setenv("SEAT_INVENTORY_CONCURRENCY_RETRY_ATTEMPTS", "5")
        monkeypatch.setenv("SEAT_INVENTORY_CONCURRENCY_RETRY_WAIT_SECONDS", "0.5")

        settings = EnvSettingsLoader().load(InventorySettings)

        assert settings.log_level == "debug"
        assert settings.json_logs is False
        assert settings.reservation_ttl_seconds == 60
        assert settings.concurrency_retry_attempts == 5
        assert settings.concurrency_retry_wait_seconds == 0.5

    def test_non_numeric_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEAT_INVENTORY_RESERVATION_TTL_SECONDS", "soon")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(InventorySettings)
        assert exc_info.value.setting_name == "SEAT_INVENTORY_RESERVATION_TTL_SECONDS"

    def test_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEAT_INVENTORY_LOG_LEVEL", "chatty")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(InventorySettings)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("reservation_ttl_seconds", 0),
            ("concurrency_retry_attempts", 0),
            ("concurrency_retry_wait_seconds", -1.0),
        ],
    )
    def test_out_of_range_values(self, field: str, value: object) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            InventorySettings(**{field: value})
        assert exc_info.value.setting_name == field

    def test_config_errors_are_application_errors(self) -> None:
        with pytest.raises(ApplicationError):
            InventorySettings(reservation_ttl_seconds=-5)


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


class TestLoaders:
    def test_missing_required_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"
        assert isinstance(exc_info.value, ConfigError)

    def test_required_setting_present(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQ_TOKEN", "abc")
        assert EnvSettingsLoader().load(RequiredSettings).token == "abc"

    def test_dotenv_file_is_read(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SEAT_INVENTORY_RESERVATION_TTL_SECONDS=120\n")

        settings = DotenvSettingsLoader(str(env_file), override=True).load(InventorySettings)

        assert settings.reservation_ttl_seconds == 120

    def test_environment_wins_without_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SEAT_INVENTORY_RESERVATION_TTL_SECONDS=120\n")
        monkeypatch.setenv("SEAT_INVENTORY_RESERVATION_TTL_SECONDS", "300")

        settings = DotenvSettingsLoader(str(env_file)).load(InventorySettings)

        assert settings.reservation_ttl_seconds == 300

    def test_dotenv_overrides_environment_when_asked(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SEAT_INVENTORY_RESERVATION_TTL_SECONDS=120\n")
        monkeypatch.setenv("SEAT_INVENTORY_RESERVATION_TTL_SECONDS", "300")

        settings = DotenvSettingsLoader(str(env_file), override=True).load(InventorySettings)

        assert settings.reservation_ttl_seconds == 120
        assert os.environ["SEAT_INVENTORY_RESERVATION_TTL_SECONDS"] == "300"

    def test_dotenv_leaves_process_environment_alone(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SEAT_INVENTORY_LOG_LEVEL=DEBUG\n")

        settings = DotenvSettingsLoader(str(env_file)).load(InventorySettings)

        assert settings.log_level == "DEBUG"
        assert "SEAT_INVENTORY_LOG_LEVEL" not in os.environ

    def test_explicit_mapping_ignores_process_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SEAT_INVENTORY_RESERVATION_TTL_SECONDS", "300")

        settings = EnvSettingsLoader({"SEAT_INVENTORY_JSON_LOGS": "off"}).load(InventorySettings)

        assert settings.json_logs is False
        assert settings.reservation_ttl_seconds == 900

    @pytest.mark.parametrize("raw", ["maybe", "2", ""])
    def test_unrecognised_boolean(self, raw: str) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"SEAT_INVENTORY_JSON_LOGS": raw}).load(InventorySettings)
        assert exc_info.value.setting_name == "SEAT_INVENTORY_JSON_LOGS"
        assert exc_info.value.value == raw
