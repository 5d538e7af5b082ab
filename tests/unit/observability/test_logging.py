"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from seat_inventory.config import InventorySettings
from seat_inventory.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("inventory", seats_availability_id="c-1").info("hello", count=2)

        assert logs == [
            {
                "event": "hello",
                "log_level": "info",
                "seats_availability_id": "c-1",
                "count": 2,
            }
        ]

    def test_without_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger().warning("bare")
        assert logs[0]["event"] == "bare"


class TestJsonLoggerFactory:
    def test_installs_single_root_handler(self) -> None:
        JsonLoggerFactory.configure("debug")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_json_rendering(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO, json=True)

        get_logger("inventory.test").info("seats_added", quantity=5)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "seats_added"
        assert record["quantity"] == 5
        assert record["level"] == "info"
        assert record["logger"] == "inventory.test"
        assert "timestamp" in record

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("WARNING")

        get_logger("inventory.test").info("ignored")

        assert capsys.readouterr().err == ""

    def test_configure_from_settings(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure_from(InventorySettings(log_level="warning", json_logs=False))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        get_logger("inventory.test").warning("seats_low", remaining=1)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        assert "seats_low" in line
        with pytest.raises(json.JSONDecodeError):
            json.loads(line)
