"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import pytest

from seat_inventory.kernel.errors import (
    ConflictError,
    DomainError,
    SeatInventoryError,
    SerializationError,
    UnknownSeatTypeError,
    ValidationError,
)
from seat_inventory.kernel.types import SeatTypeId


class TestSeatInventoryError:
    def test_code_and_message(self) -> None:
        err = DomainError("broken")
        assert err.code == "domain_error"
        assert err.message == "broken"
        assert str(err) == "broken"

    def test_detail_from_keywords(self) -> None:
        err = ConflictError("stale", stream_id="s-1")
        assert err.to_dict() == {"code": "conflict", "message": "stale", "detail": {"stream_id": "s-1"}}

    def test_every_error_shares_the_root(self) -> None:
        assert issubclass(SerializationError, SeatInventoryError)
        assert issubclass(UnknownSeatTypeError, SeatInventoryError)

    def test_chained_cause_is_reported(self) -> None:
        cause = ValueError("bad")
        try:
            raise SerializationError("decode failed", payload_type="SeatsReserved") from cause
        except SerializationError as err:
            payload = err.to_dict()
        assert payload["cause"] == repr(cause)
        assert payload["detail"] == {"payload_type": "SeatsReserved"}


class TestUnknownSeatTypeError:
    def test_is_validation_and_index_error(self) -> None:
        err = UnknownSeatTypeError([SeatTypeId("vip")])
        assert isinstance(err, ValidationError)
        assert isinstance(err, IndexError)

    def test_lists_every_seat_type(self) -> None:
        err = UnknownSeatTypeError([SeatTypeId("vip"), SeatTypeId("box")])
        assert err.seat_types == [SeatTypeId("vip"), SeatTypeId("box")]
        assert "vip" in err.message and "box" in err.message
        assert [e["value"] for e in err.to_dict()["errors"]] == ["vip", "box"]

    def test_can_be_caught_as_index_error(self) -> None:
        with pytest.raises(IndexError):
            raise UnknownSeatTypeError([SeatTypeId("vip")])
