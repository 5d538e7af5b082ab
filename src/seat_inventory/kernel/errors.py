"""Seat inventory error hierarchy.

::

    SeatInventoryError
    ├── DomainError
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   │   └── UnknownSeatTypeError   (also an IndexError)
    │   └── ConflictError
    ├── ApplicationError
    └── InfrastructureError
        └── SerializationError

Not-found conditions (unknown reservation on commit or cancel, unknown seat
type on removal) are not errors; those commands simply raise no event.
"""

from __future__ import annotations

from typing import Any, ClassVar


class SeatInventoryError(Exception):
    """Root of every error this package raises.

    ``code`` is a stable slug for log lines and API payloads; ``detail``
    holds the structured context passed as keyword arguments.  Chain the
    underlying exception with ``raise ... from exc``; :meth:`to_dict`
    reports it under ``cause``.
    """

    code: ClassVar[str] = "seat_inventory_error"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


class DomainError(SeatInventoryError):
    code = "domain_error"


class InvariantViolationError(DomainError):
    """A programming error broke an aggregate's structural rules."""

    code = "invariant_violation"


class ValidationError(DomainError):
    """A command or identifier carried unacceptable input.

    ``errors`` lists one ``{"field", "value"}`` entry per offending value.
    """

    code = "validation_error"

    def __init__(
        self, message: str, *, errors: list[dict[str, Any]] | None = None, **detail: Any
    ) -> None:
        super().__init__(message, **detail)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class UnknownSeatTypeError(ValidationError, IndexError):
    """A reservation asked for seat types the inventory has never offered.

    The whole request is rejected and no event is raised.
    """

    code = "unknown_seat_type"

    def __init__(self, seat_types: list[Any]) -> None:
        names = ", ".join(str(s) for s in seat_types)
        super().__init__(
            f"Unknown seat type(s) requested: {names}",
            errors=[{"field": "seat_type", "value": str(s)} for s in seat_types],
        )
        self.seat_types = list(seat_types)


class ConflictError(DomainError):
    """Another writer changed the aggregate first."""

    code = "conflict"


class ApplicationError(SeatInventoryError):
    code = "application_error"


class InfrastructureError(SeatInventoryError):
    code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """A stored event could not be encoded or decoded."""

    code = "serialization_error"

    def __init__(self, message: str, *, payload_type: str | None = None) -> None:
        super().__init__(message, payload_type=payload_type)
        self.payload_type = payload_type


__all__ = [
    "ApplicationError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InvariantViolationError",
    "SeatInventoryError",
    "SerializationError",
    "UnknownSeatTypeError",
    "ValidationError",
]
