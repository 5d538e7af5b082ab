"""Seat inventory domain events.

Each event carries everything needed to replay it without lookups.
``to_payload`` / ``from_payload`` define the persisted shape; the
``event_id`` / ``occurred_at`` metadata travels beside the payload.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Union

from seat_inventory.kernel.ddd.domain_event import DomainEvent
from seat_inventory.kernel.types.ids import ReservationId
from seat_inventory.registration.values import (
    SeatQuantity,
    quantities_from_payload,
    quantities_to_payload,
)


@dataclasses.dataclass(frozen=True)
class AvailableSeatsChanged(DomainEvent):
    """Capacity was added (positive) or removed (negative)."""

    seats: tuple[SeatQuantity, ...]

    def to_payload(self) -> dict[str, Any]:
        return {"seats": quantities_to_payload(self.seats)}

    @classmethod
    def from_payload(cls, payload: dict[str, Any], **metadata: Any) -> "AvailableSeatsChanged":
        return cls(quantities_from_payload(payload["seats"]), **metadata)


@dataclasses.dataclass(frozen=True)
class SeatsReserved(DomainEvent):
    """A reservation now holds ``details``; remaining capacity moved by ``availability_changed``."""

    reservation_id: ReservationId
    details: tuple[SeatQuantity, ...]
    availability_changed: tuple[SeatQuantity, ...]

    def to_payload(self) -> dict[str, Any]:
        return {
            "reservation_id": str(self.reservation_id),
            "details": quantities_to_payload(self.details),
            "availability_changed": quantities_to_payload(self.availability_changed),
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any], **metadata: Any) -> "SeatsReserved":
        return cls(
            ReservationId(payload["reservation_id"]),
            quantities_from_payload(payload["details"]),
            quantities_from_payload(payload["availability_changed"]),
            **metadata,
        )


@dataclasses.dataclass(frozen=True)
class SeatsReservationCommitted(DomainEvent):
    reservation_id: ReservationId

    def to_payload(self) -> dict[str, Any]:
        return {"reservation_id": str(self.reservation_id)}

    @classmethod
    def from_payload(cls, payload: dict[str, Any], **metadata: Any) -> "SeatsReservationCommitted":
        return cls(ReservationId(payload["reservation_id"]), **metadata)


@dataclasses.dataclass(frozen=True)
class SeatsReservationCancelled(DomainEvent):
    """A pending reservation was released; ``availability_changed`` is the capacity returned."""

    reservation_id: ReservationId
    availability_changed: tuple[SeatQuantity, ...]

    def to_payload(self) -> dict[str, Any]:
        return {
            "reservation_id": str(self.reservation_id),
            "availability_changed": quantities_to_payload(self.availability_changed),
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any], **metadata: Any) -> "SeatsReservationCancelled":
        return cls(
            ReservationId(payload["reservation_id"]),
            quantities_from_payload(payload["availability_changed"]),
            **metadata,
        )


SeatsAvailabilityEvent = Union[
    AvailableSeatsChanged,
    SeatsReserved,
    SeatsReservationCommitted,
    SeatsReservationCancelled,
]

SEATS_AVAILABILITY_EVENTS: tuple[type[DomainEvent], ...] = (
    AvailableSeatsChanged,
    SeatsReserved,
    SeatsReservationCommitted,
    SeatsReservationCancelled,
)

__all__ = [
    "SEATS_AVAILABILITY_EVENTS",
    "AvailableSeatsChanged",
    "SeatsAvailabilityEvent",
    "SeatsReservationCancelled",
    "SeatsReservationCommitted",
    "SeatsReserved",
]
