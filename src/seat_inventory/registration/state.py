"""Seats availability state and its reducer.

:func:`apply` is the only code that turns events into state.  Live
commands and replay from history both go through it, which is what makes
replay reproduce the original state exactly.
"""

from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Mapping

from seat_inventory.kernel.ddd.domain_event import DomainEvent
from seat_inventory.kernel.types.ids import ReservationId, SeatTypeId
from seat_inventory.registration.events import (
    AvailableSeatsChanged,
    SeatsReservationCancelled,
    SeatsReservationCommitted,
    SeatsReserved,
)
from seat_inventory.registration.values import SeatQuantity


def _frozen(mapping: dict) -> Mapping:  # type: ignore[type-arg]
    return MappingProxyType(mapping)


@dataclasses.dataclass(frozen=True)
class SeatsAvailabilityState:
    """Immutable snapshot of the remaining-capacity and pending-reservation ledgers."""

    remaining_seats: Mapping[SeatTypeId, int] = dataclasses.field(
        default_factory=lambda: _frozen({})
    )
    pending_reservations: Mapping[ReservationId, tuple[SeatQuantity, ...]] = dataclasses.field(
        default_factory=lambda: _frozen({})
    )

    def held_by(self, reservation_id: ReservationId) -> dict[SeatTypeId, int]:
        """Seats currently held by *reservation_id*, keyed by seat type."""
        held: dict[SeatTypeId, int] = {}
        for seat in self.pending_reservations.get(reservation_id, ()):
            held[seat.seat_type] = held.get(seat.seat_type, 0) + seat.quantity
        return held


def _add_to_remaining(
    remaining: Mapping[SeatTypeId, int], changes: tuple[SeatQuantity, ...]
) -> Mapping[SeatTypeId, int]:
    updated = dict(remaining)
    for change in changes:
        updated[change.seat_type] = updated.get(change.seat_type, 0) + change.quantity
    return _frozen(updated)


def apply(state: SeatsAvailabilityState, event: DomainEvent) -> SeatsAvailabilityState:
    """Return the state that results from applying *event* to *state*."""
    if isinstance(event, AvailableSeatsChanged):
        return dataclasses.replace(
            state, remaining_seats=_add_to_remaining(state.remaining_seats, event.seats)
        )

    if isinstance(event, SeatsReserved):
        pending = dict(state.pending_reservations)
        pending[event.reservation_id] = event.details
        return SeatsAvailabilityState(
            remaining_seats=_add_to_remaining(state.remaining_seats, event.availability_changed),
            pending_reservations=_frozen(pending),
        )

    if isinstance(event, SeatsReservationCommitted):
        pending = dict(state.pending_reservations)
        pending.pop(event.reservation_id, None)
        return dataclasses.replace(state, pending_reservations=_frozen(pending))

    if isinstance(event, SeatsReservationCancelled):
        pending = dict(state.pending_reservations)
        pending.pop(event.reservation_id, None)
        return SeatsAvailabilityState(
            remaining_seats=_add_to_remaining(state.remaining_seats, event.availability_changed),
            pending_reservations=_frozen(pending),
        )

    raise TypeError(f"SeatsAvailability cannot apply {type(event).__name__}")


__all__ = ["SeatsAvailabilityState", "apply"]
