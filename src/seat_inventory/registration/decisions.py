"""Pure decision functions for the seats availability aggregate.

Each function inspects a :class:`SeatsAvailabilityState` and returns the
events a command should raise.  Nothing here mutates state; an empty list
means the command is a no-op.
"""

from __future__ import annotations

from typing import Iterable

from seat_inventory.kernel.ddd.domain_event import DomainEvent
from seat_inventory.kernel.errors import UnknownSeatTypeError
from seat_inventory.kernel.types.ids import ReservationId, SeatTypeId
from seat_inventory.registration.events import (
    AvailableSeatsChanged,
    SeatsReservationCancelled,
    SeatsReservationCommitted,
    SeatsReserved,
)
from seat_inventory.registration.state import SeatsAvailabilityState
from seat_inventory.registration.values import SeatQuantity


def decide_add_seats(
    state: SeatsAvailabilityState, seat_type: SeatTypeId, quantity: int
) -> list[DomainEvent]:
    return [AvailableSeatsChanged((SeatQuantity(seat_type, quantity),))]


def decide_remove_seats(
    state: SeatsAvailabilityState, seat_type: SeatTypeId, quantity: int
) -> list[DomainEvent]:
    if seat_type not in state.remaining_seats:
        return []
    return [AvailableSeatsChanged((SeatQuantity(seat_type, -quantity),))]


def decide_make_reservation(
    state: SeatsAvailabilityState,
    reservation_id: ReservationId,
    seats: Iterable[SeatQuantity],
) -> list[DomainEvent]:
    """Negotiate *seats* for *reservation_id* against remaining capacity.

    Each seat type is granted ``min(wanted, max(remaining, 0) + held)``
    where ``held`` is what this reservation already holds of that type, so
    an update can grow or shrink without releasing its hold first.  Seat
    types held before but missing from the new request are released.

    Raises:
        UnknownSeatTypeError: a requested seat type was never added.  No
            event is raised in that case.
    """
    wanted: dict[SeatTypeId, int] = {}
    for seat in seats:
        wanted[seat.seat_type] = wanted.get(seat.seat_type, 0) + seat.quantity

    unknown = [seat_type for seat_type in wanted if seat_type not in state.remaining_seats]
    if unknown:
        raise UnknownSeatTypeError(unknown)

    held = state.held_by(reservation_id)
    for seat_type in held:
        wanted.setdefault(seat_type, 0)

    reserved: list[SeatQuantity] = []
    availability_changed: list[SeatQuantity] = []
    for seat_type, quantity in wanted.items():
        pending = held.get(seat_type, 0)
        remaining = state.remaining_seats.get(seat_type, 0)
        actual = min(quantity, max(remaining, 0) + pending)
        difference = actual - pending
        if actual != 0:
            reserved.append(SeatQuantity(seat_type, actual))
        if difference != 0:
            availability_changed.append(SeatQuantity(seat_type, -difference))

    return [SeatsReserved(reservation_id, tuple(reserved), tuple(availability_changed))]


def decide_commit_reservation(
    state: SeatsAvailabilityState, reservation_id: ReservationId
) -> list[DomainEvent]:
    if reservation_id not in state.pending_reservations:
        return []
    return [SeatsReservationCommitted(reservation_id)]


def decide_cancel_reservation(
    state: SeatsAvailabilityState, reservation_id: ReservationId
) -> list[DomainEvent]:
    if reservation_id not in state.pending_reservations:
        return []
    return [
        SeatsReservationCancelled(
            reservation_id, tuple(state.pending_reservations[reservation_id])
        )
    ]


__all__ = [
    "decide_add_seats",
    "decide_cancel_reservation",
    "decide_commit_reservation",
    "decide_make_reservation",
    "decide_remove_seats",
]
