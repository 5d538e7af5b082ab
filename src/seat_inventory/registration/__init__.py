"""Registration – the seat inventory aggregate, its events and reducer."""

from seat_inventory.registration.availability import SeatsAvailability
from seat_inventory.registration.decisions import (
    decide_add_seats,
    decide_cancel_reservation,
    decide_commit_reservation,
    decide_make_reservation,
    decide_remove_seats,
)
from seat_inventory.registration.events import (
    SEATS_AVAILABILITY_EVENTS,
    AvailableSeatsChanged,
    SeatsAvailabilityEvent,
    SeatsReservationCancelled,
    SeatsReservationCommitted,
    SeatsReserved,
)
from seat_inventory.registration.state import SeatsAvailabilityState, apply
from seat_inventory.registration.values import SeatQuantity

__all__ = [
    "SEATS_AVAILABILITY_EVENTS",
    "AvailableSeatsChanged",
    "SeatQuantity",
    "SeatsAvailability",
    "SeatsAvailabilityEvent",
    "SeatsAvailabilityState",
    "SeatsReservationCancelled",
    "SeatsReservationCommitted",
    "SeatsReserved",
    "apply",
    "decide_add_seats",
    "decide_cancel_reservation",
    "decide_commit_reservation",
    "decide_make_reservation",
    "decide_remove_seats",
]
