"""Application — seat inventory use cases."""

from seat_inventory.application.registration.expiry import (
    ReservationExpiryTracker,
    TrackedReservation,
)
from seat_inventory.application.registration.repository import SeatsAvailabilityRepository
from seat_inventory.application.registration.service import SeatsAvailabilityService

__all__ = [
    "ReservationExpiryTracker",
    "SeatsAvailabilityRepository",
    "SeatsAvailabilityService",
    "TrackedReservation",
]
