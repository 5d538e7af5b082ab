"""Application registration – ReservationExpiryTracker.

The aggregate keeps no deadlines.  This tracker remembers when each
pending reservation was (re)made and, when polled, expires the ones whose
time-to-live has elapsed.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from seat_inventory.application.registration.service import SeatsAvailabilityService
from seat_inventory.config.inventory import InventorySettings
from seat_inventory.kernel.clock import Clock, SystemClock
from seat_inventory.kernel.types.ids import EntityId, ReservationId
from seat_inventory.observability.logging import get_logger

logger = get_logger(__name__)

#: A reservation id is only unique within its seats availability aggregate.
TrackedReservation = tuple[EntityId, ReservationId]


class ReservationExpiryTracker:
    """Expire pending reservations once their hold has outlived *ttl*.

    A deadline is dropped only after its expiry has been saved; when
    ``expire_reservation`` fails the deadline stays and the next
    :meth:`expire_due` call tries again.
    """

    def __init__(
        self,
        service: SeatsAvailabilityService,
        ttl: timedelta,
        clock: Clock | None = None,
    ) -> None:
        self._service = service
        self._ttl = ttl
        self._clock = clock or SystemClock()
        self._deadlines: dict[TrackedReservation, datetime] = {}

    @classmethod
    def from_settings(
        cls,
        service: SeatsAvailabilityService,
        settings: InventorySettings,
        clock: Clock | None = None,
    ) -> ReservationExpiryTracker:
        return cls(service, timedelta(seconds=settings.reservation_ttl_seconds), clock)

    def track(self, availability_id: EntityId, reservation_id: ReservationId) -> datetime:
        """Start (or restart) the countdown for a reservation; return its deadline."""
        expires_at = self._clock.now() + self._ttl
        self._deadlines[(availability_id, reservation_id)] = expires_at
        return expires_at

    def forget(self, availability_id: EntityId, reservation_id: ReservationId) -> None:
        """Stop tracking a reservation that was committed or cancelled."""
        self._deadlines.pop((availability_id, reservation_id), None)

    def deadline_for(
        self, availability_id: EntityId, reservation_id: ReservationId
    ) -> datetime | None:
        return self._deadlines.get((availability_id, reservation_id))

    async def expire_due(self) -> list[TrackedReservation]:
        """Expire every reservation past its deadline and return the expired keys.

        An error from the service propagates; deadlines not yet expired,
        including the failing one, stay tracked.
        """
        now = self._clock.now()
        due = [key for key, expires_at in self._deadlines.items() if expires_at <= now]
        expired: list[TrackedReservation] = []
        for key in due:
            availability_id, reservation_id = key
            await self._service.expire_reservation(availability_id, reservation_id)
            self._deadlines.pop(key, None)
            expired.append(key)
            logger.info(
                "reservation_expired",
                seats_availability_id=str(availability_id),
                reservation_id=str(reservation_id),
            )
        return expired


__all__ = ["ReservationExpiryTracker", "TrackedReservation"]
