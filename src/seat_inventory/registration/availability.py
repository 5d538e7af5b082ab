"""SeatsAvailability — the seat inventory aggregate."""

from __future__ import annotations

from typing import Iterable, Mapping

from seat_inventory.kernel.ddd.aggregate import EventSourcedAggregate
from seat_inventory.kernel.ddd.domain_event import DomainEvent
from seat_inventory.kernel.errors import UnknownSeatTypeError
from seat_inventory.kernel.types.ids import EntityId, ReservationId, SeatTypeId
from seat_inventory.observability.logging import get_logger
from seat_inventory.registration import decisions
from seat_inventory.registration.events import SEATS_AVAILABILITY_EVENTS
from seat_inventory.registration.state import SeatsAvailabilityState, apply
from seat_inventory.registration.values import SeatQuantity

logger = get_logger(__name__)


class SeatsAvailability(EventSourcedAggregate):
    """Tracks seat capacity per seat type and negotiates reservations against it.

    Commands never touch the ledgers directly: they ask a pure decision
    function for events and raise them through :meth:`add_event`, whose
    handler folds each event into the state with :func:`apply`.

    Example::

        availability = SeatsAvailability(EntityId("conference-1"))
        availability.add_seats(general, 10)
        availability.make_reservation(reservation_id, [SeatQuantity(general, 4)])
        availability.commit_reservation(reservation_id)
    """

    def __init__(self, id: EntityId) -> None:  # noqa: A002
        super().__init__(id)
        self._state = SeatsAvailabilityState()
        for event_type in SEATS_AVAILABILITY_EVENTS:
            self._handles(event_type, self._when)
        self._log = logger.bind(seats_availability_id=str(id))

    def _when(self, event: DomainEvent) -> None:
        self._state = apply(self._state, event)

    def _raise(self, events: list[DomainEvent]) -> list[DomainEvent]:
        for event in events:
            self.add_event(event)
        return events

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_seats(self, seat_type: SeatTypeId, quantity: int) -> list[DomainEvent]:
        """Increase capacity of *seat_type*, creating it if needed."""
        self._log.debug("add_seats", seat_type=str(seat_type), quantity=quantity)
        return self._raise(decisions.decide_add_seats(self._state, seat_type, quantity))

    def remove_seats(self, seat_type: SeatTypeId, quantity: int) -> list[DomainEvent]:
        """Decrease capacity of *seat_type*; unknown seat types are ignored."""
        events = decisions.decide_remove_seats(self._state, seat_type, quantity)
        self._log.debug(
            "remove_seats", seat_type=str(seat_type), quantity=quantity, noop=not events
        )
        return self._raise(events)

    def make_reservation(
        self, reservation_id: ReservationId, seats: Iterable[SeatQuantity]
    ) -> list[DomainEvent]:
        """Create or update the reservation *reservation_id*.

        Raises:
            UnknownSeatTypeError: a requested seat type has no capacity entry.
        """
        seats = list(seats)
        try:
            events = decisions.decide_make_reservation(self._state, reservation_id, seats)
        except UnknownSeatTypeError as exc:
            self._log.warning(
                "make_reservation_rejected",
                reservation_id=str(reservation_id),
                unknown_seat_types=[str(s) for s in exc.seat_types],
            )
            raise
        self._log.debug("make_reservation", reservation_id=str(reservation_id))
        return self._raise(events)

    def commit_reservation(self, reservation_id: ReservationId) -> list[DomainEvent]:
        """Make a pending reservation final; unknown ids are ignored."""
        events = decisions.decide_commit_reservation(self._state, reservation_id)
        self._log.debug("commit_reservation", reservation_id=str(reservation_id), noop=not events)
        return self._raise(events)

    def cancel_reservation(self, reservation_id: ReservationId) -> list[DomainEvent]:
        """Release a pending reservation's seats; unknown ids are ignored."""
        events = decisions.decide_cancel_reservation(self._state, reservation_id)
        self._log.debug("cancel_reservation", reservation_id=str(reservation_id), noop=not events)
        return self._raise(events)

    def expire_reservation(self, reservation_id: ReservationId) -> list[DomainEvent]:
        """Release a reservation whose hold has timed out.

        Same outcome as :meth:`cancel_reservation`; the deadline itself is
        tracked outside the aggregate.
        """
        events = decisions.decide_cancel_reservation(self._state, reservation_id)
        self._log.debug("expire_reservation", reservation_id=str(reservation_id), noop=not events)
        return self._raise(events)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> SeatsAvailabilityState:
        return self._state

    @property
    def remaining_seats(self) -> Mapping[SeatTypeId, int]:
        return self._state.remaining_seats

    @property
    def pending_reservations(self) -> Mapping[ReservationId, tuple[SeatQuantity, ...]]:
        return self._state.pending_reservations


__all__ = ["SeatsAvailability"]
