"""Application registration – SeatsAvailabilityRepository."""

from __future__ import annotations

from seat_inventory.application.event_sourcing.codec import JsonEventCodec
from seat_inventory.application.event_sourcing.repository import EventSourcedRepository
from seat_inventory.application.event_sourcing.store import EventStore
from seat_inventory.kernel.ddd.event_bus import EventPublisher
from seat_inventory.kernel.types.ids import EntityId
from seat_inventory.registration import SEATS_AVAILABILITY_EVENTS, SeatsAvailability


class SeatsAvailabilityRepository(EventSourcedRepository[SeatsAvailability]):
    """Event-sourced repository for :class:`SeatsAvailability` streams."""

    def __init__(self, store: EventStore, publisher: EventPublisher | None = None) -> None:
        super().__init__(
            store=store,
            codec=JsonEventCodec(*SEATS_AVAILABILITY_EVENTS),
            publisher=publisher,
        )

    def _aggregate_class(self) -> type[SeatsAvailability]:
        return SeatsAvailability

    def _create_empty(self, agg_id: EntityId) -> SeatsAvailability:
        return SeatsAvailability(agg_id)


__all__ = ["SeatsAvailabilityRepository"]
