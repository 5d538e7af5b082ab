"""Application — Event Sourcing."""

from seat_inventory.application.event_sourcing.codec import JsonEventCodec
from seat_inventory.application.event_sourcing.repository import EventSourcedRepository
from seat_inventory.application.event_sourcing.store import (
    EventStore,
    InMemoryEventStore,
    OptimisticConcurrencyError,
)
from seat_inventory.application.event_sourcing.stored_event import StoredEvent
from seat_inventory.application.event_sourcing.unit_of_work import EventSourcedUnitOfWork

__all__ = [
    "EventSourcedRepository",
    "EventSourcedUnitOfWork",
    "EventStore",
    "InMemoryEventStore",
    "JsonEventCodec",
    "OptimisticConcurrencyError",
    "StoredEvent",
]
