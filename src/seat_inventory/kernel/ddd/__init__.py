"""DDD building blocks for event-sourced aggregates."""

from seat_inventory.kernel.ddd.aggregate import AggregateRoot, EventSourcedAggregate
from seat_inventory.kernel.ddd.domain_event import DomainEvent
from seat_inventory.kernel.ddd.entity import Entity
from seat_inventory.kernel.ddd.event_bus import EventPublisher, Handler, InProcessEventBus
from seat_inventory.kernel.ddd.value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "Entity",
    "EventPublisher",
    "EventSourcedAggregate",
    "Handler",
    "InProcessEventBus",
    "ValueObject",
]
