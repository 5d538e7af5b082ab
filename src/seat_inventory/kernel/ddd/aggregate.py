"""AggregateRoot — owns domain events and dispatches them to apply-handlers."""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from seat_inventory.kernel.ddd.domain_event import DomainEvent
from seat_inventory.kernel.ddd.entity import Entity
from seat_inventory.kernel.errors import InvariantViolationError
from seat_inventory.kernel.types.ids import EntityId

E = TypeVar("E", bound=DomainEvent)


class AggregateRoot(Entity):
    """Aggregate root: records domain events and mutates state through them.

    Every state change goes through :meth:`add_event`: the event is appended
    to the pending list and the handler registered for its concrete type (if
    any) is invoked synchronously.  Events without a handler are recorded
    but leave state untouched.
    """

    _version: int
    _events: list[DomainEvent]

    def __init__(self, id: EntityId) -> None:  # noqa: A002
        super().__init__(id)
        self._version = 0
        self._events = []
        self._handlers: dict[type[DomainEvent], Callable[[Any], None]] = {}

    def add_event(self, event: DomainEvent) -> None:
        """Record *event*, bump the version and apply it."""
        self._events.append(event)
        self._version += 1
        handler = self._handlers.get(type(event))
        if handler is not None:
            handler(event)

    def clear_events(self) -> None:
        """Drop pending events (called once they have been persisted)."""
        self._events.clear()

    def _handles(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        """Register the single apply-handler for *event_type*."""
        if event_type in self._handlers:
            raise InvariantViolationError(
                f"{type(self).__name__} already handles {event_type.__name__}"
            )
        self._handlers[event_type] = handler

    @property
    def events(self) -> tuple[DomainEvent, ...]:
        """Events raised since the last :meth:`clear_events`."""
        return tuple(self._events)

    @property
    def version(self) -> int:
        return self._version


class EventSourcedAggregate(AggregateRoot):
    """Aggregate root that reconstructs its state by replaying its events.

    Replay is plain :meth:`add_event` in original raise order, so the
    handlers used for live commands are the same ones used for
    reconstitution.

    Example::

        class Hall(EventSourcedAggregate):
            def __init__(self, id: EntityId) -> None:
                super().__init__(id)
                self.capacity = 0
                self._handles(AvailableSeatsChanged, self._on_changed)

            def _on_changed(self, event: AvailableSeatsChanged) -> None:
                self.capacity += sum(q.quantity for q in event.seats)
    """

    def replay(self, history: Iterable[DomainEvent]) -> None:
        """Apply historical events; they are not left pending."""
        for event in history:
            self.add_event(event)
        self.clear_events()

    @classmethod
    def stream_prefix(cls) -> str:
        """First part of every stream id for this aggregate type; the class name by default."""
        return cls.__name__

    @classmethod
    def stream_id_for(cls, agg_id: EntityId) -> str:
        """Build the canonical stream id: ``"<Prefix>-<id>"``."""
        return f"{cls.stream_prefix()}-{agg_id}"


__all__ = ["AggregateRoot", "EventSourcedAggregate"]
