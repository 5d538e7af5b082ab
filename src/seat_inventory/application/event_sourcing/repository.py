"""Application event sourcing – EventSourcedRepository."""

from __future__ import annotations

import abc
from typing import Any, Callable, Generic, TypeVar

from seat_inventory.application.event_sourcing.codec import JsonEventCodec
from seat_inventory.application.event_sourcing.store import EventStore
from seat_inventory.application.event_sourcing.stored_event import StoredEvent
from seat_inventory.kernel.ddd.aggregate import EventSourcedAggregate
from seat_inventory.kernel.ddd.domain_event import DomainEvent
from seat_inventory.kernel.ddd.event_bus import EventPublisher
from seat_inventory.kernel.types.ids import EntityId
from seat_inventory.observability.logging import get_logger

T = TypeVar("T", bound=EventSourcedAggregate)

logger = get_logger(__name__)

MetadataFactory = Callable[[DomainEvent], dict[str, Any]]


class EventSourcedRepository(abc.ABC, Generic[T]):
    """Loads aggregates by replaying their stream and saves their new events.

    A subclass names the aggregate type and how to build an empty one::

        class SeatsAvailabilityRepository(EventSourcedRepository[SeatsAvailability]):
            def _aggregate_class(self) -> type[SeatsAvailability]:
                return SeatsAvailability

            def _create_empty(self, agg_id: EntityId) -> SeatsAvailability:
                return SeatsAvailability(agg_id)
    """

    def __init__(
        self,
        store: EventStore,
        codec: JsonEventCodec,
        publisher: EventPublisher | None = None,
        metadata_factory: MetadataFactory | None = None,
    ) -> None:
        self._store = store
        self._codec = codec
        self._publisher = publisher
        self._metadata_factory = metadata_factory

    @abc.abstractmethod
    def _aggregate_class(self) -> type[T]: ...

    @abc.abstractmethod
    def _create_empty(self, agg_id: EntityId) -> T: ...

    def _stream_id(self, agg_id: EntityId) -> str:
        return self._aggregate_class().stream_id_for(agg_id)

    async def exists(self, agg_id: EntityId) -> bool:
        return bool(await self._store.load(self._stream_id(agg_id)))

    async def load(self, agg_id: EntityId) -> T:
        """Rebuild the aggregate from its stream; an unknown id gives a fresh one."""
        stream_id = self._stream_id(agg_id)
        stored = await self._store.load(stream_id)
        agg = self._create_empty(agg_id)
        agg.replay(self._codec.decode(e.event_type, e.payload) for e in stored)
        logger.debug("aggregate_loaded", stream_id=stream_id, version=agg.version)
        return agg

    async def save(self, agg: T) -> None:
        """Store the pending events, clear them, then publish them in raise order.

        The stored batch must land at ``agg.version - len(agg.events)``; a
        concurrent writer makes the store raise and nothing is cleared or
        published.
        """
        pending = list(agg.events)
        if not pending:
            return

        stream_id = self._stream_id(agg.id)
        base_version = agg.version - len(pending)
        await self._store.append(
            stream_id,
            [self._to_stored(stream_id, base_version + n, e) for n, e in enumerate(pending, 1)],
            expected_version=base_version,
        )
        agg.clear_events()
        logger.info("events_persisted", stream_id=stream_id, count=len(pending), version=agg.version)

        if self._publisher is not None:
            for event in pending:
                await self._publisher.publish(event)

    def _to_stored(self, stream_id: str, version: int, event: DomainEvent) -> StoredEvent:
        return StoredEvent(
            stream_id=stream_id,
            version=version,
            event_type=event.event_type,
            payload=self._codec.encode(event),
            occurred_at=event.occurred_at,
            metadata=self._metadata_factory(event) if self._metadata_factory else {},
        )


__all__ = ["EventSourcedRepository"]
