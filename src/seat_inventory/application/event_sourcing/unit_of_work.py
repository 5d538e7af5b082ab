"""Application event sourcing – EventSourcedUnitOfWork."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from seat_inventory.application.event_sourcing.repository import EventSourcedRepository
from seat_inventory.kernel.ddd.aggregate import EventSourcedAggregate
from seat_inventory.kernel.types.ids import EntityId

T = TypeVar("T", bound=EventSourcedAggregate)


class EventSourcedUnitOfWork(Generic[T]):
    """Tracks the aggregates loaded in one transaction and saves them together.

    Leaving the ``async with`` block normally commits; an exception rolls
    back, discarding pending events, and propagates.

    Example::

        async with EventSourcedUnitOfWork(repository) as uow:
            availability = await uow.load(conference_id)
            availability.add_seats(general, 10)
    """

    def __init__(self, repository: EventSourcedRepository[T]) -> None:
        self._repository = repository
        self._tracked: dict[EntityId, T] = {}

    async def __aenter__(self) -> EventSourcedUnitOfWork[T]:
        return self

    async def __aexit__(self, exc_type: type[BaseException] | None, exc: Any, tb: Any) -> None:
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()

    async def load(self, agg_id: EntityId) -> T:
        """Return the tracked aggregate for *agg_id*, loading it on first use."""
        agg = self._tracked.get(agg_id)
        if agg is None:
            agg = await self._repository.load(agg_id)
            self._tracked[agg_id] = agg
        return agg

    @property
    def tracked(self) -> list[T]:
        return list(self._tracked.values())

    async def commit(self) -> None:
        for agg in self._tracked.values():
            await self._repository.save(agg)
        self._tracked.clear()

    async def rollback(self) -> None:
        for agg in self._tracked.values():
            agg.clear_events()
        self._tracked.clear()


__all__ = ["EventSourcedUnitOfWork"]
