"""Application registration – SeatsAvailabilityService.

Each use case is one load → decide → save cycle.  When the save loses an
optimistic-concurrency race the whole cycle runs again against the fresh
stream, so decisions are always made on current state.
"""

from __future__ import annotations

from typing import Callable, Iterable

from seat_inventory.application.event_sourcing.store import OptimisticConcurrencyError
from seat_inventory.application.event_sourcing.unit_of_work import EventSourcedUnitOfWork
from seat_inventory.application.registration.repository import SeatsAvailabilityRepository
from seat_inventory.config.inventory import InventorySettings
from seat_inventory.kernel.ddd.domain_event import DomainEvent
from seat_inventory.kernel.types.ids import EntityId, ReservationId, SeatTypeId
from seat_inventory.observability.logging import get_logger
from seat_inventory.registration import SeatQuantity, SeatsAvailability
from seat_inventory.resilience.retry import TenacityRetryPolicy

logger = get_logger(__name__)

Command = Callable[[SeatsAvailability], list[DomainEvent]]


class SeatsAvailabilityService:
    """Async use cases over :class:`SeatsAvailability` aggregates."""

    def __init__(
        self,
        repository: SeatsAvailabilityRepository,
        retry_policy: TenacityRetryPolicy | None = None,
    ) -> None:
        self._repository = repository
        self._retry = retry_policy or TenacityRetryPolicy(
            max_attempts=3, retry_on=(OptimisticConcurrencyError,)
        )

    @classmethod
    def from_settings(
        cls, repository: SeatsAvailabilityRepository, settings: InventorySettings
    ) -> "SeatsAvailabilityService":
        return cls(
            repository,
            TenacityRetryPolicy(
                max_attempts=settings.concurrency_retry_attempts,
                wait_seconds=settings.concurrency_retry_wait_seconds,
                retry_on=(OptimisticConcurrencyError,),
            ),
        )

    async def _run(self, availability_id: EntityId, command: Command) -> list[DomainEvent]:
        async def attempt() -> list[DomainEvent]:
            async with EventSourcedUnitOfWork(self._repository) as uow:
                availability = await uow.load(availability_id)
                return command(availability)

        events = await self._retry.execute_async(attempt)
        logger.info(
            "command_handled",
            seats_availability_id=str(availability_id),
            events=[e.event_type for e in events],
        )
        return events

    async def add_seats(
        self, availability_id: EntityId, seat_type: SeatTypeId, quantity: int
    ) -> list[DomainEvent]:
        return await self._run(availability_id, lambda a: a.add_seats(seat_type, quantity))

    async def remove_seats(
        self, availability_id: EntityId, seat_type: SeatTypeId, quantity: int
    ) -> list[DomainEvent]:
        return await self._run(availability_id, lambda a: a.remove_seats(seat_type, quantity))

    async def make_reservation(
        self,
        availability_id: EntityId,
        reservation_id: ReservationId,
        seats: Iterable[SeatQuantity],
    ) -> list[DomainEvent]:
        seats = list(seats)
        return await self._run(
            availability_id, lambda a: a.make_reservation(reservation_id, seats)
        )

    async def commit_reservation(
        self, availability_id: EntityId, reservation_id: ReservationId
    ) -> list[DomainEvent]:
        return await self._run(availability_id, lambda a: a.commit_reservation(reservation_id))

    async def cancel_reservation(
        self, availability_id: EntityId, reservation_id: ReservationId
    ) -> list[DomainEvent]:
        return await self._run(availability_id, lambda a: a.cancel_reservation(reservation_id))

    async def expire_reservation(
        self, availability_id: EntityId, reservation_id: ReservationId
    ) -> list[DomainEvent]:
        return await self._run(availability_id, lambda a: a.expire_reservation(reservation_id))


__all__ = ["SeatsAvailabilityService"]
