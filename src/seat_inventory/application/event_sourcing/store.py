"""Application event sourcing – the append-only event store.

A stream holds the events of one aggregate, numbered ``1..n``.  Writers
append with the version they last read; if someone else appended in the
meantime the write is rejected as a whole and nothing is stored.
"""

from __future__ import annotations

import abc

from seat_inventory.application.event_sourcing.stored_event import StoredEvent
from seat_inventory.kernel.errors import ConflictError, InvariantViolationError


class OptimisticConcurrencyError(ConflictError):
    """The stream moved past the version the writer based its decision on."""

    code = "optimistic_concurrency"

    def __init__(self, stream_id: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Stream {stream_id} is at version {actual}, writer expected {expected}",
            stream_id=stream_id,
            expected=expected,
            actual=actual,
        )
        self.stream_id = stream_id
        self.expected = expected
        self.actual = actual


class EventStore(abc.ABC):
    """Port for durable event streams."""

    @abc.abstractmethod
    async def append(
        self, stream_id: str, events: list[StoredEvent], expected_version: int
    ) -> None:
        """Append *events* if the stream is still at *expected_version*.

        Raises:
            OptimisticConcurrencyError: the stream is at another version.
        """

    @abc.abstractmethod
    async def load(self, stream_id: str, from_version: int = 0) -> list[StoredEvent]:
        """Return the events of *stream_id* numbered above *from_version*, in order."""


class InMemoryEventStore(EventStore):
    """Event store kept in process memory, for tests and single-process runs."""

    def __init__(self) -> None:
        self._streams: dict[str, list[StoredEvent]] = {}

    async def append(
        self, stream_id: str, events: list[StoredEvent], expected_version: int
    ) -> None:
        stream = self._streams.get(stream_id, [])
        if len(stream) != expected_version:
            raise OptimisticConcurrencyError(stream_id, expected_version, len(stream))
        numbers = [e.version for e in events]
        if numbers != list(range(expected_version + 1, expected_version + len(events) + 1)):
            raise InvariantViolationError(
                f"Events for {stream_id} must continue at version {expected_version + 1}",
                versions=numbers,
            )
        self._streams[stream_id] = stream + list(events)

    async def load(self, stream_id: str, from_version: int = 0) -> list[StoredEvent]:
        return self._streams.get(stream_id, [])[from_version:]


__all__ = ["EventStore", "InMemoryEventStore", "OptimisticConcurrencyError"]
