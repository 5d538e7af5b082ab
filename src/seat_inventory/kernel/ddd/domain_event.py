"""Domain events."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from uuid import uuid4


@dataclasses.dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for domain events.

    Subclasses should extend this and add their own payload fields.  The
    ``event_id`` / ``occurred_at`` metadata is keyword-only so payload
    fields may be declared positionally.

    Example::

        @dataclasses.dataclass(frozen=True)
        class SeatsReservationCommitted(DomainEvent):
            reservation_id: ReservationId
    """

    event_id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = dataclasses.field(
        default_factory=lambda: datetime.now(UTC)
    )

    @property
    def event_type(self) -> str:
        return type(self).__name__


__all__ = ["DomainEvent"]
