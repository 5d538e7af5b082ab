"""Application event sourcing – StoredEvent."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any


@dataclasses.dataclass(frozen=True)
class StoredEvent:
    """One encoded domain event at a fixed position of a stream.

    ``stream_id`` is ``"<Aggregate>-<id>"`` and ``version`` the 1-based
    position within it.  ``event_type`` is the domain event's class name,
    which the codec needs to decode ``payload``.
    """

    stream_id: str
    version: int
    event_type: str
    payload: bytes
    occurred_at: datetime
    metadata: dict[str, Any] = dataclasses.field(default_factory=dict)


__all__ = ["StoredEvent"]
