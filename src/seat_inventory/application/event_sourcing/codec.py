"""Application event sourcing – JSON event codec.

Wire shape of a payload::

    {"data": {...}, "event_id": "<uuid>", "occurred_at": "<iso-8601>"}

``data`` is whatever the event's ``to_payload()`` returns.  Keys are
sorted so equal events always encode to the same bytes.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from seat_inventory.kernel.ddd.domain_event import DomainEvent
from seat_inventory.kernel.errors import SerializationError, ValidationError


class JsonEventCodec:
    """Encode and decode the given event types to/from JSON bytes.

    Every registered type must provide ``to_payload()`` and a
    ``from_payload(payload, **metadata)`` classmethod.
    """

    def __init__(self, *event_types: type[DomainEvent]) -> None:
        self._types: dict[str, type[DomainEvent]] = {}
        for event_type in event_types:
            self.register(event_type)

    def register(self, event_type: type[DomainEvent]) -> None:
        self._types[event_type.__name__] = event_type

    def encode(self, event: DomainEvent) -> bytes:
        if type(event).__name__ not in self._types:
            raise SerializationError(
                f"No codec registered for {event.event_type}", payload_type=event.event_type
            )
        document = {
            "event_id": event.event_id,
            "occurred_at": event.occurred_at.isoformat(),
            "data": event.to_payload(),  # type: ignore[attr-defined]
        }
        return json.dumps(document, sort_keys=True, separators=(",", ":")).encode("utf-8")

    def decode(self, event_type: str, payload: bytes) -> DomainEvent:
        cls = self._types.get(event_type)
        if cls is None:
            raise SerializationError(
                f"No codec registered for {event_type}", payload_type=event_type
            )
        try:
            document: dict[str, Any] = json.loads(payload.decode("utf-8"))
            return cls.from_payload(  # type: ignore[attr-defined,no-any-return]
                document["data"],
                event_id=document["event_id"],
                occurred_at=datetime.fromisoformat(document["occurred_at"]),
            )
        except (ValueError, KeyError, TypeError, ValidationError) as exc:
            raise SerializationError(
                f"Malformed {event_type} payload", payload_type=event_type
            ) from exc


__all__ = ["JsonEventCodec"]
