"""EventPublisher port and the in-process event bus."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Coroutine, Protocol

from seat_inventory.kernel.ddd.domain_event import DomainEvent

#: Type alias for an async event handler function.
Handler = Callable[[DomainEvent], Coroutine[Any, Any, None]]


class EventPublisher(Protocol):
    """Port: hands persisted domain events to downstream systems.

    Called by the repository after a successful save, once per event and in
    raise order.  Delivery failures are the publisher's concern.
    """

    async def publish(self, event: DomainEvent) -> None:
        """Publish *event*."""
        ...


class InProcessEventBus:
    """In-process :class:`EventPublisher` with fan-out via :func:`asyncio.gather`.

    Example::

        bus = InProcessEventBus()
        bus.subscribe(SeatsReserved, notify_orders)
        await bus.publish(event)
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[Handler]] = {}

    def subscribe(self, event_type: type[DomainEvent], handler: Handler) -> None:
        """Register *handler* to be called when *event_type* is published."""
        self._handlers.setdefault(event_type, []).append(handler)

    async def publish(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(type(event), [])
        if handlers:
            await asyncio.gather(*(h(event) for h in handlers))


__all__ = ["EventPublisher", "Handler", "InProcessEventBus"]
