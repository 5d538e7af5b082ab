"""Testing fakes – in-memory stand-ins for ports."""
from seat_inventory.testing.fakes.clock import FakeClock
from seat_inventory.testing.fakes.event_publisher import InMemoryEventPublisher

__all__ = ["FakeClock", "InMemoryEventPublisher"]
