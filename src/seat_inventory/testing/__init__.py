"""Testing – fakes for unit tests of code built on seat_inventory."""
from seat_inventory.testing.fakes import FakeClock, InMemoryEventPublisher

__all__ = ["FakeClock", "InMemoryEventPublisher"]
