"""
seat_inventory – Event-sourced seat inventory for event registration.

Import path convention::

    from seat_inventory.kernel.errors import DomainError
    from seat_inventory.kernel.ddd import EventSourcedAggregate, DomainEvent
    from seat_inventory.registration import SeatsAvailability, SeatQuantity
    from seat_inventory.application.registration import SeatsAvailabilityService
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
