"""Kernel types – identifier value objects."""

from seat_inventory.kernel.types.ids import EntityId, ReservationId, SeatTypeId

__all__ = ["EntityId", "ReservationId", "SeatTypeId"]
