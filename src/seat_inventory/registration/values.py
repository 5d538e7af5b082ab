"""Registration value objects."""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable

from seat_inventory.kernel.ddd.value_object import ValueObject
from seat_inventory.kernel.types.ids import SeatTypeId


@dataclasses.dataclass(frozen=True)
class SeatQuantity(ValueObject):
    """A seat type paired with a quantity.

    The quantity is an absolute count or, inside events, a signed change.
    """

    seat_type: SeatTypeId
    quantity: int

    def to_payload(self) -> dict[str, Any]:
        return {"seat_type": str(self.seat_type), "quantity": self.quantity}

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "SeatQuantity":
        return cls(SeatTypeId(payload["seat_type"]), int(payload["quantity"]))


def quantities_to_payload(quantities: Iterable[SeatQuantity]) -> list[dict[str, Any]]:
    return [q.to_payload() for q in quantities]


def quantities_from_payload(payload: Iterable[dict[str, Any]]) -> tuple[SeatQuantity, ...]:
    return tuple(SeatQuantity.from_payload(item) for item in payload)


__all__ = ["SeatQuantity", "quantities_from_payload", "quantities_to_payload"]
