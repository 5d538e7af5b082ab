"""Identifiers for aggregates, seat types and reservations.

All three are opaque strings.  They are distinct types so a seat type can
never be passed where a reservation id is expected; within one type they
compare and hash by their text.
"""

from __future__ import annotations

import dataclasses
import uuid
from typing import TypeVar

from seat_inventory.kernel.errors import ValidationError

I = TypeVar("I", bound="_Identifier")


@dataclasses.dataclass(frozen=True, slots=True)
class _Identifier:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(
                f"{type(self).__name__} needs a non-blank string",
                errors=[{"field": type(self).__name__, "value": repr(self.value)}],
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls: type[I]) -> I:
        return cls(uuid.uuid4().hex)

    @classmethod
    def from_str(cls: type[I], value: str) -> I:
        return cls(value)


@dataclasses.dataclass(frozen=True, slots=True)
class EntityId(_Identifier):
    """Identity of an aggregate, e.g. the conference a seat inventory belongs to."""


@dataclasses.dataclass(frozen=True, slots=True)
class SeatTypeId(_Identifier):
    """A kind of seat on offer (``"general"``, ``"workshop"``, ...)."""


@dataclasses.dataclass(frozen=True, slots=True)
class ReservationId(_Identifier):
    """One reservation across its pending, committed or cancelled life."""


__all__ = ["EntityId", "ReservationId", "SeatTypeId"]
