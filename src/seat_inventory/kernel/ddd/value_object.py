"""ValueObject base class."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class ValueObject:
    """Immutable value compared field by field.

    Subclasses are ``@dataclass(frozen=True)`` and may override
    :meth:`_validate`, which runs once after construction.
    """

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass


__all__ = ["ValueObject"]
