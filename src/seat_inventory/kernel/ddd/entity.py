"""Entity base class — identity-based equality."""

from __future__ import annotations

from seat_inventory.kernel.types.ids import EntityId


class Entity:
    """Base entity – equality is identity-based (by ``id``).

    Two entities are equal iff they share the same concrete type and equal
    ids.  The hash is derived from the id alone and computed once.
    """

    def __init__(self, id: EntityId) -> None:  # noqa: A002
        self._id = id
        self._hash: int | None = None

    @property
    def id(self) -> EntityId:
        return self._id

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(other) is not type(self):
            return False
        return self._id == other._id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self._id)
        return self._hash

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self._id!r})"


__all__ = ["Entity"]
