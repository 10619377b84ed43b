"""The set of objects a player carries, bounded by a capacity."""

from collections.abc import Iterator

from anthill.idset import IdSet
from anthill.types import GameError

DEFAULT_MAX_OBJECTS = 5


class Inventory:
    """Object ids carried by a player, at most max_objects of them."""

    def __init__(self, max_objects: int = DEFAULT_MAX_OBJECTS) -> None:
        self._objects = IdSet()
        self._max_objects = 0
        self.max_objects = max_objects

    @property
    def max_objects(self) -> int:
        return self._max_objects

    @max_objects.setter
    def max_objects(self, value: int) -> None:
        if value < 0:
            raise GameError("inventory capacity cannot be negative")
        self._max_objects = value

    @property
    def object_set(self) -> IdSet:
        """The underlying set of carried ids."""
        return self._objects

    def add(self, id_: int) -> None:
        """Add an object; fails when full, for NO_ID or for an id already held."""
        if self.is_full():
            raise GameError("inventory is full")
        self._objects.add(id_)

    def remove(self, id_: int) -> None:
        """Remove a carried object."""
        self._objects.remove(id_)

    def __contains__(self, id_: object) -> bool:
        return id_ in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[int]:
        return iter(self._objects)

    def is_full(self) -> bool:
        return len(self._objects) >= self._max_objects

    def is_empty(self) -> bool:
        return len(self._objects) == 0

    def ids(self) -> list[int]:
        """Return the carried ids in their current order."""
        return self._objects.ids()

    def format(self) -> str:
        """Return a one-line listing of the inventory."""
        return f"Max objects: {self._max_objects}   {self._objects.format()}"