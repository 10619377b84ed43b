"""An ordered collection of unique entity ids."""

from collections.abc import Iterable, Iterator

from anthill.types import NO_ID, GameError


class IdSet:
    """Unique ids kept in insertion order; removal moves the last id into the gap."""

    def __init__(self, ids: Iterable[int] = ()) -> None:
        self._ids: list[int] = []
        for id_ in ids:
            self.add(id_)

    def add(self, id_: int) -> None:
        """Add an id; NO_ID and ids already present are rejected."""
        if id_ == NO_ID:
            raise GameError("cannot add NO_ID to a set")
        if id_ in self:
            raise GameError(f"id {id_} is already in the set")
        self._ids.append(id_)

    def remove(self, id_: int) -> None:
        """Remove an id, filling its place with the last id of the set."""
        if not self._ids:
            raise GameError("cannot remove from an empty set")
        try:
            index = self._ids.index(id_)
        except ValueError:
            raise GameError(f"id {id_} is not in the set") from None
        last = self._ids.pop()
        if index < len(self._ids):
            self._ids[index] = last

    def __contains__(self, id_: object) -> bool:
        return id_ != NO_ID and id_ in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def __repr__(self) -> str:
        return f"IdSet({self._ids!r})"

    def ids(self) -> list[int]:
        """Return a copy of the ids in their current order."""
        return list(self._ids)

    def format(self) -> str:
        """Return the one-line listing of the set."""
        parts = [f"Numero de ids: {len(self._ids)}"]
        parts.extend(f"   Id {i}: {id_}" for i, id_ in enumerate(self._ids))
        return "".join(parts)