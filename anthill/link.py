"""Links that join two spaces."""

from anthill.gameobject import _Text
from anthill.types import NO_ID, Direction, GameError


class Link:
    """A connection from an origin space to a destination space."""

    name = _Text("link name")

    def __init__(self) -> None:
        self.id = NO_ID
        self.origin = NO_ID
        self.destination = NO_ID
        self.open = False
        self._direction = Direction.UNKNOWN
        self.requirement = NO_ID

    @property
    def direction(self) -> Direction:
        return self._direction

    @direction.setter
    def direction(self, value: Direction | int) -> None:
        try:
            self._direction = Direction(value)
        except ValueError:
            raise GameError(f"unknown direction {value!r}") from None

    def describe(self) -> str:
        """Return a textual dump of the link."""
        return (
            f"--> Link (Id: {self.id}; Name: {self.name}; "
            f"Origin: {self.origin}; Destination: {self.destination}; "
            f"Direction: {self._direction.name}; "
            f"Open: {'yes' if self.open else 'no'})"
        )