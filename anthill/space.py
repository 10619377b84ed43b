"""Spaces of the game map."""

from anthill.idset import IdSet
from anthill.types import NO_ID, WORD_SIZE, GameError

GDESC = 5
GDESC_WIDTH = 9
MAX_DESCRIPTION = 234
MAX_SPACES = 100
FIRST_SPACE = 1


class Space:
    """A location with neighbours, objects and a graphic description."""

    def __init__(self, id_: int) -> None:
        if id_ == NO_ID:
            raise GameError("a space needs a valid id")
        self._id = id_
        self._name = ""
        self._description = ""
        self._north = NO_ID
        self._south = NO_ID
        self._east = NO_ID
        self._west = NO_ID
        self._objects = IdSet()
        self._gdesc = [""] * GDESC

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("space name must be a string")
        if len(value) > WORD_SIZE:
            raise GameError(f"space name longer than {WORD_SIZE} characters")
        self._name = value

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("space description must be a string")
        if len(value) > MAX_DESCRIPTION:
            raise GameError(
                f"space description longer than {MAX_DESCRIPTION} characters"
            )
        self._description = value

    @staticmethod
    def _neighbour(value: int) -> int:
        if value == NO_ID:
            raise GameError("a neighbour needs a valid id")
        return value

    @property
    def north(self) -> int:
        return self._north

    @north.setter
    def north(self, value: int) -> None:
        self._north = self._neighbour(value)

    @property
    def south(self) -> int:
        return self._south

    @south.setter
    def south(self, value: int) -> None:
        self._south = self._neighbour(value)

    @property
    def east(self) -> int:
        return self._east

    @east.setter
    def east(self, value: int) -> None:
        self._east = self._neighbour(value)

    @property
    def west(self) -> int:
        return self._west

    @west.setter
    def west(self, value: int) -> None:
        self._west = self._neighbour(value)

    @property
    def object_set(self) -> IdSet:
        """The set of object ids lying in this space."""
        return self._objects

    def add_object(self, id_: int) -> None:
        """Place an object in the space."""
        self._objects.add(id_)

    def delete_object(self, id_: int) -> None:
        """Take an object out of the space."""
        self._objects.remove(id_)

    def has_object(self, id_: int) -> bool:
        return id_ in self._objects

    def objects(self) -> list[int]:
        """Return the ids of the objects in the space."""
        return self._objects.ids()

    def set_gdesc(self, index: int, line: str) -> None:
        """Set one line of the graphic description."""
        if not isinstance(line, str):
            raise TypeError("graphic description line must be a string")
        if not 0 <= index < GDESC:
            raise GameError(f"graphic description line {index} out of range")
        if len(line) > GDESC_WIDTH:
            raise GameError(
                f"graphic description line longer than {GDESC_WIDTH} characters"
            )
        self._gdesc[index] = line

    def get_gdesc(self, index: int) -> str:
        """Return one line of the graphic description."""
        if not 0 <= index < GDESC:
            raise GameError(f"graphic description line {index} out of range")
        return self._gdesc[index]

    def describe(self) -> str:
        """Return a textual dump of the space."""
        lines = [f"--> Space (Id: {self._id}; Name: {self._name})"]
        for label, value in (
            ("north", self._north),
            ("south", self._south),
            ("east", self._east),
            ("west", self._west),
        ):
            if value != NO_ID:
                lines.append(f"---> {label.capitalize()} link: {value}.")
            else:
                lines.append(f"---> No {label} link.")
        lines.append(self._objects.format())
        return "\n".join(lines)