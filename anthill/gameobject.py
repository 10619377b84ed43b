"""Objects that lie in spaces or are carried by the player."""

from anthill.buff import BuffDebuff
from anthill.types import NO_ID, WORD_SIZE, GameError


class _Field:
    """A checked instance attribute stored under a private name."""

    def __init__(self, label: str, default=None) -> None:
        self._label = label
        self._default = default
        self._attr = ""

    def __set_name__(self, owner, name: str) -> None:
        self._attr = f"_{name}"

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return getattr(obj, self._attr, self._default)

    def __set__(self, obj, value) -> None:
        self._check(value)
        setattr(obj, self._attr, value)

    def _check(self, value) -> None:
        """Raise if the value may not be stored."""


class _Text(_Field):
    """A string attribute no longer than WORD_SIZE characters."""

    def __init__(self, label: str) -> None:
        super().__init__(label, "")

    def _check(self, value) -> None:
        if not isinstance(value, str):
            raise TypeError(f"{self._label} must be a string")
        if len(value) > WORD_SIZE:
            raise GameError(f"{self._label} longer than {WORD_SIZE} characters")


class _ValidId(_Field):
    """An id attribute that refuses NO_ID."""

    def __init__(self, label: str) -> None:
        super().__init__(label, NO_ID)

    def _check(self, value) -> None:
        if value == NO_ID:
            raise GameError(f"{self._label} must be a valid id")


class _Placed:
    """Something with a position on the map that can be reset."""

    initial_position: tuple[int, int] = (0, 0)
    position: tuple[int, int] = (0, 0)

    def set_position(self, x: int, y: int) -> None:
        """Move to the given coordinates."""
        self.position = (x, y)

    def is_here(self, x: int, y: int) -> bool:
        return self.position == (x, y)

    def reset_position(self) -> None:
        """Move back to the initial position."""
        self.position = self.initial_position


def _effect(effect: str, field: str) -> property:
    """A property that reads and writes one field of the buff or the debuff."""
    return property(
        lambda self: getattr(getattr(self, effect), field),
        lambda self, value: setattr(getattr(self, effect), field, value),
        doc=f"The {field} of the object's {effect}.",
    )


class GameObject(_Placed):
    """An object with a name, a description, effects and a position."""

    id = _ValidId("object id")
    name = _Text("object name")
    description = _Text("object description")
    buff_type = _effect("buff", "kind")
    buff_value = _effect("buff", "value")
    debuff_type = _effect("debuff", "kind")
    debuff_value = _effect("debuff", "value")

    def __init__(self, id_: int) -> None:
        self.id = id_
        self.consumable = False
        self.buff = BuffDebuff()
        self.debuff = BuffDebuff()

    def set_position(self, x: int, y: int) -> None:
        """Move the object to the given coordinates."""
        super().set_position(x, y)

    def is_here(self, x: int, y: int) -> bool:
        return super().is_here(x, y)

    def reset_position(self) -> None:
        """Move the object back to its initial position."""
        super().reset_position()

    def describe(self) -> str:
        """Return a textual dump of the object."""
        return f"--> Object (Id: {self.id}; Name: {self.name})"