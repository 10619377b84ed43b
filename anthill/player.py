"""The player: identity, location, carried objects, statistics and position."""

from anthill.gameobject import _Field, _Placed, _Text, _ValidId
from anthill.inventory import Inventory
from anthill.types import NO_ID
from anthill.xp import Experience


class _Component(_Field):
    """An attribute that only holds instances of one class."""

    def __init__(self, label: str, kind: type) -> None:
        super().__init__(label)
        self._kind = kind

    def _check(self, value) -> None:
        if not isinstance(value, self._kind):
            raise TypeError(f"{self._label} must be a {self._kind.__name__}")


class Player(_Placed):
    """The character controlled by the user."""

    id = _ValidId("player id")
    name = _Text("player name")
    inventory = _Component("player inventory", Inventory)
    experience = _Component("player experience", Experience)

    def __init__(self, id_: int) -> None:
        self.id = id_
        self.location = NO_ID
        self.health = 0
        self.attack = 0
        self.defense = 0
        self.inventory = Inventory()
        self.experience = Experience()

    @property
    def xp(self) -> int:
        return self.experience.xp

    @property
    def max_xp(self) -> int:
        return self.experience.max_xp

    @property
    def level(self) -> int:
        return self.experience.level

    def has_object(self, id_: int) -> bool:
        return id_ in self.inventory

    def add_object(self, id_: int) -> None:
        """Put an object into the player's inventory."""
        self.inventory.add(id_)

    def delete_object(self, id_: int) -> None:
        """Take an object out of the player's inventory."""
        self.inventory.remove(id_)

    def objects(self) -> list[int]:
        """Return the ids of the carried objects."""
        return self.inventory.ids()

    def level_up(self) -> None:
        """Advance the player's experience to the next level."""
        self.experience.level_up()

    @property
    def position_i(self) -> int:
        return self.position[0]

    @position_i.setter
    def position_i(self, value: int) -> None:
        self.position = (value, self.position[1])

    @property
    def position_j(self) -> int:
        return self.position[1]

    @position_j.setter
    def position_j(self, value: int) -> None:
        self.position = (self.position[0], value)

    def set_position(self, x: int, y: int) -> None:
        """Move the player to the given coordinates."""
        super().set_position(x, y)

    def is_here(self, x: int, y: int) -> bool:
        return super().is_here(x, y)

    def reset_position(self) -> None:
        """Move the player back to its initial position."""
        super().reset_position()

    def describe(self) -> str:
        """Return a textual dump of the player."""
        header = (
            f"--> Player (Id: {self.id}; Name: {self.name}; "
            f"Location: {self.location}; Health: {self.health})"
        )
        return f"{header}\n{self.inventory.format()}"