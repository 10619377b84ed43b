"""Enemies that the player may fight."""

from anthill.gameobject import _Placed, _Text, _ValidId
from anthill.types import NO_ID


class Enemy(_Placed):
    """An enemy with a location, health, attack, defense and position."""

    id = _ValidId("enemy id")
    name = _Text("enemy name")

    def __init__(self) -> None:
        self.location = NO_ID
        self.health = 0
        self.attack = 0.0
        self.defense = 0.0

    def set_position(self, x: int, y: int) -> None:
        """Move the enemy to the given coordinates."""
        super().set_position(x, y)

    def is_here(self, x: int, y: int) -> bool:
        return super().is_here(x, y)

    def reset_position(self) -> None:
        """Move the enemy back to its initial position."""
        super().reset_position()

    def describe(self) -> str:
        """Return a textual dump of the enemy."""
        return (
            f"--> Enemy (Id: {self.id}; Name: {self.name}; "
            f"Location: {self.location}; Health: {self.health})"
        )