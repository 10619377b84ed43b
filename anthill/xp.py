"""Experience points and levels of a player."""

from anthill.types import GameError


class Experience:
    """Experience points, the current level and the points needed for the next one."""

    def __init__(self) -> None:
        self._xp = 0
        self._level = 1
        self.max_level = 7
        self._max_xp = 10

    @property
    def xp(self) -> int:
        return self._xp

    @xp.setter
    def xp(self, value: int) -> None:
        if value < 0:
            raise GameError("experience cannot be negative")
        self._xp = value

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        if value < 0 or value > self.max_level:
            raise GameError(f"level must be between 0 and {self.max_level}")
        self._level = value

    @property
    def max_xp(self) -> int:
        return self._max_xp

    @max_xp.setter
    def max_xp(self, value: int) -> None:
        if value < 0:
            raise GameError("maximum experience cannot be negative")
        self._max_xp = value

    def level_up(self) -> None:
        """Advance a level (capped at max_level) and restart the experience count."""
        if self._level < self.max_level:
            self._level += 1
        self._max_xp = self._xp + 10
        self._xp = 0

    def add_xp(self, value: int) -> None:
        """Add a non-negative amount of experience."""
        if value < 0:
            raise GameError("cannot add negative experience")
        self._xp += value

    def describe(self) -> str:
        return f"--> XP (level {self._level}): {self._xp}"