"""Buffs and debuffs that objects apply to a statistic."""

from anthill.types import BDType, GameError

MX_BUFF_DEBUFF = 3


class BuffDebuff:
    """A change of a given size to one statistic."""

    def __init__(self, kind: BDType | int = BDType.NO_TYPE, value: float = 0.0) -> None:
        self._kind = BDType.NO_TYPE
        self._value = 0.0
        self.kind = kind
        self.value = value

    @property
    def kind(self) -> BDType:
        return self._kind

    @kind.setter
    def kind(self, value: BDType | int) -> None:
        try:
            self._kind = BDType(value)
        except ValueError:
            raise GameError(f"unknown buff/debuff type {value!r}") from None

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = float(value)

    def __repr__(self) -> str:
        return f"BuffDebuff({self._kind.name}, {self._value})"

    def describe(self) -> str:
        """Return a one-line summary of the buff/debuff."""
        return f"--> BD (Type: {self._kind.name}; Value: {self._value:f})"