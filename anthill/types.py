"""Identifiers, enumerations and the error type shared by the game entities."""

from enum import IntEnum

WORD_SIZE = 1000
NO_ID = -1
CARRIED = -2
DEAD = -3

N_CMDT = 2
N_CMD = 10


class GameError(ValueError):
    """Raised when an operation on a game entity is not allowed."""


class Direction(IntEnum):
    """Compass direction of a link between spaces."""

    UNKNOWN = 0
    N = 1
    S = 2
    E = 3
    W = 4


class BDType(IntEnum):
    """Statistic affected by a buff or debuff."""

    NO_TYPE = 0
    ATT = 1
    DEF = 2
    HP = 3


class CommandType(IntEnum):
    """Short or long spelling of a command."""

    CMDS = 0
    CMDL = 1


class Command(IntEnum):
    """Commands understood by the game."""

    NO_CMD = -1
    UNKNOWN = 0
    EXIT = 1
    TAKE = 2
    DROP = 3
    MOVE = 4
    INSPECT = 5
    COMBAT = 6
    USE = 7
    ADMIN = 8