"""Data model for a text adventure set in an anthill."""

__version__ = "0.1.0"
__all__ = [
    "types",
    "idset",
    "space",
    "xp",
    "buff",
    "gameobject",
    "link",
    "enemy",
    "inventory",
    "player",
]