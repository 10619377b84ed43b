# anthill

The data model of a text adventure set inside an anthill. It provides
spaces, the links between them, objects with buffs and debuffs,
enemies, a player with an inventory, and experience levels. Operations
that are not allowed raise `anthill.types.GameError`, which is a
subclass of `ValueError`.

## Modules

- `anthill.types` defines the constants `NO_ID`, `CARRIED`, `DEAD` and
  `WORD_SIZE`, the enumerations `Direction`, `BDType`, `CommandType`
  and `Command`, and `GameError`.
- `anthill.idset.IdSet` holds unique ids in insertion order. Adding
  `NO_ID` or an id that is already present raises `GameError`, and so
  does removing an id that is absent. When an id is removed, the last
  id is moved into its place. `format()` returns a one-line listing.
- `anthill.space.Space` is a location. It has a `name`, a
  `description` of at most 234 characters, and `north`, `south`,
  `east` and `west` neighbours, which start as `NO_ID`. It holds the
  ids of the objects lying in it (`add_object`, `delete_object`,
  `has_object`, `objects`). Its graphic description has five lines of
  at most nine characters each (`set_gdesc`, `get_gdesc`).
  `describe()` returns a text dump of the space.
- `anthill.xp.Experience` tracks `xp`, `level` (1 to begin with, at
  most `max_level`, which is 7) and `max_xp` (10 to begin with).
  `add_xp` adds points. `level_up()` raises the level by one unless it
  is already at the cap, sets `max_xp` to the current xp plus 10, and
  resets xp to 0.
- `anthill.buff.BuffDebuff` is a `BDType` kind together with a float
  value. An unknown kind raises `GameError`.
- `anthill.gameobject.GameObject` is an item. It has an id, a name, a
  description, a `consumable` flag, a `buff` and a `debuff` (with
  shortcuts `buff_type`, `buff_value`, `debuff_type` and
  `debuff_value`), and a map position (`set_position`, `is_here`,
  `reset_position`).
- `anthill.link.Link` joins an `origin` space to a `destination`
  space. It has a `direction`, an `open` flag and a `requirement`
  object id.
- `anthill.enemy.Enemy` has an id, a name, a location, health, attack,
  defense and a map position.
- `anthill.inventory.Inventory` is a set of object ids with a capacity,
  `max_objects`, which defaults to 5. Adding an object to a full
  inventory raises `GameError`.
- `anthill.player.Player` is the player. It has an id, a name, a
  location, health, attack, defense, an `Inventory` and an
  `Experience`, as well as a map position with `position_i` and
  `position_j`.

## Example

```python
from anthill.space import Space
from anthill.inventory import Inventory
from anthill.player import Player
from anthill.types import GameError

hall = Space(1)
hall.name = "hall"
hall.add_object(21)
assert hall.has_object(21)

bag = Inventory(1)
bag.add(5)
assert bag.is_full()
try:
    bag.add(6)
except GameError:
    print("the bag is full")

ant = Player(1)
ant.add_object(21)
assert ant.has_object(21)
ant.level_up()
assert ant.level == 2
```

## What it does not do

The package contains only the game entities. It has none of the
following:

- a command reader or a game loop
- a screen display
- a loader for game data files
- combat rules
- a command to run

`Command` and `CommandType` are plain enumerations. Nothing in the
package interprets them.

## Installation

```
pip install .
```

To install the test dependencies as well and run the tests:

```
pip install .[test]
pytest
```