import pytest

from anthill.inventory import Inventory
from anthill.types import NO_ID, GameError


def test_create_is_empty():
    inv = Inventory()
    assert (len(inv), inv.ids(), inv.is_empty(), inv.is_full()) == (0, [], True, False)


def test_is_full_after_shrinking_capacity():
    inv = Inventory()
    inv.add(3)
    inv.max_objects = 1
    assert inv.is_full() is True


def test_add_and_remove():
    inv = Inventory()
    inv.add(5)
    assert (5 in inv, inv.ids(), inv.is_empty(), 5 in inv.object_set) == (True, [5], False, True)
    inv.remove(5)
    assert 5 not in inv


@pytest.mark.parametrize(
    "capacity, initial, method, value",
    [
        (None, [], "add", NO_ID),
        (0, [], "add", 5),
        (None, [5], "add", 5),
        (2, [1, 2], "add", 3),
        (None, [], "remove", 5),
        (None, [], "remove", NO_ID),
    ],
)
def test_rejected_operations(capacity, initial, method, value):
    inv = Inventory()
    if capacity is not None:
        inv.max_objects = capacity
    for id_ in initial:
        inv.add(id_)
    with pytest.raises(GameError):
        getattr(inv, method)(value)
    assert sorted(inv) == initial


def test_max_objects():
    assert Inventory().max_objects >= 1
    assert Inventory(4).max_objects == 4
    inv = Inventory()
    inv.max_objects = 4
    with pytest.raises(GameError):
        inv.max_objects = NO_ID
    assert inv.max_objects == 4