import pytest

from anthill.idset import IdSet
from anthill.types import NO_ID, GameError


def test_create_empty():
    s = IdSet()
    assert (len(s), s.ids()) == (0, [])


def test_add_then_remove():
    s = IdSet()
    s.add(5)
    assert (5 in s, len(s)) == (True, 1)
    s.remove(5)
    assert (5 in s, len(s)) == (False, 0)


@pytest.mark.parametrize(
    "initial, method, value",
    [
        ([], "add", NO_ID),
        ([5], "add", 5),
        ([], "remove", 4),
        ([1, 2], "remove", 9),
    ],
)
def test_failures_keep_contents(initial, method, value):
    s = IdSet(initial)
    with pytest.raises(GameError):
        getattr(s, method)(value)
    assert s.ids() == initial


def test_remove_moves_last_into_gap():
    s = IdSet([1, 2, 3])
    s.remove(1)
    assert s.ids() == [3, 2]


def test_ids_is_a_copy():
    s = IdSet([4])
    s.ids().append(7)
    assert s.ids() == [4]


@pytest.mark.parametrize("value, expected", [(4, True), (5, False), (NO_ID, False)])
def test_contains(value, expected):
    assert (value in IdSet([4])) is expected


def test_iteration_order():
    assert list(IdSet([8, 3, 6])) == [8, 3, 6]


@pytest.mark.parametrize(
    "ids, text",
    [([], "Numero de ids: 0"), ([7, 9], "Numero de ids: 2   Id 0: 7   Id 1: 9")],
)
def test_format(ids, text):
    assert IdSet(ids).format() == text