import pytest

from anthill.space import GDESC, Space
from anthill.types import NO_ID, GameError

DIRECTIONS = ["north", "south", "east", "west"]


@pytest.mark.parametrize("id_", [5, 4, 25])
def test_create_keeps_id(id_):
    assert Space(id_).id == id_


def test_create_with_no_id_fails():
    with pytest.raises(GameError):
        Space(NO_ID)


@pytest.mark.parametrize("field, value", [("name", "hola"), ("name", "adios"), ("description", "A dark tunnel")])
def test_text_round_trip(field, value):
    s = Space(5)
    setattr(s, field, value)
    assert getattr(s, field) == value


def test_set_name_none_fails():
    s = Space(5)
    s.name = "hola"
    with pytest.raises(TypeError):
        s.name = None
    assert s.name == "hola"


def test_neighbours_round_trip_and_defaults():
    s = Space(5)
    assert [getattr(s, d) for d in DIRECTIONS] == [NO_ID] * 4
    for direction, value in zip(DIRECTIONS, [4, 2, 1, 6]):
        setattr(s, direction, value)
    assert [getattr(s, d) for d in DIRECTIONS] == [4, 2, 1, 6]


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_set_neighbour_no_id_fails(direction):
    s = Space(5)
    with pytest.raises(GameError):
        setattr(s, direction, NO_ID)
    assert getattr(s, direction) == NO_ID


def test_objects_lifecycle():
    s = Space(1)
    assert (s.has_object(21), s.objects()) == (False, [])
    s.add_object(21)
    assert (s.has_object(21), s.objects()) == (True, [21])
    s.delete_object(21)
    assert (s.has_object(21), s.objects()) == (False, [])


def test_delete_object_missing_fails():
    with pytest.raises(GameError):
        Space(1).delete_object(21)


def test_gdesc_round_trip():
    s = Space(1)
    s.set_gdesc(0, "/\\_/\\")
    assert (s.get_gdesc(0), s.get_gdesc(1)) == ("/\\_/\\", "")


@pytest.mark.parametrize("index", [-1, GDESC])
@pytest.mark.parametrize("call", [lambda s, i: s.set_gdesc(i, "x"), lambda s, i: s.get_gdesc(i)])
def test_gdesc_out_of_range(index, call):
    with pytest.raises(GameError):
        call(Space(1), index)


def test_describe():
    s = Space(3)
    s.name = "Nest"
    s.north = 2
    s.add_object(21)
    assert s.describe() == (
        "--> Space (Id: 3; Name: Nest)\n"
        "---> North link: 2.\n"
        "---> No south link.\n"
        "---> No east link.\n"
        "---> No west link.\n"
        "Numero de ids: 1   Id 0: 21"
    )