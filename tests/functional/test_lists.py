from dataclasses import dataclass

import pytest

from pointfree.functional.composition import compose, pipe
from pointfree.functional.lists import filter_c, map_c, pluck, prop, prop_eq


@pytest.fixture
def users():
    return [
        {"name": "ada", "active": True, "age": 36},
        {"name": "bob", "active": False, "age": 41},
        {"name": "cyd", "active": True, "age": 29},
    ]


def test_filter_then_map_over_records(users):
    active_names = pipe(filter_c(prop("active")), map_c(prop("name")))
    assert active_names(users) == ["ada", "cyd"]


def test_filter_then_pluck_with_compose(users):
    active_names = compose(pluck("name"), filter_c(prop_eq("active", True)))
    assert active_names(users) == ["ada", "cyd"]


def test_helpers_are_curried(users):
    assert map_c(prop("age"))(users) == map_c(prop("age"), users) == [36, 41, 29]
    assert filter_c(prop_eq("name", "bob"))(users) == [users[1]]


def test_prop_reads_attributes():
    @dataclass
    class Point:
        x: int
        y: int

    assert pluck("y", [Point(1, 2), Point(3, 4)]) == [2, 4]


def test_missing_key_raises(users):
    with pytest.raises(KeyError):
        pluck("email")(users)


def test_results_are_lists():
    assert map_c(str, range(3)) == ["0", "1", "2"]
    assert filter_c(bool, [0, 1, "", "a"]) == [1, "a"]
