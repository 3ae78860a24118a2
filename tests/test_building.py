"""Tests for the Building model."""

import pytest

from wireless_sim.core import Building, InvalidDimensionError


def test_areas():
    b = Building(50, 30, 3, 4)
    assert b.floor_area_m2 == 1500
    assert b.total_area_m2 == 6000
    assert b.total_height_m == 12


@pytest.mark.parametrize("kwargs", [
    dict(length_m=0),
    dict(width_m=-5),
    dict(floor_height_m=0),
    dict(floor_count=0),
])
def test_invalid_dimensions(kwargs):
    with pytest.raises(InvalidDimensionError):
        Building(**kwargs).validate()


def test_floor_at():
    b = Building(50, 30, 3, 3)
    assert b.floor_at(0.0) == 0
    assert b.floor_at(2.99) == 0
    assert b.floor_at(3.0) == 1
    assert b.floor_at(8.5) == 2


def test_hashable():
    assert hash(Building(50, 30, 3, 1)) == hash(Building(50, 30, 3, 1))
