"""Tests for materials, obstacle validation and intersection math."""

import pytest

from wireless_sim.core import (
    MATERIALS,
    Building,
    InvalidDimensionError,
    Obstacle,
    UnresolvedReferenceError,
    get_material,
    obstacle_attenuation,
    segments_intersect,
    validate_obstacles,
)


class TestMaterials:
    def test_preset_materials_exist(self):
        for mat in ("drywall", "concrete", "reinforced_concrete", "brick", "glass", "metal", "wood"):
            assert mat in MATERIALS

    def test_preset_values(self):
        assert MATERIALS["drywall"].attenuation_db == 3.0
        assert MATERIALS["concrete"].attenuation_db == 8.0
        assert MATERIALS["metal"].attenuation_db == 20.0

    def test_unknown_material_raises(self):
        with pytest.raises(UnresolvedReferenceError, match="Unknown material"):
            get_material("unobtanium")

    def test_unknown_material_is_value_error(self):
        with pytest.raises(ValueError):
            get_material("unobtanium")

    def test_obstacle_resolves_material(self):
        obs = Obstacle("1", "Wall", "brick", x=0, y=0, width=1, height=1)
        assert obs.attenuation_db == 6.0
        assert obs.material.name == "Brick Wall"


class TestSegmentsIntersect:
    def test_crossing(self):
        assert segments_intersect((0, 0), (10, 10), (0, 10), (10, 0)) is True

    def test_parallel_no_cross(self):
        assert segments_intersect((0, 0), (10, 0), (0, 1), (10, 1)) is False

    def test_collinear_overlap_is_not_intersection(self):
        # denominator is exactly 0 for collinear segments
        assert segments_intersect((0, 0), (10, 0), (5, 0), (15, 0)) is False

    def test_t_intersection(self):
        assert segments_intersect((5, 0), (5, 10), (0, 5), (10, 5)) is True

    def test_touching_endpoint(self):
        assert segments_intersect((0, 0), (5, 5), (5, 5), (10, 0)) is True

    def test_disjoint(self):
        assert segments_intersect((0, 0), (1, 1), (5, 5), (6, 7)) is False


class TestObstacleAttenuation:
    def test_no_obstacles(self):
        assert obstacle_attenuation((0, 0), (50, 50), []) == 0.0

    def test_single_wall_crossed(self):
        wall = Obstacle("1", "Wall", "reinforced_concrete", x=25, y=0, width=0.3, height=30)
        assert obstacle_attenuation((0, 15), (50, 15), [wall]) == pytest.approx(12.0)

    def test_no_crossing(self):
        wall = Obstacle("1", "Wall", "reinforced_concrete", x=25, y=0, width=0.3, height=30)
        assert obstacle_attenuation((0, 15), (20, 15), [wall]) == pytest.approx(0.0)

    def test_thick_obstacle_counts_once(self):
        block = Obstacle("1", "Block", "concrete", x=10, y=10, width=10, height=10)
        assert obstacle_attenuation((0, 15), (30, 15), [block]) == pytest.approx(8.0)

    def test_degenerate_parallel_ray_outside(self):
        # Ray parallel to the long edges and clear of the rectangle
        wall = Obstacle("1", "Wall", "metal", x=10, y=10, width=10, height=0.2)
        assert obstacle_attenuation((0, 5), (30, 5), [wall]) == 0.0

    def test_multiple_walls_cumulative(self):
        walls = [
            Obstacle("1", "A", "drywall", x=10, y=0, width=0.1, height=30),
            Obstacle("2", "B", "brick", x=20, y=0, width=0.2, height=30),
            Obstacle("3", "C", "glass", x=30, y=0, width=0.1, height=30),
        ]
        assert obstacle_attenuation((0, 15), (40, 15), walls) == pytest.approx(11.0)

    def test_floor_filter(self):
        walls = [
            Obstacle("1", "A", "drywall", x=10, y=0, width=0.1, height=30, floor_level=0),
            Obstacle("2", "B", "brick", x=20, y=0, width=0.2, height=30, floor_level=1),
        ]
        assert obstacle_attenuation((0, 15), (40, 15), walls, floors=[1]) == pytest.approx(6.0)


class TestValidateObstacles:
    @pytest.fixture
    def building(self):
        return Building(50, 30, 3, 2)

    def test_valid(self, building):
        validate_obstacles([Obstacle("1", "Wall", "drywall", x=15, y=5, width=20, height=0.2)], building)

    def test_unknown_material(self, building):
        with pytest.raises(UnresolvedReferenceError):
            validate_obstacles([Obstacle("1", "Wall", "adamantium", x=1, y=1, width=1, height=1)], building)

    def test_floor_out_of_range(self, building):
        with pytest.raises(UnresolvedReferenceError):
            validate_obstacles([Obstacle("1", "Wall", "drywall", x=1, y=1, width=1, height=1, floor_level=2)], building)

    def test_negative_floor(self, building):
        with pytest.raises(UnresolvedReferenceError):
            validate_obstacles([Obstacle("1", "Wall", "drywall", x=1, y=1, width=1, height=1, floor_level=-1)], building)

    def test_zero_size(self, building):
        with pytest.raises(InvalidDimensionError):
            validate_obstacles([Obstacle("1", "Wall", "drywall", x=1, y=1, width=0, height=1)], building)

    def test_outside_floor_plan(self, building):
        with pytest.raises(InvalidDimensionError):
            validate_obstacles([Obstacle("1", "Wall", "drywall", x=60, y=1, width=1, height=1)], building)
