"""Tests for the end-to-end coverage pipeline and its memoization."""

import pytest

from wireless_sim.analysis import HeatmapView
from wireless_sim.config import Settings
from wireless_sim.core import (
    AccessPoint,
    Building,
    InfeasibleLinkBudgetError,
    InvalidDimensionError,
    Obstacle,
    UnresolvedReferenceError,
)
from wireless_sim.core.simulation import CoverageScenario, CoverageSimulation
from wireless_sim.propagation import LinkParameters


@pytest.fixture
def sim():
    return CoverageSimulation(Settings())


@pytest.fixture
def scenario():
    return CoverageScenario(
        building=Building(50, 30, 3, 1),
        technology="wifi",
        link=LinkParameters(frequency_mhz=2400, tx_power_dbm=20, target_rssi_dbm=-70, safety_margin_db=10),
    )


class TestRun:
    def test_end_to_end(self, sim, scenario):
        result = sim.run(scenario)
        assert result.link_budget.available_path_loss_db == pytest.approx(80.0)
        assert result.link_budget.max_coverage_radius_m == pytest.approx(99.4, rel=0.01)
        assert result.recommended_aps == 1
        ap = result.access_points[0]
        assert (ap.x, ap.y, ap.z) == pytest.approx((25.0, 15.0, 2.7))

    def test_summary(self, sim, scenario):
        summary = sim.run(scenario).summary()
        assert summary["total_area_m2"] == 1500
        assert summary["estimated_users"] == 150
        assert summary["placed_aps"] == 1

    def test_mount_height_setting(self, scenario):
        result = CoverageSimulation(Settings(ap_mount_height_m=3.0)).run(scenario)
        assert result.access_points[0].z == pytest.approx(3.0)

    def test_manual_access_points_bypass_planner(self, sim):
        manual = (
            AccessPoint("a", 10, 10, 2.7, 0, 0.0, "wifi", 2400.0, 20.0),
            AccessPoint("b", 40, 20, 2.7, 0, 0.0, "wifi", 2400.0, 20.0),
        )
        # budget is infeasible, but no planning is needed
        scenario = CoverageScenario(
            building=Building(50, 30, 3, 1),
            link=LinkParameters(tx_power_dbm=0, target_rssi_dbm=-10, safety_margin_db=10),
            access_points=manual,
        )
        result = sim.run(scenario)
        assert [ap.id for ap in result.access_points] == ["a", "b"]
        assert result.recommended_aps == 2

    def test_manual_access_point_on_missing_floor(self, sim):
        stray = AccessPoint("up", 10, 10, 11.7, 3, 99.4, "wifi", 2400.0, 20.0)
        with pytest.raises(UnresolvedReferenceError):
            sim.run(CoverageScenario(building=Building(50, 30, 3, 2), access_points=(stray,)))

    def test_infeasible_budget(self, sim):
        scenario = CoverageScenario(link=LinkParameters(tx_power_dbm=0, target_rssi_dbm=-10, safety_margin_db=10))
        with pytest.raises(InfeasibleLinkBudgetError):
            sim.run(scenario)

    def test_invalid_building(self, sim):
        with pytest.raises(InvalidDimensionError):
            sim.run(CoverageScenario(building=Building(50, 30, 3, 0)))

    def test_unknown_technology(self, sim):
        with pytest.raises(UnresolvedReferenceError):
            sim.run(CoverageScenario(technology="carrier-pigeon"))

    def test_unknown_material(self, sim):
        bad = Obstacle("1", "Wall", "cheese", x=1, y=1, width=1, height=1)
        with pytest.raises(UnresolvedReferenceError):
            sim.run(CoverageScenario(obstacles=[bad]))


class TestCaching:
    def test_scenario_list_inputs_are_hashable(self):
        wall = Obstacle("1", "Wall", "drywall", x=15, y=5, width=20, height=0.2)
        scenario = CoverageScenario(obstacles=[wall])
        assert scenario.obstacles == (wall,)
        assert hash(scenario) == hash(CoverageScenario(obstacles=(wall,)))

    def test_run_cached(self, sim, scenario):
        assert sim.run(scenario) is sim.run(scenario)

    def test_heatmap_cached_by_view_and_resolution(self, sim, scenario):
        view = HeatmapView.horizontal()
        first = sim.heatmap(scenario, view, resolution=5)
        assert sim.heatmap(scenario, view, resolution=5) is first
        assert sim.heatmap(scenario, view, resolution=6) is not first
        assert sim.heatmap(scenario, HeatmapView.vertical(), resolution=5) is not first

    def test_changed_input_recomputes(self, sim, scenario):
        louder = CoverageScenario(
            building=scenario.building, technology="wifi",
            link=LinkParameters(tx_power_dbm=23, target_rssi_dbm=-70, safety_margin_db=10),
        )
        quiet = sim.heatmap(scenario, HeatmapView.horizontal(), resolution=5)
        loud = sim.heatmap(louder, HeatmapView.horizontal(), resolution=5)
        assert (loud.strength > quiet.strength).all()

    def test_clear_cache(self, sim, scenario):
        first = sim.run(scenario)
        sim.clear_cache()
        assert sim.run(scenario) is not first

    def test_lru_eviction(self, scenario):
        sim = CoverageSimulation(Settings(heatmap_cache_size=1))
        first = sim.heatmap(scenario, HeatmapView.horizontal(), resolution=4)
        sim.heatmap(scenario, HeatmapView.vertical(), resolution=4)
        assert sim.heatmap(scenario, HeatmapView.horizontal(), resolution=4) is not first

    def test_default_resolution_from_settings(self, scenario):
        sim = CoverageSimulation(Settings(grid_resolution=7))
        assert sim.heatmap(scenario, HeatmapView.horizontal()).shape == (7, 7)

    def test_zero_resolution_is_rejected(self, scenario):
        sim = CoverageSimulation(Settings(grid_resolution=7))
        with pytest.raises(InvalidDimensionError):
            sim.heatmap(scenario, HeatmapView.horizontal(), resolution=0)

    def test_unused_view_fields_share_cache_entry(self, sim, scenario):
        first = sim.heatmap(scenario, HeatmapView(kind="vertical", z_m=5.0), resolution=4)
        assert sim.heatmap(scenario, HeatmapView.vertical(), resolution=4) is first
        flat = sim.heatmap(scenario, HeatmapView(kind="horizontal", slice_percent=10), resolution=4)
        assert sim.heatmap(scenario, HeatmapView.horizontal(), resolution=4) is flat

    def test_cached_results_are_immutable(self, sim, scenario):
        result = sim.run(scenario)
        assert isinstance(result.access_points, tuple)
        hm = sim.heatmap(scenario, HeatmapView.horizontal(), resolution=4)
        with pytest.raises(ValueError):
            hm.strength[0, 0] = 0.0
        assert sim.heatmap(scenario, HeatmapView.horizontal(), resolution=4) is hm
