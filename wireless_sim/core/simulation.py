"""Run the coverage pipeline: link budget → AP placement → heatmap."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Tuple

from ..analysis.coverage import estimate_users
from ..analysis.heatmap import Heatmap, HeatmapView, sample_heatmap
from ..analysis.placement import plan_access_points, recommended_ap_count
from ..config import Settings, get_settings
from ..propagation.linkbudget import LinkBudget, LinkParameters, compute_link_budget
from ..technologies import get_technology
from .building import Building, Obstacle, validate_obstacles
from .device import AccessPoint
from .errors import UnresolvedReferenceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoverageScenario:
    """Complete, hashable input of one pipeline run.

    Parameters
    ----------
    building : Building
    obstacles : tuple of Obstacle
    technology : str
        Registry key of the technology profile.
    link : LinkParameters
    access_points : tuple of AccessPoint, optional
        Manually placed APs; when given the placement planner is skipped.
    """

    building: Building = field(default_factory=Building)
    obstacles: Tuple[Obstacle, ...] = ()
    technology: str = "wifi"
    link: LinkParameters = field(default_factory=LinkParameters)
    access_points: Optional[Tuple[AccessPoint, ...]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "obstacles", tuple(self.obstacles))
        if self.access_points is not None:
            object.__setattr__(self, "access_points", tuple(self.access_points))


@dataclass
class CoverageResult:
    """Derived figures for one scenario."""

    scenario: CoverageScenario
    link_budget: LinkBudget
    access_points: Tuple[AccessPoint, ...]
    recommended_aps: int
    total_area_m2: float
    estimated_users: int

    def summary(self) -> dict:
        return {
            "available_path_loss_db": round(self.link_budget.available_path_loss_db, 2),
            "max_coverage_radius_m": round(self.link_budget.max_coverage_radius_m, 2),
            "recommended_aps": self.recommended_aps,
            "placed_aps": len(self.access_points),
            "total_area_m2": round(self.total_area_m2, 2),
            "estimated_users": self.estimated_users,
        }


class CoverageSimulation:
    """Compute link budget, AP placement and heatmaps for :class:`CoverageScenario` inputs.

    Results are pure functions of the scenario, so they are memoized by it in
    per-instance LRU caches of ``heatmap_cache_size`` entries. Any change to
    the scenario produces a new key and a full recomputation.

    Parameters
    ----------
    settings : Settings, optional
        Design constants; defaults to :func:`get_settings`.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        size = self.settings.heatmap_cache_size
        self._run_cached = lru_cache(maxsize=size)(self._run)
        self._heatmap_cached = lru_cache(maxsize=size)(self._heatmap)

    # ------------------------------------------------------------------
    def _validate(self, scenario: CoverageScenario) -> None:
        building = scenario.building
        building.validate()
        validate_obstacles(scenario.obstacles, building)
        get_technology(scenario.technology)
        for ap in scenario.access_points or ():
            if not 0 <= ap.floor_level < building.floor_count:
                raise UnresolvedReferenceError(
                    f"Access point '{ap.id}' is on floor {ap.floor_level}, "
                    f"building has {building.floor_count} floor(s)"
                )

    # ------------------------------------------------------------------
    def run(self, scenario: CoverageScenario) -> CoverageResult:
        """Execute the pipeline up to AP placement and return results.

        Raises
        ------
        CoverageError
            Invalid dimensions, unresolved references, or an infeasible link
            budget when APs have to be planned.
        """
        return self._run_cached(scenario)

    def _run(self, scenario: CoverageScenario) -> CoverageResult:
        self._validate(scenario)
        building = scenario.building
        budget = compute_link_budget(scenario.link)

        if scenario.access_points is not None:
            access_points = scenario.access_points
            recommended = len(access_points)
        else:
            access_points = tuple(plan_access_points(
                building, budget,
                technology=scenario.technology,
                tx_power_dbm=scenario.link.tx_power_dbm,
                overlap_factor=self.settings.overlap_factor,
                mount_height_m=self.settings.ap_mount_height_m,
            ))
            recommended = recommended_ap_count(
                building, budget.max_coverage_radius_m, self.settings.overlap_factor
            )

        logger.debug(
            "Link budget %.1f dB, radius %.1f m, %d AP(s)",
            budget.available_path_loss_db, budget.max_coverage_radius_m, len(access_points),
        )
        return CoverageResult(
            scenario=scenario,
            link_budget=budget,
            access_points=access_points,
            recommended_aps=recommended,
            total_area_m2=building.total_area_m2,
            estimated_users=estimate_users(
                building.total_area_m2, scenario.link.user_density_per_100m2
            ),
        )

    # ------------------------------------------------------------------
    def heatmap(
        self,
        scenario: CoverageScenario,
        view: HeatmapView,
        resolution: Optional[int] = None,
    ) -> Heatmap:
        """Sample *view* for the scenario's APs, memoized by (scenario, view, resolution)."""
        if resolution is None:
            resolution = self.settings.grid_resolution
        return self._heatmap_cached(scenario, view, resolution)

    def _heatmap(self, scenario: CoverageScenario, view: HeatmapView, resolution: int) -> Heatmap:
        result = self.run(scenario)
        return sample_heatmap(
            view,
            scenario.building,
            result.access_points,
            scenario.obstacles,
            resolution=resolution,
            target_rssi_dbm=scenario.link.target_rssi_dbm,
            inter_floor_attenuation_db=self.settings.inter_floor_attenuation_db,
            no_signal_dbm=self.settings.no_signal_dbm,
        )

    def clear_cache(self) -> None:
        self._run_cached.cache_clear()
        self._heatmap_cached.cache_clear()
