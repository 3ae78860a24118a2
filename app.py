"""FastAPI web app for interactive wireless coverage simulation."""

import logging
from dataclasses import asdict
from typing import List, Literal, Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from wireless_sim.analysis import coverage_stats
from wireless_sim.analysis.heatmap import HeatmapView
from wireless_sim.config import get_settings
from wireless_sim.core import MATERIALS, AccessPoint, Building, CoverageError, Obstacle
from wireless_sim.core.simulation import CoverageScenario, CoverageSimulation
from wireless_sim.propagation import LinkParameters, compute_link_budget
from wireless_sim.technologies import TECHNOLOGIES, get_technology

logger = logging.getLogger(__name__)

app = FastAPI(title="Wireless Coverage Simulator")

simulation = CoverageSimulation()

# ============================================================================
# Data models
# ============================================================================

class BuildingIn(BaseModel):
    length_m: float = 50.0
    width_m: float = 30.0
    floor_height_m: float = 3.0
    floor_count: int = 1


class ObstacleIn(BaseModel):
    id: str
    name: str = ""
    material: str = "drywall"
    x: float
    y: float
    width: float
    height: float
    floor_level: int = 0


class AccessPointIn(BaseModel):
    id: str
    x: float
    y: float
    floor_level: int = 0
    mount_height_m: Optional[float] = None


class LinkIn(BaseModel):
    """Unset fields fall back to the selected technology's defaults."""
    frequency_mhz: Optional[float] = None
    tx_power_dbm: Optional[float] = None
    target_rssi_dbm: Optional[float] = None
    safety_margin_db: Optional[float] = None
    user_density_per_100m2: Optional[float] = None


class ViewIn(BaseModel):
    kind: Literal["horizontal", "vertical"] = "horizontal"
    z_m: float = 0.0
    slice_percent: float = 50.0


class SimConfig(BaseModel):
    building: BuildingIn = Field(default_factory=BuildingIn)
    obstacles: List[ObstacleIn] = []
    technology: str = "wifi"
    band: Optional[str] = None
    link: LinkIn = Field(default_factory=LinkIn)
    access_points: Optional[List[AccessPointIn]] = None
    view: ViewIn = Field(default_factory=ViewIn)
    resolution: Optional[int] = None

# ============================================================================
# Scenario assembly
# ============================================================================

def build_link_parameters(config: SimConfig) -> LinkParameters:
    settings = get_settings()
    profile = get_technology(config.technology)
    defaults = LinkParameters.from_technology(
        profile, band=config.band,
        safety_margin_db=settings.default_safety_margin_db,
        user_density_per_100m2=settings.default_user_density_per_100m2,
    )
    overrides = config.link.model_dump(exclude_none=True)
    return LinkParameters(**{**asdict(defaults), **overrides})


def build_scenario(config: SimConfig) -> CoverageScenario:
    settings = get_settings()
    building = Building(**config.building.model_dump())
    obstacles = tuple(
        Obstacle(
            id=o.id, name=o.name or o.id, material_id=o.material,
            x=o.x, y=o.y, width=o.width, height=o.height, floor_level=o.floor_level,
        )
        for o in config.obstacles
    )
    link = build_link_parameters(config)

    manual = None
    if config.access_points is not None:
        radius = compute_link_budget(link).max_coverage_radius_m
        manual = tuple(
            AccessPoint(
                id=a.id, x=a.x, y=a.y,
                z=a.floor_level * building.floor_height_m
                + (a.mount_height_m if a.mount_height_m is not None else settings.ap_mount_height_m),
                floor_level=a.floor_level,
                coverage_radius_m=radius,
                technology=config.technology.lower(),
                frequency_mhz=link.frequency_mhz,
                tx_power_dbm=link.tx_power_dbm,
            )
            for a in config.access_points
        )
    return CoverageScenario(
        building=building, obstacles=obstacles, technology=config.technology.lower(),
        link=link, access_points=manual,
    )


def run_simulation(config: SimConfig) -> dict:
    scenario = build_scenario(config)
    result = simulation.run(scenario)
    view = HeatmapView(
        kind=config.view.kind, z_m=config.view.z_m, slice_percent=config.view.slice_percent,
    )
    heatmap = simulation.heatmap(scenario, view, config.resolution)
    logger.info(
        "Simulated %s: %d AP(s), %s view %dx%d",
        scenario.technology, len(result.access_points), view.kind, *heatmap.shape,
    )
    return {
        "link": asdict(scenario.link),
        "summary": result.summary(),
        "access_points": [asdict(ap) for ap in result.access_points],
        "view": asdict(view),
        "xs": heatmap.xs.tolist(),
        "vs": heatmap.vs.tolist(),
        "strength_grid": heatmap.strength.tolist(),
        "category_grid": heatmap.categories,
        "grid_shape": list(heatmap.shape),
        "stats": coverage_stats(heatmap),
    }

# ============================================================================
# API endpoints
# ============================================================================

@app.post("/api/simulate")
async def simulate(config: SimConfig):
    try:
        result = run_simulation(config)
        return {"ok": True, "result": result}
    except CoverageError as e:
        logger.info("Rejected simulation request: %s", e)
        return {"ok": False, "error": str(e), "kind": type(e).__name__}


@app.get("/api/technologies")
async def technologies():
    return {
        key: {
            "name": p.name,
            "min_rssi_dbm": p.min_rssi_dbm,
            "typical_tx_power_dbm": p.typical_tx_power_dbm,
            "bands": [asdict(b) for b in p.bands],
        }
        for key, p in TECHNOLOGIES.items()
    }


@app.get("/api/materials")
async def materials():
    return [asdict(m) for m in MATERIALS.values()]


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=get_settings().log_level)
    uvicorn.run(app, host="127.0.0.1", port=8001)
