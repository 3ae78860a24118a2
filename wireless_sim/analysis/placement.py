"""Access-point count and placement planning."""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

from ..core.building import Building
from ..core.device import AccessPoint
from ..core.errors import InfeasibleLinkBudgetError
from ..propagation.linkbudget import LinkBudget

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# AP counts
# ------------------------------------------------------------------

def coverage_area_per_ap(max_coverage_radius_m: float, overlap_factor: float = 0.8) -> float:
    """Usable area (m²) of one AP cell after reserving overlap with neighbours.

    Raises
    ------
    InfeasibleLinkBudgetError
        If the radius is zero or the overlap factor is outside ``(0, 1]``.
    """
    if not max_coverage_radius_m > 0:
        raise InfeasibleLinkBudgetError(
            "Link budget leaves no coverage radius; raise TX power or lower the target RSSI"
        )
    if not 0 < overlap_factor <= 1:
        raise InfeasibleLinkBudgetError(f"Overlap factor must be in (0, 1], got {overlap_factor}")
    return math.pi * max_coverage_radius_m ** 2 * overlap_factor


def aps_per_floor(
    building: Building, max_coverage_radius_m: float, overlap_factor: float = 0.8
) -> int:
    """APs needed to cover one floor, at least one."""
    area = coverage_area_per_ap(max_coverage_radius_m, overlap_factor)
    return max(1, math.ceil(building.floor_area_m2 / area))


def recommended_ap_count(
    building: Building, max_coverage_radius_m: float, overlap_factor: float = 0.8
) -> int:
    """APs needed for the whole building volume, at least one."""
    area = coverage_area_per_ap(max_coverage_radius_m, overlap_factor)
    return max(1, math.ceil(building.total_area_m2 / area))


# ------------------------------------------------------------------
# Layout
# ------------------------------------------------------------------

def grid_positions(building: Building, count: int) -> List[Tuple[float, float]]:
    """Centres of *count* cells of a grid laid over the floor plan, row-major.

    The column count follows the floor's aspect ratio so cells stay roughly
    square; a single AP sits at the geometric centre.
    """
    length, width = building.length_m, building.width_m
    if count == 1:
        return [(length / 2, width / 2)]

    cols = math.ceil(math.sqrt(count * length / width))
    rows = math.ceil(count / cols)
    spacing_x = length / cols
    spacing_y = width / rows

    positions: List[Tuple[float, float]] = []
    for i in range(count):
        col = i % cols
        row = i // cols
        positions.append((spacing_x * (col + 0.5), spacing_y * (row + 0.5)))
    return positions


def plan_access_points(
    building: Building,
    link_budget: LinkBudget,
    technology: str = "wifi",
    tx_power_dbm: float = 20.0,
    overlap_factor: float = 0.8,
    mount_height_m: float = 2.7,
) -> List[AccessPoint]:
    """Place access points floor by floor.

    Every floor receives the same grid of ``aps_per_floor`` APs mounted
    *mount_height_m* above its slab. The list is then capped to the
    whole-building :func:`recommended_ap_count`, dropping placements from the
    top floor down.

    Raises
    ------
    InvalidDimensionError
        If the building has an unusable dimension.
    InfeasibleLinkBudgetError
        If the link budget is non-positive or yields a zero radius.
    """
    building.validate()
    if not link_budget.available_path_loss_db > 0:
        raise InfeasibleLinkBudgetError(
            f"Available path loss is {link_budget.available_path_loss_db:.1f} dB; "
            "the target RSSI cannot be met at any distance"
        )
    radius = link_budget.max_coverage_radius_m
    per_floor = aps_per_floor(building, radius, overlap_factor)
    total = recommended_ap_count(building, radius, overlap_factor)
    positions = grid_positions(building, per_floor)

    placements: List[AccessPoint] = []
    for floor in range(building.floor_count):
        z = floor * building.floor_height_m + mount_height_m
        for i, (x, y) in enumerate(positions):
            placements.append(AccessPoint(
                id=f"{floor + 1}-{i + 1}",
                x=x, y=y, z=z,
                floor_level=floor,
                coverage_radius_m=radius,
                technology=technology,
                frequency_mhz=link_budget.frequency_mhz,
                tx_power_dbm=tx_power_dbm,
            ))

    if len(placements) > total:
        logger.warning(
            "Per-floor layout needs %d APs but the building total is %d; trimming upper floors",
            len(placements), total,
        )
        placements = placements[:total]

    logger.debug(
        "Planned %d AP(s): %d per floor over %d floor(s), radius %.1f m",
        len(placements), per_floor, building.floor_count, radius,
    )
    return placements
