"""Received signal strength at a point inside the building."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from ..core.building import Building, Obstacle, obstacle_attenuation
from ..core.device import AccessPoint
from .pathloss import free_space_path_loss

# Reported when no access point is available
NO_SIGNAL_DBM = -150.0

Point3D = Tuple[float, float, float]


def floor_penetration_loss(
    point_floor: int, ap_floor: int, inter_floor_attenuation_db: float = 15.0
) -> float:
    """Loss (dB) of the slabs between the receiver's floor and the AP's floor."""
    return abs(point_floor - ap_floor) * inter_floor_attenuation_db


def signal_from_access_point(
    point: Point3D,
    ap: AccessPoint,
    building: Building,
    obstacles: Sequence[Obstacle] = (),
    inter_floor_attenuation_db: float = 15.0,
) -> float:
    """Signal strength (dBm) received at *point* from a single access point.

    RSSI = P_tx − FSPL(d_3D) − obstacle loss − floor penetration loss

    Only obstacles on the receiver's floor or the AP's floor are tested.
    """
    x, y, z = point
    distance = math.sqrt((x - ap.x) ** 2 + (y - ap.y) ** 2 + (z - ap.z) ** 2)
    if distance == 0:
        return ap.tx_power_dbm

    fspl = free_space_path_loss(distance, ap.frequency_mhz)

    point_floor = building.floor_at(z)
    floor_loss = floor_penetration_loss(point_floor, ap.floor_level, inter_floor_attenuation_db)

    obs_loss = obstacle_attenuation(
        (ap.x, ap.y), (x, y), obstacles, floors=(point_floor, ap.floor_level)
    )
    return ap.tx_power_dbm - fspl - obs_loss - floor_loss


def compute_signal_strength(
    point: Point3D,
    access_points: Sequence[AccessPoint],
    building: Building,
    obstacles: Sequence[Obstacle] = (),
    inter_floor_attenuation_db: float = 15.0,
    no_signal_dbm: float = NO_SIGNAL_DBM,
) -> float:
    """Best signal strength (dBm) over all access points.

    A receiver associates with whichever AP it hears loudest. With no access
    points the *no_signal_dbm* sentinel is returned.
    """
    best = no_signal_dbm
    for ap in access_points:
        strength = signal_from_access_point(
            point, ap, building, obstacles, inter_floor_attenuation_db
        )
        best = max(best, strength)
    return best
