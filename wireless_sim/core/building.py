"""Building volume, rectangular obstacles and the ray/obstacle intersection test."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidDimensionError, UnresolvedReferenceError
from .materials import MATERIALS, WallMaterial, get_material

Point2D = Tuple[float, float]

# |denominator| below this means the two segments are treated as parallel
PARALLEL_EPSILON = 1e-10


@dataclass(frozen=True)
class Building:
    """Rectangular multi-storey building.

    Parameters
    ----------
    length_m : float
        Extent along the x axis (metres).
    width_m : float
        Extent along the y axis (metres).
    floor_height_m : float
        Storey height (metres).
    floor_count : int
        Number of storeys, ground floor is level 0.
    """

    length_m: float = 50.0
    width_m: float = 30.0
    floor_height_m: float = 3.0
    floor_count: int = 1

    def validate(self) -> None:
        """Raise :class:`InvalidDimensionError` unless every dimension is usable."""
        for name in ("length_m", "width_m", "floor_height_m"):
            value = getattr(self, name)
            if not value > 0:
                raise InvalidDimensionError(f"Building {name} must be > 0, got {value}")
        if self.floor_count < 1:
            raise InvalidDimensionError(
                f"Building floor_count must be >= 1, got {self.floor_count}"
            )

    @property
    def floor_area_m2(self) -> float:
        return self.length_m * self.width_m

    @property
    def total_area_m2(self) -> float:
        return self.floor_area_m2 * self.floor_count

    @property
    def total_height_m(self) -> float:
        return self.floor_height_m * self.floor_count

    def floor_at(self, z: float) -> int:
        """Storey index containing height *z*; a point exactly on a slab belongs to the storey above."""
        return math.floor(z / self.floor_height_m)


@dataclass(frozen=True)
class Obstacle:
    """Axis-aligned rectangular barrier on one floor.

    ``(x, y)`` is the minimum corner; the rectangle spans
    ``[x, x + width] × [y, y + height]``.
    """

    id: str
    name: str
    material_id: str
    x: float
    y: float
    width: float
    height: float
    floor_level: int = 0

    @property
    def material(self) -> WallMaterial:
        return get_material(self.material_id)

    @property
    def attenuation_db(self) -> float:
        return self.material.attenuation_db

    def corners(self) -> List[Point2D]:
        x2, y2 = self.x + self.width, self.y + self.height
        return [(self.x, self.y), (x2, self.y), (x2, y2), (self.x, y2)]

    def edges(self) -> List[Tuple[Point2D, Point2D]]:
        c = self.corners()
        return [(c[i], c[(i + 1) % 4]) for i in range(4)]


def validate_obstacles(obstacles: Iterable[Obstacle], building: Building) -> None:
    """Fail fast on obstacles the engine cannot interpret.

    Raises
    ------
    UnresolvedReferenceError
        Unknown material id, or floor level outside ``[0, floor_count)``.
    InvalidDimensionError
        Non-positive size, or position outside the floor plan.
    """
    for obs in obstacles:
        if obs.material_id not in MATERIALS:
            raise UnresolvedReferenceError(
                f"Obstacle '{obs.id}' references unknown material '{obs.material_id}'"
            )
        if not 0 <= obs.floor_level < building.floor_count:
            raise UnresolvedReferenceError(
                f"Obstacle '{obs.id}' is on floor {obs.floor_level}, "
                f"building has {building.floor_count} floor(s)"
            )
        if not (obs.width > 0 and obs.height > 0):
            raise InvalidDimensionError(
                f"Obstacle '{obs.id}' must have positive width and height"
            )
        if not (0 <= obs.x <= building.length_m and 0 <= obs.y <= building.width_m):
            raise InvalidDimensionError(
                f"Obstacle '{obs.id}' at ({obs.x}, {obs.y}) lies outside the floor plan"
            )


def segments_intersect(p1: Point2D, p2: Point2D, p3: Point2D, p4: Point2D) -> bool:
    """Return *True* if segment (p1→p2) intersects segment (p3→p4).

    Parametric test: solve ``p1 + t·(p2-p1) = p3 + u·(p4-p3)`` and accept when
    both ``t`` and ``u`` lie in ``[0, 1]``. Parallel or collinear segments
    (denominator ≈ 0) never intersect.
    """
    denom = (p1[0] - p2[0]) * (p3[1] - p4[1]) - (p1[1] - p2[1]) * (p3[0] - p4[0])
    if abs(denom) < PARALLEL_EPSILON:
        return False

    t = ((p1[0] - p3[0]) * (p3[1] - p4[1]) - (p1[1] - p3[1]) * (p3[0] - p4[0])) / denom
    u = -((p1[0] - p2[0]) * (p1[1] - p3[1]) - (p1[1] - p2[1]) * (p1[0] - p3[0])) / denom
    return 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0


def ray_crosses_obstacle(source: Point2D, target: Point2D, obstacle: Obstacle) -> bool:
    """True if the segment source→target crosses any edge of *obstacle*."""
    return any(segments_intersect(source, target, a, b) for a, b in obstacle.edges())


def obstacles_on_floors(
    obstacles: Iterable[Obstacle], floors: Iterable[int]
) -> List[Obstacle]:
    wanted = set(floors)
    return [obs for obs in obstacles if obs.floor_level in wanted]


def obstacle_attenuation(
    source: Point2D,
    target: Point2D,
    obstacles: Sequence[Obstacle],
    floors: Optional[Iterable[int]] = None,
) -> float:
    """Cumulative attenuation (dB) of obstacles crossed on the segment source→target.

    Each crossed obstacle adds its full material loss once, regardless of how
    many of its edges the ray passes. When *floors* is given, only obstacles on
    those floors are tested.
    """
    candidates = obstacles if floors is None else obstacles_on_floors(obstacles, floors)
    total = 0.0
    for obs in candidates:
        if ray_crosses_obstacle(source, target, obs):
            total += obs.attenuation_db
    return total
