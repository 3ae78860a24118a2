"""Grid sampling of signal strength over a floor-plan slice or a vertical cross-section."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence

import numpy as np

from ..core.building import Building, Obstacle, validate_obstacles
from ..core.device import AccessPoint
from ..core.errors import InvalidDimensionError
from ..propagation.signal import NO_SIGNAL_DBM, compute_signal_strength

logger = logging.getLogger(__name__)

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


class SignalQuality(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    VERY_POOR = "Very Poor"


# Lower bound of each category relative to the target RSSI (dB)
QUALITY_THRESHOLDS_DB = (
    (10.0, SignalQuality.EXCELLENT),
    (0.0, SignalQuality.GOOD),
    (-10.0, SignalQuality.FAIR),
    (-20.0, SignalQuality.POOR),
)

SIGNAL_COLORS: Dict[SignalQuality, str] = {
    SignalQuality.EXCELLENT: "#22c55e",
    SignalQuality.GOOD: "#84cc16",
    SignalQuality.FAIR: "#eab308",
    SignalQuality.POOR: "#f97316",
    SignalQuality.VERY_POOR: "#ef4444",
}


def classify_signal(strength_dbm: float, target_rssi_dbm: float = -70.0) -> SignalQuality:
    """Map a signal strength to a quality category relative to *target_rssi_dbm*."""
    for offset, quality in QUALITY_THRESHOLDS_DB:
        if strength_dbm >= target_rssi_dbm + offset:
            return quality
    return SignalQuality.VERY_POOR


@dataclass(frozen=True)
class HeatmapView:
    """Which plane to sample.

    A horizontal view fixes the height ``z_m`` and scans x and y. A vertical
    view fixes y at ``slice_percent`` of the building width and scans x and z
    over the full stacked height. The field the other kind does not use is
    reset to its default so equal planes compare and hash equal.
    """

    kind: str = HORIZONTAL
    z_m: float = 0.0
    slice_percent: float = 50.0

    def __post_init__(self) -> None:
        if self.kind == VERTICAL:
            object.__setattr__(self, "z_m", 0.0)
        elif self.kind == HORIZONTAL:
            object.__setattr__(self, "slice_percent", 50.0)

    @classmethod
    def horizontal(cls, z_m: float = 0.0) -> "HeatmapView":
        return cls(kind=HORIZONTAL, z_m=z_m)

    @classmethod
    def horizontal_floor(
        cls, floor_level: int, building: Building, height_above_floor_m: float = 0.0
    ) -> "HeatmapView":
        return cls(kind=HORIZONTAL, z_m=floor_level * building.floor_height_m + height_above_floor_m)

    @classmethod
    def vertical(cls, slice_percent: float = 50.0) -> "HeatmapView":
        return cls(kind=VERTICAL, slice_percent=slice_percent)

    def validate(self) -> None:
        if self.kind not in (HORIZONTAL, VERTICAL):
            raise InvalidDimensionError(f"Unknown heatmap view '{self.kind}'")
        if self.kind == VERTICAL and not 0 <= self.slice_percent <= 100:
            raise InvalidDimensionError(
                f"Vertical slice must be within 0-100 % of the width, got {self.slice_percent}"
            )


@dataclass(frozen=True)
class SamplePoint:
    x: float
    y: float
    z: float
    signal_strength_dbm: float
    quality: SignalQuality


@dataclass
class Heatmap:
    """Sampled grid for one view.

    ``strength`` has shape ``(len(vs), len(xs))``: rows follow y for a
    horizontal view and z for a vertical one, columns follow x.
    """

    view: HeatmapView
    xs: np.ndarray
    vs: np.ndarray
    strength: np.ndarray
    samples: List[List[SamplePoint]] = field(default_factory=list)
    target_rssi_dbm: float = -70.0

    @property
    def shape(self) -> tuple[int, int]:
        return self.strength.shape  # type: ignore[return-value]

    @property
    def categories(self) -> List[List[str]]:
        return [[s.quality.value for s in row] for row in self.samples]


def _cell_centres(extent: float, resolution: int) -> np.ndarray:
    step = extent / resolution
    return (np.arange(resolution) + 0.5) * step


def sample_heatmap(
    view: HeatmapView,
    building: Building,
    access_points: Sequence[AccessPoint],
    obstacles: Sequence[Obstacle] = (),
    resolution: int = 50,
    target_rssi_dbm: float = -70.0,
    inter_floor_attenuation_db: float = 15.0,
    no_signal_dbm: float = NO_SIGNAL_DBM,
) -> Heatmap:
    """Evaluate the signal at the centre of each of ``resolution × resolution`` cells.

    Inputs are not modified; identical inputs give identical grids.

    Raises
    ------
    InvalidDimensionError
        Unusable building, view or resolution.
    UnresolvedReferenceError
        An obstacle with an unknown material or floor.
    """
    building.validate()
    view.validate()
    if resolution < 1:
        raise InvalidDimensionError(f"Grid resolution must be >= 1, got {resolution}")
    validate_obstacles(obstacles, building)

    xs = _cell_centres(building.length_m, resolution)
    if view.kind == HORIZONTAL:
        vs = _cell_centres(building.width_m, resolution)
    else:
        vs = _cell_centres(building.total_height_m, resolution)
    slice_y = view.slice_percent / 100.0 * building.width_m

    strength = np.empty((resolution, resolution), dtype=np.float64)
    samples: List[List[SamplePoint]] = []
    for row, v in enumerate(vs):
        row_samples: List[SamplePoint] = []
        for col, x in enumerate(xs):
            if view.kind == HORIZONTAL:
                point = (float(x), float(v), view.z_m)
            else:
                point = (float(x), slice_y, float(v))
            s = compute_signal_strength(
                point, access_points, building, obstacles,
                inter_floor_attenuation_db=inter_floor_attenuation_db,
                no_signal_dbm=no_signal_dbm,
            )
            strength[row, col] = s
            row_samples.append(SamplePoint(*point, s, classify_signal(s, target_rssi_dbm)))
        samples.append(row_samples)
    # grids are shared through the simulation cache
    strength.flags.writeable = False

    logger.debug(
        "Sampled %s heatmap %dx%d with %d AP(s) and %d obstacle(s)",
        view.kind, resolution, resolution, len(access_points), len(obstacles),
    )
    return Heatmap(
        view=view, xs=xs, vs=vs, strength=strength,
        samples=samples, target_rssi_dbm=target_rssi_dbm,
    )
