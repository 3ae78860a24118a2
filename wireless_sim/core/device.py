"""Access point placed inside the building volume."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AccessPoint:
    """Simulated transmitter.

    ``z`` is the absolute mounting height, i.e.
    ``floor_level * floor_height_m + mount_height_m``.
    """

    id: str
    x: float
    y: float
    z: float
    floor_level: int
    coverage_radius_m: float
    technology: str
    frequency_mhz: float
    tx_power_dbm: float = 20.0

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)
