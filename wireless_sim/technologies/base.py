"""Technology profile definition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.errors import UnresolvedReferenceError


@dataclass(frozen=True)
class FrequencyBand:
    """One operating band of a technology."""

    band: str
    frequency_mhz: float
    max_range_m: float
    tx_power_dbm: float


@dataclass(frozen=True)
class TechnologyProfile:
    """Reference data for a wireless technology.

    Parameters
    ----------
    key : str
        Registry key, e.g. ``"wifi"``.
    bands : tuple of FrequencyBand
        Supported bands, the first one is the default.
    min_rssi_dbm : float
        Minimum usable received signal strength.
    typical_tx_power_dbm : float
        Default transmit power offered for the technology.
    """

    key: str
    name: str
    bands: Tuple[FrequencyBand, ...]
    min_rssi_dbm: float
    typical_tx_power_dbm: float

    def band(self, label: Optional[str] = None) -> FrequencyBand:
        """Return the band called *label* (default: the first band)."""
        if label is None:
            return self.bands[0]
        for band in self.bands:
            if band.band.lower() == label.lower():
                return band
        raise UnresolvedReferenceError(
            f"{self.name} has no band '{label}'. Choose from: "
            + ", ".join(b.band for b in self.bands)
        )
