"""Free-space path loss and its inverse."""

from __future__ import annotations

import numpy as np

# FSPL constant for distance in metres and frequency in GHz
FSPL_CONSTANT_DB = 32.45


def free_space_path_loss(distance_m: np.ndarray | float, freq_mhz: float) -> np.ndarray | float:
    """Free-Space Path Loss (Friis).

    FSPL(dB) = 20·log10(d) + 20·log10(f) + 32.45
    where *d* in metres, *f* in GHz.

    Distances must be positive; callers handle the co-located case.
    """
    f_ghz = freq_mhz / 1000.0
    d = np.asarray(distance_m, dtype=np.float64)
    pl = 20.0 * np.log10(d) + 20.0 * np.log10(f_ghz) + FSPL_CONSTANT_DB
    if pl.ndim == 0:
        return float(pl)
    return pl


def max_distance_for_path_loss(path_loss_db: float, freq_mhz: float) -> float:
    """Distance (m) at which FSPL reaches *path_loss_db*; 0 when no budget remains.

    d = 10^((PL − 20·log10(f) − 32.45) / 20)
    """
    if not path_loss_db > 0 or not freq_mhz > 0:
        return 0.0
    f_ghz = freq_mhz / 1000.0
    d = 10.0 ** ((path_loss_db - 20.0 * np.log10(f_ghz) - FSPL_CONSTANT_DB) / 20.0)
    if not np.isfinite(d) or d < 0:
        return 0.0
    return float(d)
