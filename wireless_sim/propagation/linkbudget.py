"""Link budget: tolerable path loss and the resulting coverage radius."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..technologies.base import TechnologyProfile
from .pathloss import max_distance_for_path_loss


@dataclass(frozen=True)
class LinkParameters:
    """User-facing radio parameters driving the link budget.

    Parameters
    ----------
    frequency_mhz : float
        Carrier frequency.
    tx_power_dbm : float
        Access-point transmit power.
    target_rssi_dbm : float
        Signal strength a client should receive at the cell edge.
    safety_margin_db : float
        Loss reserved for effects not modelled explicitly.
    user_density_per_100m2 : float
        Expected clients per 100 m², used only for capacity figures.
    """

    frequency_mhz: float = 2400.0
    tx_power_dbm: float = 20.0
    target_rssi_dbm: float = -70.0
    safety_margin_db: float = 10.0
    user_density_per_100m2: float = 10.0

    @classmethod
    def from_technology(
        cls,
        profile: TechnologyProfile,
        band: Optional[str] = None,
        safety_margin_db: float = 10.0,
        user_density_per_100m2: float = 10.0,
    ) -> "LinkParameters":
        """Seed parameters with a technology's band frequency, typical power and minimum RSSI."""
        selected = profile.band(band)
        return cls(
            frequency_mhz=selected.frequency_mhz,
            tx_power_dbm=profile.typical_tx_power_dbm,
            target_rssi_dbm=profile.min_rssi_dbm,
            safety_margin_db=safety_margin_db,
            user_density_per_100m2=user_density_per_100m2,
        )


@dataclass(frozen=True)
class LinkBudget:
    available_path_loss_db: float
    max_coverage_radius_m: float
    frequency_mhz: float

    @property
    def feasible(self) -> bool:
        return self.available_path_loss_db > 0 and self.max_coverage_radius_m > 0


def compute_link_budget(params: LinkParameters) -> LinkBudget:
    """Derive the available path loss and the free-space coverage radius.

    No obstacle term is included; obstruction is applied per ray.
    """
    budget = params.tx_power_dbm - params.target_rssi_dbm - params.safety_margin_db
    radius = max_distance_for_path_loss(budget, params.frequency_mhz)
    return LinkBudget(
        available_path_loss_db=budget,
        max_coverage_radius_m=radius,
        frequency_mhz=params.frequency_mhz,
    )
