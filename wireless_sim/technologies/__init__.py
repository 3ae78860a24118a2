from typing import Dict

from ..core.errors import UnresolvedReferenceError
from .base import FrequencyBand, TechnologyProfile
from .bluetooth import BLUETOOTH
from .lora import LORA
from .wifi import WIFI
from .zigbee import ZIGBEE

TECHNOLOGIES: Dict[str, TechnologyProfile] = {
    p.key: p for p in (WIFI, BLUETOOTH, LORA, ZIGBEE)
}


def get_technology(key: str) -> TechnologyProfile:
    """Look up a profile by registry key (case-insensitive)."""
    profile = TECHNOLOGIES.get(key.lower())
    if profile is None:
        raise UnresolvedReferenceError(
            f"Unknown technology '{key}'. Choose from: " + ", ".join(TECHNOLOGIES)
        )
    return profile


__all__ = [
    "FrequencyBand", "TechnologyProfile", "TECHNOLOGIES", "get_technology",
    "WIFI", "BLUETOOTH", "LORA", "ZIGBEE",
]
