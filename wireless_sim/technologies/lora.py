"""LoRa profile (EU868 / US915 ISM bands)."""

from __future__ import annotations

from .base import FrequencyBand, TechnologyProfile

LORA = TechnologyProfile(
    key="lora",
    name="LoRa",
    bands=(
        FrequencyBand("868MHz", 868.0, 2000.0, 14.0),
        FrequencyBand("915MHz", 915.0, 2000.0, 14.0),
    ),
    min_rssi_dbm=-120.0,
    typical_tx_power_dbm=14.0,
)
