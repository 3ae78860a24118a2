"""Bluetooth profile."""

from __future__ import annotations

from .base import FrequencyBand, TechnologyProfile

BLUETOOTH = TechnologyProfile(
    key="bluetooth",
    name="Bluetooth",
    bands=(FrequencyBand("2.4GHz", 2400.0, 10.0, 4.0),),
    min_rssi_dbm=-80.0,
    typical_tx_power_dbm=4.0,
)
