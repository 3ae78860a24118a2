"""Zigbee (IEEE 802.15.4) profile."""

from __future__ import annotations

from .base import FrequencyBand, TechnologyProfile

ZIGBEE = TechnologyProfile(
    key="zigbee",
    name="Zigbee",
    bands=(FrequencyBand("2.4GHz", 2400.0, 20.0, 10.0),),
    min_rssi_dbm=-85.0,
    typical_tx_power_dbm=10.0,
)
