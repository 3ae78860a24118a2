"""Wi-Fi (IEEE 802.11) profile."""

from __future__ import annotations

from .base import FrequencyBand, TechnologyProfile

WIFI = TechnologyProfile(
    key="wifi",
    name="Wi-Fi (802.11)",
    bands=(
        FrequencyBand("2.4GHz", 2400.0, 100.0, 20.0),
        FrequencyBand("5GHz", 5000.0, 50.0, 23.0),
        FrequencyBand("6GHz", 6000.0, 30.0, 24.0),
    ),
    min_rssi_dbm=-70.0,
    typical_tx_power_dbm=20.0,
)
