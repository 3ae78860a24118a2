"""Engine settings loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Design constants of the coverage engine.

    Override with ``WIRELESS_SIM_<FIELD>`` environment variables or a ``.env``
    file.
    """

    model_config = SettingsConfigDict(env_prefix="WIRELESS_SIM_", env_file=".env", extra="ignore")

    # Heatmap
    grid_resolution: int = 50
    heatmap_cache_size: int = 32

    # Placement
    overlap_factor: float = 0.8  # 20% designed overlap between AP cells
    ap_mount_height_m: float = 2.7  # typical ceiling mount

    # Propagation
    inter_floor_attenuation_db: float = 15.0
    no_signal_dbm: float = -150.0

    # Link defaults offered when a technology is selected
    default_safety_margin_db: float = 10.0
    default_user_density_per_100m2: float = 10.0

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
