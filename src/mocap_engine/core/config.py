"""Engine configuration via Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SolverSettings(BaseSettings):
    """Length-constraint solver parameters."""

    model_config = SettingsConfigDict(env_prefix="SOLVER_")

    iterations: int = Field(default=5, ge=0)


class SmoothingSettings(BaseSettings):
    """Temporal smoothing filter parameters."""

    model_config = SettingsConfigDict(env_prefix="SMOOTHING_")

    window_size: int = Field(default=5, ge=1)


class FusionSettings(BaseSettings):
    """Marker / markerless source fusion parameters."""

    model_config = SettingsConfigDict(env_prefix="FUSION_")

    blend_ratio: float = 0.5


class SyncSettings(BaseSettings):
    """Temporal synchronizer parameters."""

    model_config = SettingsConfigDict(env_prefix="SYNC_")

    compare_window: int = Field(default=10, ge=0)


class LoggingSettings(BaseSettings):
    """Logging configuration for the mocap_engine logger."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    file: str | None = None
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    solver: SolverSettings = Field(default_factory=SolverSettings)
    smoothing: SmoothingSettings = Field(default_factory=SmoothingSettings)
    fusion: FusionSettings = Field(default_factory=FusionSettings)
    sync: SyncSettings = Field(default_factory=SyncSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached engine settings instance."""
    return Settings()
