"""Application settings pulled from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLANETGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (e.g., plain, json)")

    # Generation Configuration
    default_seed: str = Field(default="planetgen", description="Root seed used when none is given")
    planet_map_base_size: int = Field(default=256, gt=0, description="Side length of generated terrain grids")
    planet_surface_roughness: float = Field(
        default=0.7, gt=0.0, le=1.0, description="Diamond-square range decay per subdivision level"
    )
    planet_height_levels: int = Field(default=256, ge=2, description="Number of discrete terrain height levels")


settings = Settings()
