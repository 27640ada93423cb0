"""Runtime configuration for Auto Bag Renamer."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="BAG_RENAMER_", env_file=".env", extra="ignore")

    app_name: str = "auto-bag-renamer"
    log_level: str = "INFO"
    config_path: str = Field(
        default="config/AutoBagRenamer.json",
        description="Location of the persisted plugin configuration document.",
    )
    world_size: int = Field(default=4000, description="Edge length of the square map, in metres.")
    grid_cell_size: float = Field(default=146.3, description="Edge length of one map grid cell, in metres.")
    permission_owner: str = "AutoBagRenamer"


settings = Settings()
