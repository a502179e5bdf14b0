"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    quadcanvas_log_level: str = "info"

    # Upper bound for fill recursion; each level doubles the linear resolution
    max_fill_depth: int = 32

    # Default text grid size for the CLI
    grid_resolution: int = 32

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def get_settings() -> Settings:
    return settings
