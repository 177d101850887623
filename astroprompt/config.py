"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    astroprompt_env: str = "development"
    astroprompt_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Generation log
    log_capacity: int = 10_000
    enable_generation_logging: bool = True

    # Derivation
    derive_features_from_spectral: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
