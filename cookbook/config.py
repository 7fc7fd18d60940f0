"""Cookbook configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Logging
    log_level: str = "INFO"

    # HTTP demo server
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Build the demo service at import time instead of on first access
    eager_demo_service: bool = False

    class Config:
        env_prefix = "COOKBOOK_"


settings = Settings()
