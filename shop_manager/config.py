"""Shop Manager configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./shop.db"

    # Seed the six sample products when the catalog is empty
    SEED_SAMPLE_DATA: bool = True

    # Web server
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
