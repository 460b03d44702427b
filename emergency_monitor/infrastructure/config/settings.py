from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # ── App ──
    APP_NAME: str = "Emergency Monitor API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True

    # ── Logging ──
    LOG_LEVEL: str = "INFO"

    # ── Demo ──
    SEED_ON_STARTUP: bool = False

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
