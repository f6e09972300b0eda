# mailverdict/config.py
from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List, Optional
import os


class Settings(BaseSettings):
    APP_NAME: str = "mailverdict"

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG: bool = os.environ.get("DEBUG", "False").lower() in ("1", "true", "yes")

    # Simulated check latencies (seconds)
    MX_LOOKUP_DELAY: float = float(os.environ.get("MX_LOOKUP_DELAY", 0.5))
    CATCH_ALL_DELAY: float = float(os.environ.get("CATCH_ALL_DELAY", 0.8))
    MAILBOX_DELAY: float = float(os.environ.get("MAILBOX_DELAY", 1.0))

    # Seed for the pseudo-random verdicts; unset or blank -> seeded from system entropy
    RANDOM_SEED: Optional[int] = None

    CORS_ORIGINS: List[str] = [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    @field_validator("RANDOM_SEED", mode="before")
    @classmethod
    def blank_seed_is_none(cls, value):
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
