from __future__ import annotations

import random
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]
ENV_FILES = [BASE_DIR / ".env.local", BASE_DIR / ".env"]


class Settings(BaseSettings):
    directory_url: str = "https://jsonplaceholder.typicode.com/users"
    directory_timeout_s: float | None = None
    availability_probability: float = 0.7
    random_seed: int | None = None
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=[str(path) for path in ENV_FILES],
        case_sensitive=False,
        env_prefix="",
    )


def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def make_rng(seed: int | None = None) -> random.Random:
    """Random source for availability; seeded runs give repeatable donor lists."""
    return random.Random(seed)
