# backend/config.py
from __future__ import annotations
from pathlib import Path
import os
from dotenv import load_dotenv

from core.batching import DEFAULT_BATCH_SIZE
from core.exceptions import ConfigurationError

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


class Settings:
    """Read from the environment on access so tests can monkeypatch it."""

    @property
    def GOOGLE_API_KEY(self) -> str:
        return os.getenv("GOOGLE_API_KEY", "")

    @property
    def DISTANCE_BATCH_SIZE(self) -> int:
        raw = os.getenv("DISTANCE_BATCH_SIZE", str(DEFAULT_BATCH_SIZE))
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigurationError(
                f"DISTANCE_BATCH_SIZE must be an integer, got {raw!r}"
            ) from e


settings = Settings()


def get_settings() -> Settings:
    return settings
