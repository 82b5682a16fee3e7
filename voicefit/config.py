from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Optional JSON file replacing the packaged exercise catalog
    CATALOG_PATH: Optional[str] = None

    # Onboarding defaults
    DEFAULT_TRAINING_DAYS: int = 3
    DEFAULT_REST_SECONDS: int = 120

    # Coaching tips
    COACHING_SEED: Optional[int] = None
    RECENT_WORKOUTS_WINDOW: int = 3


_SECRET_KEYS = ["APP_ENV", "LOG_LEVEL", "CATALOG_PATH", "COACHING_SEED"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Streamlit Cloud secrets may provide values missing from the environment
    overrides: dict = {}
    try:
        import streamlit as _st  # type: ignore
        sec = getattr(_st, "secrets", None)
        if sec:
            for k in _SECRET_KEYS:
                if k in sec and sec[k] is not None and sec[k] != "":
                    overrides[k] = sec[k]
    except Exception as exc:
        # No secrets.toml outside Streamlit; environment values still apply
        logger.debug("Streamlit secrets unavailable: %s", exc)
    return Settings(**overrides)  # type: ignore[call-arg]
