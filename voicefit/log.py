from __future__ import annotations

import logging

from voicefit.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL from settings to the root logger (first call wins)."""
    global _configured
    if _configured:
        return
    name = (level or get_settings().LOG_LEVEL or "INFO").upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)
    _configured = True
