"""Environment configuration for the api layer.

ENCOUNTERSTATS_CORS_ORIGINS: comma-separated allowed origins.
ENCOUNTERSTATS_DEFAULT_LIMIT: default leaderboard size (0 = no limit).
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",  # Next.js dev server
    "http://127.0.0.1:3000",
]


def get_cors_origins() -> list[str]:
    """Allowed CORS origins from the environment."""
    raw = os.environ.get("ENCOUNTERSTATS_CORS_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or DEFAULT_CORS_ORIGINS


def get_default_limit() -> int:
    """Default leaderboard size from the environment. 0 means unlimited."""
    raw = os.environ.get("ENCOUNTERSTATS_DEFAULT_LIMIT", "0")
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning(f"Ignoring invalid ENCOUNTERSTATS_DEFAULT_LIMIT={raw!r}")
        return 0
