from __future__ import annotations

import os
from typing import List, Optional

# Load once at module import


def _flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _int_or_none(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


# Accept the literal answer "0" for every problem (manual testing only).
DEBUG_ZERO_BYPASS = _flag("TUTOR_DEBUG_ZERO_BYPASS")

# Fixed seed for problem generation and reward rolls; unset means OS entropy.
RANDOM_SEED = _int_or_none("TUTOR_RANDOM_SEED")

DEFAULT_SESSION_ID = os.getenv("TUTOR_DEFAULT_SESSION", "local")

CORS_ORIGINS: List[str] = [
    o.strip()
    for o in os.getenv(
        "TUTOR_CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173",
    ).split(",")
    if o.strip()
]
