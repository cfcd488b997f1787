"""
Named-value persistence for tutor sessions.

The tutor only needs ``get(key)`` / ``set(key, value)`` with JSON-compatible
values. ``SqlStateStore`` keeps them in the ``state_values`` table, one row per
(session, key); ``MemoryStore`` is a dict, used by tests and scripts.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from models import StateValue

logger = logging.getLogger("vector-tutor.state")

T = TypeVar("T")

# Persisted keys
STREAK = "streak"
TOTAL = "total"
CORRECT = "correct"
LEVEL = "level"
XP = "xp"
XP_THRESHOLDS = "xp_thresholds"
COINS = "coins"
OWNED_ITEMS = "owned_items"
ACTIVE_BOOSTS = "active_boosts"
ACTIVE_PROBLEM = "active_problem"

ALL_KEYS = (
    STREAK,
    TOTAL,
    CORRECT,
    LEVEL,
    XP,
    XP_THRESHOLDS,
    COINS,
    OWNED_ITEMS,
    ACTIVE_BOOSTS,
    ACTIVE_PROBLEM,
)


class StateStore(Protocol):
    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self.values: Dict[str, Any] = dict(values or {})

    def get(self, key: str) -> Any:
        return self.values.get(key)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value


class SqlStateStore:
    """Reads and writes go through the caller's SQLAlchemy session; the caller commits."""

    def __init__(self, db: Session, session_id: str):
        self.db = db
        self.session_id = session_id

    def get(self, key: str) -> Any:
        row = self.db.get(StateValue, (self.session_id, key))
        return None if row is None else row.value

    def set(self, key: str, value: Any) -> None:
        row = self.db.get(StateValue, (self.session_id, key))
        if row is None:
            self.db.add(StateValue(session_id=self.session_id, key=key, value=value))
        else:
            row.value = value


def read_value(store: StateStore, key: str, adapter: TypeAdapter, default: T) -> T:
    """Validated value for ``key``; ``default`` when missing or malformed."""
    raw = store.get(key)
    if raw is None:
        return default
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        logger.warning("ignoring corrupt %r value (%d errors); using default", key, e.error_count())
        return default
