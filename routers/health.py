# routers/health.py
import logging
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from alembic.config import Config
from alembic.script import ScriptDirectory
from db import engine
from models import StateValue

logger = logging.getLogger("vector-tutor.api")

router = APIRouter(prefix="/health", tags=["health"])

_ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"
STATE_TABLE = StateValue.__tablename__


@router.get("/db")
def health_db():
    """Database reachable and the session state table in place."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            has_state = inspect(conn).has_table(STATE_TABLE)
    except SQLAlchemyError as e:
        logger.exception("database health check failed")
        raise HTTPException(status_code=500, detail=f"db_error: {type(e).__name__}")
    if not has_state:
        logger.warning("table %r is missing; run migrations", STATE_TABLE)
    return {"ok": has_state, "state_table": has_state}


def _alembic_heads() -> List[str]:
    cfg = Config(str(_ALEMBIC_INI))
    cfg.set_main_option("script_location", str(_ALEMBIC_INI.parent / "alembic"))
    return list(ScriptDirectory.from_config(cfg).get_heads())


def _db_revision() -> Optional[str]:
    with engine.connect() as conn:
        if not inspect(conn).has_table("alembic_version"):
            return None
        return conn.execute(text("SELECT version_num FROM alembic_version")).scalar_one_or_none()


@router.get("/migrations")
def health_migrations():
    """Compare the database revision with the migration heads shipped in ``alembic/``."""
    try:
        heads = _alembic_heads()
    except Exception:
        logger.exception("could not read migration heads from %s", _ALEMBIC_INI)
        heads = []

    try:
        db_version = _db_revision()
    except SQLAlchemyError as e:
        logger.exception("could not read the database revision")
        return {
            "ok": False,
            "synced": False,
            "error": f"db_error: {type(e).__name__}",
            "db_version": None,
            "code_heads": heads,
        }

    # create_all() databases (local SQLite, tests) carry no revision
    synced = bool(heads) and db_version in heads
    return {"ok": synced, "synced": synced, "db_version": db_version, "code_heads": heads}
