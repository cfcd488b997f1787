from __future__ import annotations

import random
import threading
import weakref
from contextlib import contextmanager
from typing import Annotated, Iterator

from fastapi import Header, HTTPException

import config
from db import SessionLocal
from state_store import SqlStateStore
from tutor import TutorSession

# shared by every request, seeded once from TUTOR_RANDOM_SEED
_rng = random.Random(config.RANDOM_SEED)

# entries disappear once no request holds or waits on the lock
_locks: weakref.WeakValueDictionary[str, threading.Lock] = weakref.WeakValueDictionary()
_locks_guard = threading.Lock()


def session_id(
    x_session_id: Annotated[str | None, Header(alias="x-session-id")] = None,
) -> str:
    """
    Which learner's state a request reads and writes. Not authentication:
    any client may name any session.
    """
    sid = (x_session_id or config.DEFAULT_SESSION_ID).strip()
    if not sid or len(sid) > 64:
        raise HTTPException(status_code=400, detail="invalid x-session-id")
    return sid


def _lock_for(sid: str) -> threading.Lock:
    with _locks_guard:
        lock = _locks.get(sid)
        if lock is None:
            lock = _locks[sid] = threading.Lock()
        return lock


@contextmanager
def open_tutor(sid: str, write: bool = True) -> Iterator[TutorSession]:
    """
    Load the session, hand it to the caller and, if ``write``, save and commit
    once the block finishes without raising. Mutations of one session id are
    serialized.
    """
    lock = _lock_for(sid)
    with lock, SessionLocal() as db:
        store = SqlStateStore(db, sid)
        tutor = TutorSession.load(store, rng=_rng)
        yield tutor
        if write:
            tutor.save(store)
            db.commit()
