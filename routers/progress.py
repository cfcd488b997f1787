from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from deps.session import open_tutor, session_id
from schemas.progress import ProgressOut

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressOut)
def get_progress(sid: Annotated[str, Depends(session_id)]):
    with open_tutor(sid, write=False) as tutor:
        return tutor.progress()


@router.post("/reset", response_model=ProgressOut)
def reset_progress(sid: Annotated[str, Depends(session_id)]):
    with open_tutor(sid) as tutor:
        tutor.reset_all()
        return tutor.progress()
