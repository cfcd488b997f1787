from __future__ import annotations

import logging
from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from concepts import get_concept
from deps.session import open_tutor, session_id
from problems import Problem, operand_pairs
from schemas.problems import CheckRequest, CheckResponse, NewProblemRequest, ProblemOut

logger = logging.getLogger("vector-tutor.api")

router = APIRouter(prefix="/problems", tags=["problems"])

SessionId = Annotated[str, Depends(session_id)]


def _problem_out(p: Problem) -> Dict[str, Any]:
    # canonical answer stays server-side until the learner submits
    return {
        "id": p.id,
        "concept": p.concept,
        "prompt": p.prompt,
        "vectors": operand_pairs(p),
        "kind": p.kind,
        "degenerate": p.degenerate,
    }


@router.post("", response_model=ProblemOut)
def new_problem(req: NewProblemRequest, sid: SessionId):
    if get_concept(req.concept) is None:
        raise HTTPException(status_code=404, detail="unknown concept")
    with open_tutor(sid) as tutor:
        p = tutor.new_problem(req.concept)
    return _problem_out(p)


@router.get("/current", response_model=ProblemOut)
def current_problem(sid: SessionId):
    with open_tutor(sid, write=False) as tutor:
        p = tutor.problem
    if p is None:
        raise HTTPException(status_code=404, detail="no active problem")
    return _problem_out(p)


@router.post("/check", response_model=CheckResponse)
def check_answer(req: CheckRequest, sid: SessionId):
    with open_tutor(sid) as tutor:
        if tutor.problem is None:
            raise HTTPException(status_code=404, detail="no active problem")
        if tutor.problem.id != req.problem_id:
            # already answered (auto-advanced) or replaced by a newer problem
            raise HTTPException(status_code=409, detail="stale problem id")
        concept = tutor.problem.concept
        result = tutor.submit_answer(req.answer)

    logger.info(
        "session=%s concept=%s correct=%s coins=%+d", sid, concept, result["correct"], result["coin_reward"]
    )
    nxt = result.pop("next_problem")
    return {"ok": True, **result, "next_problem": _problem_out(nxt) if nxt else None}
