# schemas/problems.py
from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel

# ---------- New problem ----------


class NewProblemRequest(BaseModel):
    concept: str


class ProblemOut(BaseModel):
    id: str
    concept: str
    prompt: str
    # role ("v", "a", "b") -> (x, y)
    vectors: Dict[str, Tuple[float, float]]
    kind: str
    degenerate: bool = False


# ---------- Check ----------


class CheckRequest(BaseModel):
    problem_id: str
    answer: str


class CheckResponse(BaseModel):
    ok: bool
    correct: bool
    canonical_answer: str
    coin_reward: int = 0
    leveled_up: bool = False
    new_level: Optional[int] = None
    level_up_bonus: int = 0
    # present after a correct answer (auto-advance)
    next_problem: Optional[ProblemOut] = None
