# schemas/progress.py
from typing import Dict, List

from pydantic import BaseModel

from schemas.state import BoostRecord


class ProgressOut(BaseModel):
    streak: int
    total: int
    correct: int
    level: int
    xp: float
    xp_required: int
    coins: int
    boosts: Dict[str, BoostRecord]
    owned_items: List[str]
