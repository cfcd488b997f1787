# Shapes of the values persisted per session. Anything that fails validation
# on load is replaced by its default.
from __future__ import annotations

from typing import Annotated, Dict, List, Tuple

from pydantic import BaseModel, Field

from progression import MAX_LEVEL, MAX_THRESHOLD

NonNegInt = Annotated[int, Field(ge=0)]
NonNegFloat = Annotated[float, Field(ge=0)]
Level = Annotated[int, Field(ge=1, le=MAX_LEVEL)]
Thresholds = Dict[Level, Annotated[int, Field(ge=1, le=MAX_THRESHOLD)]]


class BoostRecord(BaseModel):
    level: NonNegInt = 0
    multiplier: float = 1.0


class ActiveBoosts(BaseModel):
    xp_boost: BoostRecord = BoostRecord()
    coin_boost: BoostRecord = BoostRecord()


class ProblemRecord(BaseModel):
    id: str
    concept: str
    prompt: str
    vectors: Dict[str, Tuple[float, float]]
    answer: str
    kind: str
    decimals: NonNegInt = 3
    degenerate: bool = False


OwnedItems = List[str]
