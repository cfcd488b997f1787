# schemas/store.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class StoreItemOut(BaseModel):
    name: str
    description: str
    price: int
    kind: str
    owned: bool
    affordable: bool
    # boosts only
    level: Optional[int] = None
    multiplier: Optional[float] = None


class StoreOut(BaseModel):
    coins: int
    items: List[StoreItemOut]


class PurchaseRequest(BaseModel):
    item: str


class PurchaseResponse(BaseModel):
    ok: bool
    item: str
    coins: int
    error: Optional[str] = None
