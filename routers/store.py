from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from deps.session import open_tutor, session_id
from economy import get_store_item, store_listing
from schemas.store import PurchaseRequest, PurchaseResponse, StoreOut

logger = logging.getLogger("vector-tutor.api")

router = APIRouter(prefix="/store", tags=["store"])


@router.get("", response_model=StoreOut)
def store(sid: Annotated[str, Depends(session_id)]):
    with open_tutor(sid, write=False) as tutor:
        return {"coins": tutor.economy.coins, "items": store_listing(tutor.economy)}


@router.post("/purchase", response_model=PurchaseResponse)
def purchase(req: PurchaseRequest, sid: Annotated[str, Depends(session_id)]):
    item = get_store_item(req.item)
    if not item:
        raise HTTPException(status_code=404, detail="unknown store item")

    with open_tutor(sid) as tutor:
        already_owned = not item.boost and item.name in tutor.economy.owned_items
        ok = tutor.purchase(item.name)
        coins = tutor.economy.coins

    if ok:
        return {"ok": True, "item": item.name, "coins": coins}
    error = "already owned" if already_owned else "insufficient coins"
    logger.info("session=%s purchase of %r denied: %s", sid, item.name, error)
    return {"ok": False, "item": item.name, "coins": coins, "error": error}
