from __future__ import annotations

from dataclasses import asdict
from typing import List

from fastapi import APIRouter, HTTPException

from concepts import get_concept, list_concepts
from schemas.concepts import ConceptDetail, ConceptOut

router = APIRouter(prefix="/concepts", tags=["concepts"])


@router.get("", response_model=List[ConceptOut])
def concepts_list():
    return list_concepts()


@router.get("/{key}", response_model=ConceptDetail)
def concept_detail(key: str):
    c = get_concept(key)
    if not c:
        raise HTTPException(status_code=404, detail="concept not found")
    return {"key": c.key, "title": c.title, "explainer": asdict(c.explainer)}
