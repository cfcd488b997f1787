# schemas/concepts.py
from typing import List, Optional

from pydantic import BaseModel


class ConceptOut(BaseModel):
    key: str
    title: str


class ExplainerOut(BaseModel):
    idea: str
    steps: List[str]
    formula: str
    example: Optional[str] = None
    pro_tips: List[str] = []


class ConceptDetail(ConceptOut):
    explainer: ExplainerOut
