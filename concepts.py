# Static concept catalog. Order is the order concepts are offered to the learner.

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from problems import (
    Problem,
    angle_problem,
    distance_problem,
    dot_problem,
    magnitude_problem,
    projection_problem,
    unit_problem,
)


@dataclass(frozen=True)
class Explainer:
    idea: str
    steps: Tuple[str, ...]
    formula: str
    example: Optional[str] = None
    pro_tips: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ConceptDefinition:
    key: str
    title: str
    generator: Callable[[random.Random], Problem] = field(repr=False)
    explainer: Explainer = field(repr=False)


CONCEPTS: Tuple[ConceptDefinition, ...] = (
    ConceptDefinition(
        key="magnitude",
        title="Length / Magnitude",
        generator=magnitude_problem,
        explainer=Explainer(
            idea="For v = (x, y), the length is |v| = sqrt(x^2 + y^2).",
            steps=("Square each component.", "Add the squares.", "Take the square root."),
            formula="|v| = sqrt(x^2 + y^2)",
            example="v = (3, 4) → |v| = √(3² + 4²) = √25 = 5",
            pro_tips=(
                "The magnitude is always positive (or zero)",
                "Think of it as the distance from origin to the point",
                "Useful for normalizing vectors to unit length",
            ),
        ),
    ),
    ConceptDefinition(
        key="distance",
        title="Distance (A to B)",
        generator=distance_problem,
        explainer=Explainer(
            idea="Distance from A to B is the length of B − A in 2D.",
            steps=("Compute B − A.", "Find the magnitude of B − A."),
            formula="d(A,B) = |B - A|",
            example="A = (1, 2), B = (4, 6) → B−A = (3, 4) → d = 5",
            pro_tips=(
                "Distance is commutative: d(A,B) = d(B,A)",
                "The vector B−A points from A to B",
            ),
        ),
    ),
    ConceptDefinition(
        key="dot",
        title="Dot Product",
        generator=dot_problem,
        explainer=Explainer(
            idea="For a = (x1, y1), b = (x2, y2): a · b = x1x2 + y1y2.",
            steps=("Multiply component-wise.", "Add the results."),
            formula="a · b = x1x2 + y1y2",
            example="a = (2, 3), b = (4, 1) → a·b = 8 + 3 = 11",
            pro_tips=(
                "Dot product is commutative: a·b = b·a",
                "a·b = |a||b|cos(θ) where θ is the angle between vectors",
                "Zero dot product means vectors are perpendicular",
            ),
        ),
    ),
    ConceptDefinition(
        key="angle",
        title="Angle Between",
        generator=angle_problem,
        explainer=Explainer(
            idea="Use cos θ = (a · b)/(|a||b|).",
            steps=("Compute a · b.", "Compute |a| and |b|.", "Divide and take arccos."),
            formula="θ = arccos((a · b)/(|a||b|))",
            example="a = (1, 0), b = (0, 1) → θ = arccos(0) = 90°",
            pro_tips=(
                "Result is always between 0° and 180°",
                "Parallel vectors: θ = 0°",
                "Perpendicular vectors: θ = 90°",
            ),
        ),
    ),
    ConceptDefinition(
        key="projection",
        title="Projection",
        generator=projection_problem,
        explainer=Explainer(
            idea="Projection of a onto b is (a·b/|b|^2) b.",
            steps=("Compute a·b.", "Divide by |b|^2.", "Scale vector b."),
            formula="proj_b(a) = (a·b/|b|^2)b",
            example="a = (3, 4), b = (1, 0) → proj = (3, 0)",
            pro_tips=(
                "Projection gives the component of a in the direction of b",
                "Result is always parallel to vector b",
            ),
        ),
    ),
    ConceptDefinition(
        key="unit",
        title="Unit Vector",
        generator=unit_problem,
        explainer=Explainer(
            idea="A unit vector has length 1. For v = (x, y), make v/|v|.",
            steps=("Compute |v|.", "Divide each component by |v|."),
            formula="v̂ = v/|v|",
            example="v = (6, 8) → |v| = 10 → v̂ = (0.6, 0.8)",
            pro_tips=(
                "Unit vectors preserve direction but have length 1",
                "Any vector can be written as |v| × v̂",
            ),
        ),
    ),
)


def _index(concepts: Tuple[ConceptDefinition, ...]) -> Dict[str, ConceptDefinition]:
    by_key: Dict[str, ConceptDefinition] = {}
    for c in concepts:
        if c.key in by_key:
            raise ValueError(f"duplicate concept key {c.key!r}")
        by_key[c.key] = c
    return by_key


_BY_KEY = _index(CONCEPTS)


# Public API
def list_concepts() -> List[Dict[str, str]]:
    return [{"key": c.key, "title": c.title} for c in CONCEPTS]


def get_concept(key: str) -> Optional[ConceptDefinition]:
    return _BY_KEY.get(key)


def generate(key: str, rng: random.Random) -> Problem:
    concept = _BY_KEY.get(key)
    if concept is None:
        raise KeyError(key)
    return concept.generator(rng)
