from __future__ import annotations

import logging
import math
import random
import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

import vectors as vm
from verify import INTEGER, SCALAR, VECTOR, fixed, fixed_vector, verify
from vectors import Vector2

logger = logging.getLogger("vector-tutor.problems")


@dataclass(frozen=True)
class Problem:
    concept: str
    prompt: str
    vectors: Mapping[str, Vector2]
    answer: str
    kind: str
    decimals: int = 3
    # zero-length operand hit a fallback policy (NaN angle, zero projection/unit)
    degenerate: bool = False
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def verify(self, text: str, debug_zero: bool = False) -> bool:
        return verify(self.kind, self.answer, text, self.decimals, debug_zero=debug_zero)

    def __post_init__(self):
        # read-only copy; the caller's dict is not shared
        object.__setattr__(self, "vectors", MappingProxyType(dict(self.vectors)))


def rand_vector(rng: random.Random, lo: int, hi: int) -> Vector2:
    # inclusive on both ends
    return Vector2(rng.randint(lo, hi), rng.randint(lo, hi))


def _is_zero(v: Vector2) -> bool:
    return v[0] == 0 and v[1] == 0


def _flag_degenerate(concept: str, operands: Dict[str, Vector2]) -> None:
    logger.warning(
        "degenerate %s problem generated: %s",
        concept,
        ", ".join(f"{k}={v}" for k, v in operands.items()),
    )


# --- Generators -------------------------------------------------------------------


def magnitude_problem(rng: random.Random) -> Problem:
    v = rand_vector(rng, -7, 7)
    return Problem(
        concept="magnitude",
        prompt=f"Find the length of v = {v}. Round to 3 decimals.",
        vectors={"v": v},
        answer=fixed(vm.magnitude(v), 3),
        kind=SCALAR,
        decimals=3,
    )


def distance_problem(rng: random.Random) -> Problem:
    a = rand_vector(rng, -6, 6)
    b = rand_vector(rng, -6, 6)
    return Problem(
        concept="distance",
        prompt=f"Find the distance from A = {a} to B = {b}, 3 dp.",
        vectors={"a": a, "b": b},
        answer=fixed(vm.distance(a, b), 3),
        kind=SCALAR,
        decimals=3,
    )


def dot_problem(rng: random.Random) -> Problem:
    a = rand_vector(rng, -5, 5)
    b = rand_vector(rng, -5, 5)
    return Problem(
        concept="dot",
        prompt=f"Compute a · b for a = {a}, b = {b}.",
        vectors={"a": a, "b": b},
        answer=str(int(vm.dot(a, b))),
        kind=INTEGER,
        decimals=0,
    )


def angle_problem(rng: random.Random) -> Problem:
    a = rand_vector(rng, -5, 5)
    b = rand_vector(rng, -5, 5)
    theta = vm.angle_degrees(a, b)
    degenerate = math.isnan(theta)
    if degenerate:
        _flag_degenerate("angle", {"a": a, "b": b})
    return Problem(
        concept="angle",
        prompt=f"Find the angle between a = {a} and b = {b} in degrees, 1 dp.",
        vectors={"a": a, "b": b},
        answer=fixed(theta, 1),
        kind=SCALAR,
        decimals=1,
        degenerate=degenerate,
    )


def projection_problem(rng: random.Random) -> Problem:
    a = rand_vector(rng, -6, 6)
    b = rand_vector(rng, -6, 6)
    degenerate = _is_zero(b)
    if degenerate:
        _flag_degenerate("projection", {"a": a, "b": b})
    return Problem(
        concept="projection",
        prompt=(
            f"Find proj_b(a) for a = {a}, b = {b}. Round components to 3 dp."
        ),
        vectors={"a": a, "b": b},
        answer=fixed_vector(vm.projection(a, b), 3),
        kind=VECTOR,
        decimals=3,
        degenerate=degenerate,
    )


def unit_problem(rng: random.Random) -> Problem:
    v = rand_vector(rng, -6, 6)
    degenerate = _is_zero(v)
    if degenerate:
        _flag_degenerate("unit", {"v": v})
    return Problem(
        concept="unit",
        prompt=f"Find the unit vector in the direction of v = {v}. 3 dp.",
        vectors={"v": v},
        answer=fixed_vector(vm.unit(v), 3),
        kind=VECTOR,
        decimals=3,
        degenerate=degenerate,
    )


def operand_pairs(problem: Problem) -> Dict[str, Tuple[float, float]]:
    """Operand vectors as plain (x, y) pairs, for JSON and storage."""
    return {k: (v[0], v[1]) for k, v in problem.vectors.items()}
