from __future__ import annotations

import math
import re
from typing import List, Optional, Sequence

# --- Answer kinds -----------------------------------------------------------------
SCALAR = "scalar"
INTEGER = "integer"
VECTOR = "vector"

# Accepted for every problem when the debug bypass is switched on.
DEBUG_ZERO_ANSWER = "0"

# Longer answers are marked incorrect without parsing.
MAX_ANSWER_LENGTH = 100

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_VECTOR_STRIP_RE = re.compile(r"[()\[\]\s]")


def fixed(value: float, decimals: int = 3) -> str:
    """
    Render ``value`` with exactly ``decimals`` places.

    This is the one comparator every rounded answer goes through: canonical
    answers are produced with it and user input is re-rendered with it before
    a plain string comparison. NaN renders as "NaN" and a value that rounds to
    zero renders without a sign.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    s = f"{value:.{decimals}f}"
    if s.startswith("-") and not s.strip("-0."):
        s = s[1:]
    return s


def fixed_vector(values: Sequence[float], decimals: int = 3) -> str:
    return "(" + ", ".join(fixed(v, decimals) for v in values) + ")"


def parse_number(text: str) -> Optional[float]:
    s = (text or "").strip()
    if _NUMBER_RE.fullmatch(s):
        return float(s)
    if s.lower() == "nan":
        return math.nan
    return None


def parse_vector(text: str) -> Optional[List[float]]:
    """
    Parse "(x, y)", "[x, y]" or "x,y". Empty tokens are ignored; any
    non-numeric token makes the whole answer unparseable.
    """
    cleaned = _VECTOR_STRIP_RE.sub("", text or "")
    tokens = [t for t in cleaned.split(",") if t]
    values: List[float] = []
    for tok in tokens:
        v = parse_number(tok)
        if v is None:
            return None
        values.append(v)
    return values


# --- Per-kind checks --------------------------------------------------------------


def check_scalar(canonical: str, text: str, decimals: int) -> bool:
    user_val = parse_number(text)
    if user_val is None:
        return False
    return fixed(user_val, decimals) == canonical


def check_integer(canonical: str, text: str) -> bool:
    user_val = parse_number(text)
    if user_val is None:
        return False
    return user_val == int(canonical)


def check_vector(canonical: str, text: str, decimals: int) -> bool:
    expected = parse_vector(canonical)
    got = parse_vector(text)
    if got is None or expected is None or len(got) != len(expected):
        return False
    return [fixed(v, decimals) for v in got] == [fixed(v, decimals) for v in expected]


def verify(
    kind: str,
    canonical: str,
    text: str,
    decimals: int = 3,
    debug_zero: bool = False,
) -> bool:
    if len(text) > MAX_ANSWER_LENGTH:
        return False
    if debug_zero and text == DEBUG_ZERO_ANSWER:
        return True
    if kind == SCALAR:
        return check_scalar(canonical, text, decimals)
    if kind == INTEGER:
        return check_integer(canonical, text)
    if kind == VECTOR:
        return check_vector(canonical, text, decimals)
    raise ValueError(f"unknown answer kind: {kind!r}")
