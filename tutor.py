"""
One learner's tutoring session: the active problem, attempt stats, level/XP
and the coin economy, behind the operations the HTTP layer calls.

A ``TutorSession`` is an in-memory value. ``load`` builds one from a state
store (substituting defaults for anything missing or corrupt) and ``save``
writes every named value back; the caller wraps load-mutate-save in one
transaction per user action.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter

import config
from concepts import generate, get_concept, list_concepts
from economy import (
    COIN_BOOST,
    XP_BOOST,
    Boost,
    EconomyState,
    award_for_correct_answer,
    award_for_level_up,
    boost_kind,
    get_store_item,
    purchase_boost,
    purchase_item,
)
from problems import Problem, operand_pairs
from progression import BASE_THRESHOLD, AttemptStats, ProgressionState
from schemas.state import (
    ActiveBoosts,
    BoostRecord,
    Level,
    NonNegFloat,
    NonNegInt,
    OwnedItems,
    ProblemRecord,
    Thresholds,
)
from state_store import (
    ACTIVE_BOOSTS,
    ACTIVE_PROBLEM,
    COINS,
    CORRECT,
    LEVEL,
    OWNED_ITEMS,
    STREAK,
    TOTAL,
    XP,
    XP_THRESHOLDS,
    StateStore,
    read_value,
)
from vectors import Vector2

logger = logging.getLogger("vector-tutor.session")

_COUNT = TypeAdapter(NonNegInt)
_LEVEL = TypeAdapter(Level)
_XP = TypeAdapter(NonNegFloat)
_THRESHOLDS = TypeAdapter(Thresholds)
_OWNED = TypeAdapter(OwnedItems)
_BOOSTS = TypeAdapter(ActiveBoosts)
_PROBLEM = TypeAdapter(ProblemRecord)


class NoActiveProblem(Exception):
    pass


def problem_to_record(problem: Problem) -> Dict[str, Any]:
    return ProblemRecord(
        id=problem.id,
        concept=problem.concept,
        prompt=problem.prompt,
        vectors=operand_pairs(problem),
        answer=problem.answer,
        kind=problem.kind,
        decimals=problem.decimals,
        degenerate=problem.degenerate,
    ).model_dump(mode="json")


def problem_from_record(rec: ProblemRecord) -> Optional[Problem]:
    if get_concept(rec.concept) is None:
        return None
    return Problem(
        id=rec.id,
        concept=rec.concept,
        prompt=rec.prompt,
        vectors={k: Vector2(*v) for k, v in rec.vectors.items()},
        answer=rec.answer,
        kind=rec.kind,
        decimals=rec.decimals,
        degenerate=rec.degenerate,
    )


class TutorSession:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        debug_zero: Optional[bool] = None,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.debug_zero = config.DEBUG_ZERO_BYPASS if debug_zero is None else debug_zero
        self.stats = AttemptStats()
        self.progression = ProgressionState()
        self.economy = EconomyState()
        self.problem: Optional[Problem] = None

    # --- Persistence --------------------------------------------------------------

    @classmethod
    def load(
        cls,
        store: StateStore,
        rng: Optional[random.Random] = None,
        debug_zero: Optional[bool] = None,
    ) -> "TutorSession":
        s = cls(rng=rng, debug_zero=debug_zero)

        s.stats = AttemptStats(
            streak=read_value(store, STREAK, _COUNT, 0),
            total=read_value(store, TOTAL, _COUNT, 0),
            correct=read_value(store, CORRECT, _COUNT, 0),
        )

        thresholds = read_value(store, XP_THRESHOLDS, _THRESHOLDS, {1: BASE_THRESHOLD})
        thresholds.setdefault(1, BASE_THRESHOLD)
        s.progression = ProgressionState(
            level=read_value(store, LEVEL, _LEVEL, 1),
            xp=read_value(store, XP, _XP, 0.0),
            thresholds=thresholds,
        )

        boosts = read_value(store, ACTIVE_BOOSTS, _BOOSTS, ActiveBoosts())
        s.economy = EconomyState(
            coins=read_value(store, COINS, _COUNT, 0),
            xp_boost=Boost(level=boosts.xp_boost.level),
            coin_boost=Boost(level=boosts.coin_boost.level),
            owned_items=set(read_value(store, OWNED_ITEMS, _OWNED, [])),
        )

        rec = read_value(store, ACTIVE_PROBLEM, _PROBLEM, None)
        s.problem = problem_from_record(rec) if rec is not None else None
        return s

    def save(self, store: StateStore) -> None:
        store.set(STREAK, self.stats.streak)
        store.set(TOTAL, self.stats.total)
        store.set(CORRECT, self.stats.correct)
        store.set(LEVEL, self.progression.level)
        store.set(XP, self.progression.xp)
        store.set(
            XP_THRESHOLDS,
            {str(lv): t for lv, t in sorted(self.progression.thresholds.items())},
        )
        store.set(COINS, self.economy.coins)
        store.set(OWNED_ITEMS, sorted(self.economy.owned_items))
        store.set(ACTIVE_BOOSTS, self.boosts_record().model_dump())
        store.set(ACTIVE_PROBLEM, problem_to_record(self.problem) if self.problem else None)

    def boosts_record(self) -> ActiveBoosts:
        return ActiveBoosts(
            xp_boost=BoostRecord(
                level=self.economy.xp_boost.level,
                multiplier=self.economy.xp_boost.multiplier,
            ),
            coin_boost=BoostRecord(
                level=self.economy.coin_boost.level,
                multiplier=self.economy.coin_boost.multiplier,
            ),
        )

    # --- Problems -----------------------------------------------------------------

    def list_concepts(self) -> List[Dict[str, str]]:
        return list_concepts()

    def new_problem(self, concept_key: str) -> Problem:
        """Generate a problem and make it the active one. Raises KeyError for unknown concepts."""
        self.problem = generate(concept_key, self.rng)
        return self.problem

    def check_answer(self, problem: Problem, text: str) -> Dict[str, Any]:
        return {
            "correct": problem.verify(text, debug_zero=self.debug_zero),
            "canonical_answer": problem.answer,
        }

    def on_correct_answer(self) -> Dict[str, Any]:
        coins, level_up = award_for_correct_answer(self.economy, self.progression, self.rng)
        result: Dict[str, Any] = {
            "coin_reward": coins,
            "leveled_up": level_up is not None,
            "new_level": None,
            "level_up_bonus": 0,
        }
        if level_up is not None:
            result["new_level"] = level_up.new_level
            result["level_up_bonus"] = award_for_level_up(
                self.economy, level_up.previous_level, self.rng
            )
        return result

    def submit_answer(self, text: str) -> Dict[str, Any]:
        """
        Check ``text`` against the active problem, record the attempt and, when
        correct, pay out rewards and move on to a fresh problem of the same concept.
        """
        problem = self.problem
        if problem is None:
            raise NoActiveProblem()

        result = self.check_answer(problem, text)
        self.stats.record(result["correct"])
        result.update(
            coin_reward=0,
            leveled_up=False,
            new_level=None,
            level_up_bonus=0,
            next_problem=None,
        )
        if result["correct"]:
            result.update(self.on_correct_answer())
            result["next_problem"] = self.new_problem(problem.concept)
        return result

    # --- Store --------------------------------------------------------------------

    def purchase(self, kind: str, price: Optional[int] = None) -> bool:
        """
        Buy a boost (by kind or store name) or a one-off item. Without an
        explicit price the store catalog price is used. Raises KeyError for
        names the store does not sell.
        """
        if boost_kind(kind) is not None:
            return purchase_boost(self.economy, kind)
        if price is None:
            item = get_store_item(kind)
            if item is None:
                raise KeyError(kind)
            price = self.economy.price_of(item)
        return purchase_item(self.economy, kind, price)

    def reset_all(self) -> None:
        self.stats = AttemptStats()
        self.progression = ProgressionState()
        self.economy = EconomyState()
        logger.info("session state reset")

    # --- Views --------------------------------------------------------------------

    def progress(self) -> Dict[str, Any]:
        p = self.progression
        boosts = self.boosts_record()
        return {
            "streak": self.stats.streak,
            "total": self.stats.total,
            "correct": self.stats.correct,
            "level": p.level,
            "xp": p.xp,
            "xp_required": p.threshold(),
            "coins": self.economy.coins,
            "boosts": {
                XP_BOOST: boosts.xp_boost.model_dump(),
                COIN_BOOST: boosts.coin_boost.model_dump(),
            },
            "owned_items": sorted(self.economy.owned_items),
        }
