"""
Coins, boosts and the store.

Two boosts (XP, coins) each add +5% per level to their reward. Boost prices
grow 10% per level; other store items are one-off purchases.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from progression import BASE_XP_PER_CORRECT, LevelUp, ProgressionState, apply_xp

logger = logging.getLogger("vector-tutor.economy")

BOOST_STEP = 0.05
BOOST_BASE_PRICE = 150
BOOST_PRICE_GROWTH = 1.1

CORRECT_COINS = (20, 50)
LEVEL_UP_COINS = (100, 200)

XP_BOOST = "xp_boost"
COIN_BOOST = "coin_boost"

# Store display names and legacy spellings that refer to a boost.
_BOOST_ALIASES = {
    XP_BOOST: XP_BOOST,
    "xpBoost": XP_BOOST,
    "XP Boost": XP_BOOST,
    COIN_BOOST: COIN_BOOST,
    "coinBoost": COIN_BOOST,
    "coinsBoost": COIN_BOOST,
    "coins_boost": COIN_BOOST,
    "Coins Boost": COIN_BOOST,
}


@dataclass(frozen=True)
class StoreItem:
    name: str
    description: str
    price: Optional[int] = None  # None: priced by boost level
    boost: Optional[str] = None


STORE_ITEMS: Tuple[StoreItem, ...] = (
    StoreItem("XP Boost", "+5% XP per level", boost=XP_BOOST),
    StoreItem("Coins Boost", "+5% coins per level", boost=COIN_BOOST),
    StoreItem("Custom Themes", "Unlock new color schemes", price=200),
    StoreItem("Advanced Stats", "Detailed progress analytics", price=400),
    StoreItem("Study Reminders", "Daily practice notifications", price=150),
    StoreItem("Premium Support", "Priority help & feedback", price=1000),
)
_ITEMS_BY_NAME: Dict[str, StoreItem] = {i.name: i for i in STORE_ITEMS}


def boost_kind(name: str) -> Optional[str]:
    return _BOOST_ALIASES.get(name)


def get_store_item(name: str) -> Optional[StoreItem]:
    return _ITEMS_BY_NAME.get(name)


@dataclass
class Boost:
    level: int = 0

    @property
    def multiplier(self) -> float:
        return 1 + BOOST_STEP * self.level

    @property
    def price(self) -> int:
        return boost_price(self.level)


@dataclass
class EconomyState:
    coins: int = 0
    xp_boost: Boost = field(default_factory=Boost)
    coin_boost: Boost = field(default_factory=Boost)
    owned_items: Set[str] = field(default_factory=set)

    def boost(self, kind: str) -> Boost:
        if kind == XP_BOOST:
            return self.xp_boost
        if kind == COIN_BOOST:
            return self.coin_boost
        raise KeyError(kind)

    def price_of(self, item: StoreItem) -> int:
        if item.boost:
            return self.boost(item.boost).price
        return int(item.price or 0)


def boost_price(level: int) -> int:
    return math.floor(BOOST_BASE_PRICE * BOOST_PRICE_GROWTH**level)


# --- Rewards ----------------------------------------------------------------------


def award_for_correct_answer(
    economy: EconomyState, progression: ProgressionState, rng: random.Random
) -> Tuple[int, Optional[LevelUp]]:
    """
    Grant the XP and coins for one correct answer.

    Returns (coins credited, level-up event or None). The level-up coin bonus
    is not included; see ``award_for_level_up``.
    """
    xp = BASE_XP_PER_CORRECT * economy.xp_boost.multiplier
    level_up = apply_xp(progression, xp)

    base = rng.randint(*CORRECT_COINS)
    coins = math.floor(base * economy.coin_boost.multiplier)
    economy.coins += coins
    return coins, level_up


def award_for_level_up(economy: EconomyState, previous_level: int, rng: random.Random) -> int:
    base = rng.randint(*LEVEL_UP_COINS) * previous_level
    bonus = math.floor(base * economy.coin_boost.multiplier)
    economy.coins += bonus
    return bonus


# --- Purchases --------------------------------------------------------------------


def purchase_boost(economy: EconomyState, kind: str) -> bool:
    resolved = boost_kind(kind)
    if resolved is None:
        raise KeyError(kind)
    boost = economy.boost(resolved)
    price = boost.price
    if economy.coins < price:
        return False
    economy.coins -= price
    boost.level += 1
    logger.info("bought %s level %d for %d coins", resolved, boost.level, price)
    return True


def purchase_item(economy: EconomyState, name: str, price: int) -> bool:
    # one-off items: owning it already means there is nothing left to buy
    if name in economy.owned_items:
        return False
    if price < 0 or economy.coins < price:
        return False
    economy.coins -= price
    economy.owned_items.add(name)
    logger.info("bought item %r for %d coins", name, price)
    return True


def store_listing(economy: EconomyState) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    for item in STORE_ITEMS:
        price = economy.price_of(item)
        row: Dict[str, object] = {
            "name": item.name,
            "description": item.description,
            "price": price,
            "kind": "boost" if item.boost else "item",
            "owned": (not item.boost) and item.name in economy.owned_items,
            "affordable": economy.coins >= price,
        }
        if item.boost:
            boost = economy.boost(item.boost)
            row["level"] = boost.level
            row["multiplier"] = boost.multiplier
        rows.append(row)
    return rows
