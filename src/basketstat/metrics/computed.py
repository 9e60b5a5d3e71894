"""Composite metrics derived from a single player-game record."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Callable, Dict, Mapping

from basketstat.models import ABSENT, Count, PerformanceRecord, StatValue, attempts, count_value


AST_TO_KEY = "a/to"
ATTACK_KEY = "atk"
DEFENCE_KEY = "def"
SHOOTING_KEY = "shoot"

COMPUTED_KEYS = (AST_TO_KEY, ATTACK_KEY, DEFENCE_KEY, SHOOTING_KEY)

_PERCENTAGE_KEYS = ("fg%", "3pt%", "ft%")

_FOUL_MULTIPLIERS: Mapping[int, float] = {
    3: 1.25,
    2: 1.0,
    4: 0.85,
}
_DEFAULT_FOUL_MULTIPLIER = 0.7

# Enough digits to quantize any finite float to two places.
_ROUNDING_CONTEXT = Context(prec=400)


def _round_half_up(value: float, places: int) -> float:
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT)
    return float(rounded)


def round2(value: float) -> float:
    return _round_half_up(value, 2)


def round1(value: float) -> float:
    return _round_half_up(value, 1)


def _derived(value: float, rounder: Callable[[float], float] = round2) -> StatValue:
    # Overflowing inputs leave the derived stat unrecorded.
    if not math.isfinite(value):
        return ABSENT
    return Count(value=rounder(value))


def _minutes(record: Mapping[str, StatValue]) -> float:
    return count_value(record.get("min"))


def compute_ast_to_ratio(record: Mapping[str, StatValue]) -> StatValue:
    assists = count_value(record.get("asst"))
    turnovers = count_value(record.get("to"))
    if assists == 0 and turnovers == 0:
        return ABSENT
    if turnovers == 0:
        # Turnover-free games are credited with the raw assist count.
        return _derived(assists)
    return _derived(assists / turnovers)


def compute_attack_energy(record: Mapping[str, StatValue]) -> StatValue:
    """Offensive involvement per minute: shots, free throws, assists, offensive boards."""

    minutes = _minutes(record)
    if minutes <= 0:
        return ABSENT
    raw_total = (
        attempts(record.get("fg"))
        + attempts(record.get("ft"))
        + count_value(record.get("asst"))
        + count_value(record.get("oreb"))
    )
    if raw_total == 0:
        return ABSENT
    return _derived(raw_total / minutes)


def get_foul_multiplier(fouls: float) -> float:
    """Weight defensive activity by how aggressively the player defended.

    Three fouls is rewarded as active defence, four is close to fouling out,
    and zero/one or five plus are both discounted.
    """

    if float(fouls).is_integer():
        return _FOUL_MULTIPLIERS.get(int(fouls), _DEFAULT_FOUL_MULTIPLIER)
    return _DEFAULT_FOUL_MULTIPLIER


def compute_defence_domination(record: Mapping[str, StatValue]) -> StatValue:
    minutes = _minutes(record)
    if minutes <= 0:
        return ABSENT
    raw_defence = (
        count_value(record.get("blk"))
        + count_value(record.get("stl"))
        + count_value(record.get("dreb"))
    )
    if raw_defence == 0:
        return ABSENT
    multiplier = get_foul_multiplier(count_value(record.get("foul")))
    return _derived((raw_defence * multiplier) / minutes)


def compute_shooting_star(record: Mapping[str, StatValue]) -> StatValue:
    percentages = [
        value.value
        for value in (record.get(key) for key in _PERCENTAGE_KEYS)
        if isinstance(value, Count) and value.value > 0
    ]
    if not percentages:
        return ABSENT
    return _derived(sum(percentages) / len(percentages), round1)


COMPUTED_STATS: Dict[str, Callable[[Mapping[str, StatValue]], StatValue]] = {
    AST_TO_KEY: compute_ast_to_ratio,
    ATTACK_KEY: compute_attack_energy,
    DEFENCE_KEY: compute_defence_domination,
    SHOOTING_KEY: compute_shooting_star,
}


def compute_stats(record: Mapping[str, StatValue]) -> Dict[str, StatValue]:
    return {key: compute(record) for key, compute in COMPUTED_STATS.items()}


def augment_record(record: Mapping[str, StatValue]) -> PerformanceRecord:
    """Return a copy of ``record`` with the four derived keys merged in.

    Derived keys are always recomputed from the raw stats, so applying this
    to an already augmented record gives the same result.
    """

    augmented: PerformanceRecord = dict(record)
    augmented.update(compute_stats(record))
    return augmented
