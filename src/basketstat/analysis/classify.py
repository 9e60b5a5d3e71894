"""Grade stat values against percentile benchmarks."""

from __future__ import annotations

from typing import Literal, Optional, Union

from basketstat.config import BenchmarkStat, BenchmarkTable
from basketstat.models import Absent, Count, MadeAttempted, RawText, StatValue


Tier = Literal["poor", "below", "average", "good", "excellent"]

TIERS: tuple[Tier, ...] = ("poor", "below", "average", "good", "excellent")
POSITIVE_TIERS = frozenset({"good", "excellent"})
NEGATIVE_TIERS = frozenset({"poor", "below"})


def classify(benchmark: BenchmarkStat, value: float) -> Tier:
    if benchmark.inverted_scale:
        if value <= benchmark.p90:
            return "excellent"
        if value <= benchmark.p75:
            return "good"
        if value <= benchmark.p50:
            return "average"
        if value <= benchmark.p25:
            return "below"
        return "poor"

    if value >= benchmark.p90:
        return "excellent"
    if value >= benchmark.p75:
        return "good"
    if value >= benchmark.p50:
        return "average"
    if value >= benchmark.p25:
        return "below"
    return "poor"


def _as_number(value: Union[StatValue, float, None]) -> Optional[float]:
    if value is None or isinstance(value, (Absent, RawText)):
        return None
    if isinstance(value, MadeAttempted):
        return float(value.made)
    if isinstance(value, Count):
        return value.value
    return float(value)


def classify_stat(table: BenchmarkTable, key: str, value: Union[StatValue, float, None]) -> Tier:
    """Grade ``value`` for stat ``key``; unknown stats and missing values are average."""

    benchmark = table.get(key)
    number = _as_number(value)
    if benchmark is None or number is None:
        return "average"
    return classify(benchmark, number)
