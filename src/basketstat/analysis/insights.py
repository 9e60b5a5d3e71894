"""Player-level strengths, weaknesses, streaks and a coaching recommendation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Literal, Optional, Sequence

from basketstat.analysis.classify import NEGATIVE_TIERS, POSITIVE_TIERS, Tier, classify_stat
from basketstat.analysis.windows import WindowStats, analyze_window, split_windows
from basketstat.config import DEFAULT_BENCHMARKS, BenchmarkTable
from basketstat.models import PerformanceRecord, numeric_value


logger = logging.getLogger(__name__)

Trend = Literal["improving", "declining", "consistent"]
Streak = Literal["hot", "cold"]

TREND_THRESHOLD = 0.2
STREAK_LENGTH = 3
MIN_VALUES = 2
SHOOTING_KEYS = frozenset({"fg", "fg%", "3pt", "3pt%", "ft", "ft%", "shoot"})


@dataclass(frozen=True)
class StatInsight:
    key: str
    tier: Tier
    trend: Trend
    trend_value: float
    window: WindowStats
    streak: Optional[Streak] = None


@dataclass(frozen=True)
class Recommendation:
    rule: str
    message: str


@dataclass(frozen=True)
class Analysis:
    games_analyzed: int
    window_size: int
    sufficient_data: bool
    stats: Dict[str, StatInsight] = field(default_factory=dict)
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    improving: List[str] = field(default_factory=list)
    declining: List[str] = field(default_factory=list)
    hot_streaks: List[str] = field(default_factory=list)
    cold_streaks: List[str] = field(default_factory=list)
    recommendation: Optional[Recommendation] = None
    message: Optional[str] = None


def stat_series(records: Sequence[PerformanceRecord], key: str) -> List[float]:
    """Numeric values of ``key`` in record order, skipping absent and text cells."""

    series: List[float] = []
    for record in records:
        number = numeric_value(record.get(key))
        if number is not None:
            series.append(number)
    return series


def observed_keys(records: Sequence[PerformanceRecord]) -> List[str]:
    seen: Dict[str, None] = {}
    for record in records:
        for key in record:
            seen.setdefault(key, None)
    return list(seen)


def trend_direction(trend_value: float, *, inverted: bool) -> Trend:
    signed = -trend_value if inverted else trend_value
    if signed > TREND_THRESHOLD:
        return "improving"
    if signed < -TREND_THRESHOLD:
        return "declining"
    return "consistent"


def detect_streak(
    window_values: Sequence[float], key: str, benchmarks: BenchmarkTable
) -> Optional[Streak]:
    if len(window_values) < STREAK_LENGTH:
        return None
    tiers = {classify_stat(benchmarks, key, value) for value in window_values[-STREAK_LENGTH:]}
    if tiers <= POSITIVE_TIERS:
        return "hot"
    if tiers <= NEGATIVE_TIERS:
        return "cold"
    return None


def _label(key: str, benchmarks: BenchmarkTable) -> str:
    stat = benchmarks.get(key)
    return stat.name if stat is not None and stat.name else key.upper()


def _cold_shooting(analysis: Analysis, benchmarks: BenchmarkTable) -> Optional[str]:
    cold = [key for key in analysis.cold_streaks if key in SHOOTING_KEYS]
    if not cold:
        return None
    return (
        f"{_label(cold[0], benchmarks)} has been cold for {STREAK_LENGTH} straight games. "
        "Add extra shooting reps and focus on shot selection."
    )


def _turnovers(analysis: Analysis, benchmarks: BenchmarkTable) -> Optional[str]:
    if "to" in analysis.declining:
        return "Turnovers are trending up. Work on ball security and decision making under pressure."
    if "to" in analysis.weaknesses:
        return "Turnovers are high for this level. Drill ball handling and simple, early passes."
    return None


def _assist_turnover(analysis: Analysis, benchmarks: BenchmarkTable) -> Optional[str]:
    if "a/to" in analysis.declining:
        return "Assist/turnover ratio is slipping. Prioritise safe passes over risky plays."
    return None


def _free_throws(analysis: Analysis, benchmarks: BenchmarkTable) -> Optional[str]:
    weak = [key for key in ("ft%", "ft") if key in analysis.weaknesses]
    if not weak:
        return None
    return f"{_label(weak[0], benchmarks)} is below benchmark. Build a consistent free throw routine."


def _defensive_rebounds(analysis: Analysis, benchmarks: BenchmarkTable) -> Optional[str]:
    if "dreb" in analysis.weaknesses:
        return "Defensive rebounding is below benchmark. Emphasise boxing out on every shot."
    return None


def _broad_improvement(analysis: Analysis, benchmarks: BenchmarkTable) -> Optional[str]:
    if len(analysis.improving) >= 2 and not analysis.declining:
        names = ", ".join(_label(key, benchmarks) for key in analysis.improving)
        return f"Improving across the board ({names}). Keep the current training focus."
    return None


def _hot_streaks(analysis: Analysis, benchmarks: BenchmarkTable) -> Optional[str]:
    if len(analysis.hot_streaks) >= 2:
        names = ", ".join(_label(key, benchmarks) for key in analysis.hot_streaks)
        return f"On a hot streak in {names}. Build the game plan around these strengths."
    return None


def _balance(analysis: Analysis, benchmarks: BenchmarkTable) -> Optional[str]:
    if analysis.strengths and analysis.weaknesses:
        strength = _label(analysis.strengths[0], benchmarks)
        weakness = _label(analysis.weaknesses[0], benchmarks)
        return f"Lean on {strength} while developing {weakness}."
    return None


# First match wins.
RECOMMENDATION_RULES: tuple[tuple[str, Callable[[Analysis, BenchmarkTable], Optional[str]]], ...] = (
    ("cold_shooting", _cold_shooting),
    ("turnovers", _turnovers),
    ("assist_turnover", _assist_turnover),
    ("free_throws", _free_throws),
    ("defensive_rebounds", _defensive_rebounds),
    ("broad_improvement", _broad_improvement),
    ("hot_streaks", _hot_streaks),
    ("balance", _balance),
)


def recommend(analysis: Analysis, benchmarks: BenchmarkTable = DEFAULT_BENCHMARKS) -> Optional[Recommendation]:
    for rule, check in RECOMMENDATION_RULES:
        message = check(analysis, benchmarks)
        if message is not None:
            return Recommendation(rule=rule, message=message)
    return None


def analyze_player(
    records: Sequence[PerformanceRecord],
    window_size: int,
    benchmarks: BenchmarkTable = DEFAULT_BENCHMARKS,
) -> Analysis:
    """Analyse a player's records, oldest first.

    Stats with fewer than two usable values are ignored, so sparse histories
    simply produce fewer findings.
    """

    if window_size <= 0:
        raise ValueError(f"window_size must be positive, got {window_size}")
    if len(records) < MIN_VALUES:
        return Analysis(
            games_analyzed=len(records),
            window_size=window_size,
            sufficient_data=False,
            message=f"Need at least {MIN_VALUES} games for trend analysis",
        )

    stats: Dict[str, StatInsight] = {}
    strengths: List[str] = []
    weaknesses: List[str] = []
    improving: List[str] = []
    declining: List[str] = []
    hot: List[str] = []
    cold: List[str] = []

    for key in observed_keys(records):
        series = stat_series(records, key)
        if len(series) < MIN_VALUES:
            continue
        window = analyze_window(series, window_size)
        if window is None:
            continue

        tier = classify_stat(benchmarks, key, window.current_avg)
        if tier in POSITIVE_TIERS:
            strengths.append(key)
        elif tier in NEGATIVE_TIERS:
            weaknesses.append(key)

        trend = trend_direction(window.avg_trend, inverted=benchmarks.is_inverted(key))
        if trend == "improving":
            improving.append(key)
        elif trend == "declining":
            declining.append(key)

        _, current = split_windows(series, window_size)
        streak = detect_streak(current, key, benchmarks)
        if streak == "hot":
            hot.append(key)
        elif streak == "cold":
            cold.append(key)

        stats[key] = StatInsight(
            key=key,
            tier=tier,
            trend=trend,
            trend_value=window.avg_trend,
            window=window,
            streak=streak,
        )

    analysis = Analysis(
        games_analyzed=len(records),
        window_size=window_size,
        sufficient_data=True,
        stats=stats,
        strengths=strengths,
        weaknesses=weaknesses,
        improving=improving,
        declining=declining,
        hot_streaks=hot,
        cold_streaks=cold,
    )
    recommendation = recommend(analysis, benchmarks)
    logger.debug(
        "Analysed %d games: %d strengths, %d weaknesses, recommendation=%s",
        len(records),
        len(strengths),
        len(weaknesses),
        recommendation.rule if recommendation else None,
    )
    return replace(analysis, recommendation=recommendation)
