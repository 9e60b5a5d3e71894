"""Trend, benchmark and insight analysis over a player's game history."""

from .classify import NEGATIVE_TIERS, POSITIVE_TIERS, TIERS, Tier, classify, classify_stat
from .insights import (
    Analysis,
    Recommendation,
    StatInsight,
    analyze_player,
    detect_streak,
    observed_keys,
    recommend,
    stat_series,
    trend_direction,
)
from .windows import WindowStats, WindowSummary, analyze_window, split_windows, summarize

__all__ = [
    "Analysis",
    "NEGATIVE_TIERS",
    "POSITIVE_TIERS",
    "Recommendation",
    "StatInsight",
    "TIERS",
    "Tier",
    "WindowStats",
    "WindowSummary",
    "analyze_player",
    "analyze_window",
    "classify",
    "classify_stat",
    "detect_streak",
    "observed_keys",
    "recommend",
    "split_windows",
    "stat_series",
    "summarize",
    "trend_direction",
]
