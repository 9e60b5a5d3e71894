"""Rolling-window trend statistics over a single stat series."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean, median
from typing import Optional, Sequence


MIN_PREVIOUS_WINDOW = 3


@dataclass(frozen=True)
class WindowSummary:
    avg: float
    median: float
    max: float
    min: float

    @property
    def spread(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class WindowStats:
    """Current window compared against the window right before it."""

    games_in_window: int
    total_games: int
    current_avg: float
    current_median: float
    current_max: float
    current_min: float
    prev_avg: Optional[float]
    prev_median: Optional[float]
    prev_max: Optional[float]
    prev_min: Optional[float]
    avg_trend: float
    median_trend: float
    variance_trend: float
    has_prev_window: bool


def summarize(values: Sequence[float]) -> WindowSummary:
    return WindowSummary(
        avg=fmean(values),
        median=median(values),
        max=max(values),
        min=min(values),
    )


def split_windows(series: Sequence[float], window_size: int) -> tuple[list[float], list[float]]:
    """Return ``(previous, current)`` slices; previous may be short or empty."""

    if window_size <= 0:
        raise ValueError(f"window_size must be positive, got {window_size}")
    values = list(series)
    current_start = max(0, len(values) - window_size)
    previous_start = max(0, current_start - window_size)
    return values[previous_start:current_start], values[current_start:]


def analyze_window(series: Sequence[float], window_size: int) -> Optional[WindowStats]:
    """Compare the last ``window_size`` values with the ones before them.

    Order matters: the tail of ``series`` is the current window. A previous
    window shorter than three games is ignored and every trend is reported as
    zero. Returns ``None`` for an empty series.
    """

    previous, current = split_windows(series, window_size)
    if not current:
        return None

    now = summarize(current)
    before = summarize(previous) if len(previous) >= MIN_PREVIOUS_WINDOW else None

    if before is None:
        avg_trend = median_trend = variance_trend = 0.0
    else:
        avg_trend = now.avg - before.avg
        median_trend = now.median - before.median
        variance_trend = now.spread - before.spread

    return WindowStats(
        games_in_window=len(current),
        total_games=len(series),
        current_avg=now.avg,
        current_median=now.median,
        current_max=now.max,
        current_min=now.min,
        prev_avg=before.avg if before else None,
        prev_median=before.median if before else None,
        prev_max=before.max if before else None,
        prev_min=before.min if before else None,
        avg_trend=avg_trend,
        median_trend=median_trend,
        variance_trend=variance_trend,
        has_prev_window=before is not None,
    )
