"""Percentile benchmark tables used to grade player stats."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class BenchmarkStat:
    """Percentile thresholds for one stat.

    For inverted (lower is better) stats the labels denote rank, so the table
    stores ``p90 <= p75 <= p50 <= p25`` in raw magnitude.
    """

    p25: float
    p50: float
    p75: float
    p90: float
    inverted_scale: bool = False
    name: str = ""
    unit: str = "per game"
    description: str = ""
    made_attempted: bool = False

    def __post_init__(self) -> None:
        thresholds = (self.p25, self.p50, self.p75, self.p90)
        if self.inverted_scale:
            ordered = all(a >= b for a, b in zip(thresholds, thresholds[1:]))
            expected = "p25 >= p50 >= p75 >= p90"
        else:
            ordered = all(a <= b for a, b in zip(thresholds, thresholds[1:]))
            expected = "p25 <= p50 <= p75 <= p90"
        if not ordered:
            label = self.name or "benchmark"
            raise ValueError(f"{label} thresholds {thresholds} must satisfy {expected}")


@dataclass(frozen=True)
class BenchmarkMeta:
    age_group: str = ""
    level: str = ""
    game_length: str = ""
    last_updated: str = ""
    notes: str = ""


@dataclass(frozen=True)
class BenchmarkTable:
    """Read-only mapping of lowercase stat key to :class:`BenchmarkStat`."""

    stats: Mapping[str, BenchmarkStat]
    meta: BenchmarkMeta = field(default_factory=BenchmarkMeta)

    def __post_init__(self) -> None:
        normalized = {key.lower(): stat for key, stat in self.stats.items()}
        object.__setattr__(self, "stats", MappingProxyType(normalized))

    def get(self, key: str) -> Optional[BenchmarkStat]:
        return self.stats.get(key.lower())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self.stats

    def keys(self) -> Iterable[str]:
        return self.stats.keys()

    def is_inverted(self, key: str) -> bool:
        stat = self.get(key)
        return stat is not None and stat.inverted_scale

    def with_updates(self, key: str, *, today: Optional[date] = None, **changes: object) -> "BenchmarkTable":
        """Return a copy with one existing stat's fields replaced."""

        lowered = key.lower()
        if lowered not in self.stats:
            raise KeyError(f"No benchmark configured for stat {key!r}")
        stats: Dict[str, BenchmarkStat] = dict(self.stats)
        stats[lowered] = replace(stats[lowered], **changes)
        return BenchmarkTable(stats=stats, meta=self._stamped(today))

    def with_stat(self, key: str, stat: BenchmarkStat, *, today: Optional[date] = None) -> "BenchmarkTable":
        """Return a copy with a new stat added; existing keys are rejected."""

        lowered = key.lower()
        if lowered in self.stats:
            raise KeyError(f"Benchmark for stat {key!r} already exists")
        stats: Dict[str, BenchmarkStat] = dict(self.stats)
        stats[lowered] = stat
        return BenchmarkTable(stats=stats, meta=self._stamped(today))

    def _stamped(self, today: Optional[date]) -> BenchmarkMeta:
        stamp = (today or date.today()).isoformat()
        return replace(self.meta, last_updated=stamp)


# U14-U16 club level (Norwegian 1. divisjon junior), 32 minute games.
_DEFAULT_STATS: Dict[str, BenchmarkStat] = {
    "pts": BenchmarkStat(4, 8, 14, 20, name="Points", description="Total points scored"),
    "fg": BenchmarkStat(
        1, 3, 5, 8,
        name="Field Goals Made",
        unit="made per game",
        description="Successful 2-point and 3-point shots",
        made_attempted=True,
    ),
    "fg%": BenchmarkStat(
        30, 38, 45, 52, name="Field Goal %", unit="percentage", description="Shooting accuracy from the field"
    ),
    "3pt": BenchmarkStat(
        0, 1, 2, 3,
        name="3-Point FG Made",
        unit="made per game",
        description="Successful 3-point shots",
        made_attempted=True,
    ),
    "3pt%": BenchmarkStat(
        20, 28, 35, 42, name="3-Point %", unit="percentage", description="3-point shooting accuracy"
    ),
    "ft": BenchmarkStat(
        0, 1, 3, 5,
        name="Free Throws Made",
        unit="made per game",
        description="Successful free throws",
        made_attempted=True,
    ),
    "ft%": BenchmarkStat(50, 62, 72, 82, name="Free Throw %", unit="percentage", description="Free throw accuracy"),
    "oreb": BenchmarkStat(0, 1, 2, 4, name="Offensive Rebounds", description="Rebounds on offensive end"),
    "dreb": BenchmarkStat(1, 2, 4, 6, name="Defensive Rebounds", description="Rebounds on defensive end"),
    "reb": BenchmarkStat(
        2, 4, 6, 9, name="Total Rebounds", description="Total rebounds (offensive + defensive)"
    ),
    "asst": BenchmarkStat(0, 1, 3, 5, name="Assists", description="Passes leading directly to scores"),
    "stl": BenchmarkStat(0, 1, 2, 4, name="Steals", description="Defensive takeaways"),
    "blk": BenchmarkStat(0, 0, 1, 2, name="Blocks", description="Blocked shots"),
    "to": BenchmarkStat(4, 3, 2, 1, inverted_scale=True, name="Turnovers", description="Ball losses"),
    "foul": BenchmarkStat(
        4, 3, 2, 1, inverted_scale=True, name="Personal Fouls", description="Personal fouls committed"
    ),
    "a/to": BenchmarkStat(
        0.5, 1.0, 1.5, 2.5,
        name="Assist/Turnover",
        unit="ratio",
        description="Assists per turnover (playmaking efficiency)",
    ),
}

DEFAULT_BENCHMARKS = BenchmarkTable(
    stats=_DEFAULT_STATS,
    meta=BenchmarkMeta(
        age_group="U14-U16",
        level="Club/Regional",
        game_length="32 minutes (4x8)",
        last_updated="2026-01-18",
        notes="Benchmarks for Norwegian junior basketball (1. divisjon junior level)",
    ),
)


def iter_benchmarks(table: BenchmarkTable = DEFAULT_BENCHMARKS) -> Iterable[Tuple[str, BenchmarkStat]]:
    """Return ``(key, stat)`` pairs in table order."""

    return table.stats.items()
