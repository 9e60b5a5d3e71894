"""Persist and load benchmark override profiles."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from basketstat.config import DEFAULT_BENCHMARKS, BenchmarkMeta, BenchmarkStat, BenchmarkTable, benchmarks_profile_path


logger = logging.getLogger(__name__)

# Profiles exported by the browser dashboard use camelCase keys.
_FIELD_ALIASES = {
    "invertedScale": "inverted_scale",
    "isMadeAttempted": "made_attempted",
    "ageGroup": "age_group",
    "gameLength": "game_length",
    "lastUpdated": "last_updated",
}
_STAT_FIELDS = {f.name for f in fields(BenchmarkStat)}
_META_FIELDS = {f.name for f in fields(BenchmarkMeta)}


def _normalize(raw: Dict[str, Any], allowed: set[str]) -> Dict[str, Any]:
    normalized: Dict[str, Any] = {}
    for key, value in raw.items():
        name = _FIELD_ALIASES.get(key, key)
        if name in allowed:
            normalized[name] = value
        else:
            logger.debug("Ignoring unknown benchmark field %r", key)
    return normalized


@dataclass
class BenchmarkProfile:
    stats: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "BenchmarkProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            stats=data.get("stats", {}),
            meta=data.get("meta", {}),
        )

    @classmethod
    def from_table(cls, table: BenchmarkTable) -> "BenchmarkProfile":
        return cls(
            stats={key: asdict(stat) for key, stat in table.stats.items()},
            meta=asdict(table.meta),
        )

    def save(self, path: Path) -> None:
        payload = {
            "meta": self.meta,
            "stats": self.stats,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def apply(self, base: BenchmarkTable = DEFAULT_BENCHMARKS) -> BenchmarkTable:
        """Merge the saved values over ``base``; saved values win, new keys are added."""

        stats: Dict[str, BenchmarkStat] = dict(base.stats)
        for key, raw in self.stats.items():
            lowered = key.lower()
            overrides = _normalize(raw, _STAT_FIELDS)
            existing = stats.get(lowered)
            if existing is not None:
                stats[lowered] = replace(existing, **overrides)
            else:
                overrides.setdefault("name", key)
                for threshold in ("p25", "p50", "p75", "p90"):
                    overrides.setdefault(threshold, 0)
                stats[lowered] = BenchmarkStat(**overrides)
                logger.info("Added custom benchmark %s", lowered)

        meta = base.meta
        meta_overrides = _normalize(self.meta, _META_FIELDS)
        if meta_overrides:
            meta = replace(meta, **meta_overrides)
        return BenchmarkTable(stats=stats, meta=meta)


def load_benchmarks(path: Optional[Path] = None) -> BenchmarkTable:
    """Resolve the benchmark table from ``path`` or the environment, else defaults."""

    path = path or benchmarks_profile_path()
    if path is None:
        return DEFAULT_BENCHMARKS
    logger.info("Loading benchmark overrides from %s", path)
    return BenchmarkProfile.load(path).apply(DEFAULT_BENCHMARKS)
