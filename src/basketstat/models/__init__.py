"""Canonical stat and game models shared across ingestion and analysis."""

from .game import CURRENT_SCHEMA_VERSION, Game, GameLibrary, PlayerIdentity, PlayerRegistryEntry
from .stats import (
    ABSENT,
    Absent,
    Count,
    MadeAttempted,
    PerformanceRecord,
    RawText,
    StatValue,
    attempts,
    count_value,
    numeric_value,
)

__all__ = [
    "ABSENT",
    "Absent",
    "Count",
    "CURRENT_SCHEMA_VERSION",
    "Game",
    "GameLibrary",
    "MadeAttempted",
    "PerformanceRecord",
    "PlayerIdentity",
    "PlayerRegistryEntry",
    "RawText",
    "StatValue",
    "attempts",
    "count_value",
    "numeric_value",
]
