"""Upgrade stored library payloads to the current schema."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping
from uuid import NAMESPACE_URL, uuid5

from basketstat.ingest import extract_player_identity, parse_stat_value
from basketstat.library.games import merge_registry, recompute_game, sort_games
from basketstat.models import (
    ABSENT,
    CURRENT_SCHEMA_VERSION,
    Count,
    Game,
    GameLibrary,
    MadeAttempted,
    PerformanceRecord,
    PlayerRegistryEntry,
    StatValue,
)


logger = logging.getLogger(__name__)

LEGACY_SCHEMA_VERSION = 1


def coerce_legacy_value(raw: Any) -> StatValue:
    """Map a value from the version 1 JSON store onto a tagged stat value."""

    if raw is None:
        return ABSENT
    if isinstance(raw, bool):
        return Count(value=float(raw))
    if isinstance(raw, (int, float)):
        return Count(value=raw)
    if isinstance(raw, Mapping) and "made" in raw:
        return MadeAttempted(made=int(raw.get("made") or 0), attempted=int(raw.get("attempted") or 0))
    return parse_stat_value(str(raw))


def _legacy_record(stats: Mapping[str, Any]) -> PerformanceRecord:
    return {str(key).lower(): coerce_legacy_value(value) for key, value in stats.items()}


def _legacy_game_id(index: int, game: Mapping[str, Any]) -> str:
    seed = f"{index}|{game.get('date', '')}|{game.get('opponent', '')}"
    return uuid5(NAMESPACE_URL, f"basketstat:legacy:{seed}").hex


def _migrate_legacy_game(index: int, game: Mapping[str, Any]) -> tuple[Game, Dict[str, PlayerRegistryEntry]]:
    performances: Dict[str, PerformanceRecord] = {}
    found: Dict[str, PlayerRegistryEntry] = {}
    for entry in game.get("entries", []):
        raw_name = entry.get("name") or entry.get("player") or ""
        identity = extract_player_identity(str(raw_name))
        if not identity.name:
            continue
        number = entry.get("number") if entry.get("number") is not None else identity.number
        performances[identity.name] = _legacy_record(entry.get("stats", {}))
        found[identity.name] = PlayerRegistryEntry(number=number, active=True)

    home_away = game.get("homeAway", game.get("home_away", "home"))
    migrated = Game(
        id=str(game.get("id") or _legacy_game_id(index, game)),
        date=str(game.get("date", "")),
        opponent=str(game.get("opponent", "")),
        league=str(game.get("league", "")),
        home_away="away" if home_away == "away" else "home",
        performances=performances,
    )
    return recompute_game(migrated), found


def _migrate_legacy(payload: Mapping[str, Any]) -> GameLibrary:
    games: List[Game] = []
    registry: Dict[str, PlayerRegistryEntry] = {}
    for index, raw_game in enumerate(payload.get("games", [])):
        game, found = _migrate_legacy_game(index, raw_game)
        games.append(game)
        registry = merge_registry(registry, found)

    # Saved registries keep their active flags; numbers seen in games fill gaps.
    saved = payload.get("players") or {}
    for name, raw in saved.items():
        if name not in registry:
            continue
        number = raw.get("number") if raw.get("number") is not None else registry[name].number
        registry[name] = PlayerRegistryEntry(number=number, active=bool(raw.get("active", True)))

    logger.info("Migrated %d legacy games and %d players", len(games), len(registry))
    return GameLibrary(
        schema_version=CURRENT_SCHEMA_VERSION,
        games=sort_games(games),
        players=registry,
    )


def detect_version(payload: Mapping[str, Any]) -> int:
    if "schema_version" in payload:
        return int(payload["schema_version"])
    return LEGACY_SCHEMA_VERSION


def migrate(payload: Mapping[str, Any]) -> GameLibrary:
    """Load any known stored shape into a current :class:`GameLibrary`.

    Run once at the load boundary; business logic only ever sees the current
    shape.
    """

    version = detect_version(payload)
    if version == LEGACY_SCHEMA_VERSION:
        return _migrate_legacy(payload)
    if version == CURRENT_SCHEMA_VERSION:
        library = GameLibrary.model_validate(payload)
        return library.model_copy(update={"games": sort_games(library.games)})
    raise ValueError(f"unsupported library schema version {version}")
