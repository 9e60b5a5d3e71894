"""Pure operations over the game library: create, edit, delete and query."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional
from uuid import uuid4

from basketstat.ingest import IngestResult
from basketstat.metrics import augment_record
from basketstat.models import Game, GameLibrary, PerformanceRecord, PlayerRegistryEntry


logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"date", "opponent", "league", "home_away"})


class GameNotFoundError(KeyError):
    """Raised when a game id is not present in the library."""


def sort_games(games: Iterable[Game]) -> List[Game]:
    """Stable ascending sort by ISO date; same-day games keep their order."""

    return sorted(games, key=lambda game: game.date)


def merge_registry(
    registry: Mapping[str, PlayerRegistryEntry],
    found: Mapping[str, PlayerRegistryEntry],
) -> Dict[str, PlayerRegistryEntry]:
    """Fold newly seen players into the registry.

    A jersey number is only overwritten when the new sighting carries one;
    the ``active`` flag of existing players is left alone.
    """

    merged = dict(registry)
    for name, entry in found.items():
        existing = merged.get(name)
        if existing is None:
            merged[name] = PlayerRegistryEntry(number=entry.number, active=True)
        elif entry.number is not None and entry.number != existing.number:
            merged[name] = existing.model_copy(update={"number": entry.number})
    return merged


def recompute_game(game: Game) -> Game:
    performances = {name: augment_record(record) for name, record in game.performances.items()}
    return game.model_copy(update={"performances": performances})


def create_game(
    library: GameLibrary,
    result: IngestResult,
    *,
    date: str,
    opponent: str = "",
    league: str = "",
    home_away: str = "home",
    game_id: Optional[str] = None,
) -> tuple[GameLibrary, Game]:
    """Add one ingested box score to the library.

    Returns the updated library and the new game with derived stats merged
    into every performance.
    """

    game = Game(
        id=game_id or uuid4().hex,
        date=date,
        opponent=opponent,
        league=league,
        home_away=home_away,
        performances={name: augment_record(record) for name, record in result.performances.items()},
    )
    if any(existing.id == game.id for existing in library.games):
        raise ValueError(f"game id {game.id!r} already exists")

    logger.info("Created game %s vs %s on %s with %d players", game.id, opponent, date, len(game.performances))
    updated = library.model_copy(
        update={
            "games": sort_games([*library.games, game]),
            "players": merge_registry(library.players, result.players_found),
        }
    )
    return updated, game


def get_game(library: GameLibrary, game_id: str) -> Game:
    for game in library.games:
        if game.id == game_id:
            return game
    raise GameNotFoundError(game_id)


def edit_game(library: GameLibrary, game_id: str, **changes: str) -> GameLibrary:
    """Change a game's date, opponent, league or home/away flag."""

    invalid = set(changes) - EDITABLE_FIELDS
    if invalid:
        raise ValueError(f"cannot edit game fields: {sorted(invalid)}")
    target = get_game(library, game_id)
    edited = Game.model_validate({**target.model_dump(), **changes})
    games = [edited if game.id == game_id else game for game in library.games]
    return library.model_copy(update={"games": sort_games(games)})


def referenced_players(games: Iterable[Game]) -> set[str]:
    names: set[str] = set()
    for game in games:
        names.update(game.performances)
    return names


def prune_registry(library: GameLibrary) -> GameLibrary:
    """Drop registry entries that no remaining game references."""

    referenced = referenced_players(library.games)
    players = {name: entry for name, entry in library.players.items() if name in referenced}
    dropped = len(library.players) - len(players)
    if dropped:
        logger.info("Pruned %d players with no remaining games", dropped)
    return library.model_copy(update={"players": players})


def delete_game(library: GameLibrary, game_id: str, *, prune_players: bool = False) -> GameLibrary:
    games = [game for game in library.games if game.id != game_id]
    if len(games) == len(library.games):
        logger.debug("Game %s not found; nothing to delete", game_id)
        return library
    updated = library.model_copy(update={"games": games})
    return prune_registry(updated) if prune_players else updated


def set_player_active(library: GameLibrary, name: str, active: bool) -> GameLibrary:
    entry = library.players.get(name)
    if entry is None:
        raise KeyError(f"unknown player {name!r}")
    players = dict(library.players)
    players[name] = entry.model_copy(update={"active": active})
    return library.model_copy(update={"players": players})


def player_history(library: GameLibrary, name: str) -> List[PerformanceRecord]:
    """Performance records for ``name`` in game date order."""

    return [game.performances[name] for game in library.games if name in game.performances]
