"""Game library operations and stored-shape migration."""

from .games import (
    EDITABLE_FIELDS,
    GameNotFoundError,
    create_game,
    delete_game,
    edit_game,
    get_game,
    merge_registry,
    player_history,
    prune_registry,
    recompute_game,
    referenced_players,
    set_player_active,
    sort_games,
)
from .migrate import LEGACY_SCHEMA_VERSION, coerce_legacy_value, detect_version, migrate

__all__ = [
    "EDITABLE_FIELDS",
    "GameNotFoundError",
    "LEGACY_SCHEMA_VERSION",
    "coerce_legacy_value",
    "create_game",
    "delete_game",
    "detect_version",
    "edit_game",
    "get_game",
    "merge_registry",
    "migrate",
    "player_history",
    "prune_registry",
    "recompute_game",
    "referenced_players",
    "set_player_active",
    "sort_games",
]
