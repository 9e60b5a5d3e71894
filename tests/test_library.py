import pytest

from basketstat.ingest import ingest
from basketstat.library import (
    GameNotFoundError,
    create_game,
    delete_game,
    edit_game,
    get_game,
    merge_registry,
    player_history,
    prune_registry,
    recompute_game,
    set_player_active,
)
from basketstat.models import Count, GameLibrary, PlayerRegistryEntry


HEADER = "player,min,pts,asst,to"


def _library_with_games():
    library = GameLibrary()
    library, _ = create_game(
        library,
        ingest(HEADER, ["#5 Alex,20,10,4,1", "#9 Mia,18,6,1,2"]),
        date="2025-02-10",
        opponent="Tigers",
        game_id="g2",
    )
    library, _ = create_game(
        library,
        ingest(HEADER, ["#5 Alex,22,14,2,2", "#7 Sam,0,0,0,0"]),
        date="2025-01-05",
        opponent="Lions",
        home_away="away",
        game_id="g1",
    )
    return library


def test_create_game_sorts_and_augments():
    library = _library_with_games()

    assert [game.id for game in library.games] == ["g1", "g2"]
    alex = get_game(library, "g2").performances["Alex"]
    assert alex["a/to"] == Count(value=4.0)
    assert alex["atk"] == Count(value=0.2)


def test_create_game_excludes_non_participants_from_registry():
    library = GameLibrary()
    library, game = create_game(library, ingest(HEADER, ["#5 Alex,20,10,4,1", "#7 Sam,0,0,0,0"]), date="2025-01-01")

    assert list(game.performances) == ["Alex"]
    assert set(library.players) == {"Alex"}
    assert len(game.id) == 32


def test_registry_number_is_only_refreshed_by_known_numbers():
    library = GameLibrary()
    library, _ = create_game(library, ingest("player,pts", ["#5 Alex,10"]), date="2025-01-01")
    library = set_player_active(library, "Alex", False)
    library, _ = create_game(library, ingest("player,pts", ["#12 Alex,8"]), date="2025-01-08")

    assert library.players["Alex"].number == 12
    assert library.players["Alex"].active is False

    merged = merge_registry(library.players, {"Alex": PlayerRegistryEntry(number=None)})
    assert merged["Alex"].number == 12


def test_create_game_rejects_duplicate_id():
    library = _library_with_games()

    with pytest.raises(ValueError):
        create_game(library, ingest("player,pts", ["#5 Alex,10"]), date="2025-03-01", game_id="g1")


def test_edit_game_resorts_and_keeps_performances():
    library = _library_with_games()

    edited = edit_game(library, "g1", date="2025-03-01", opponent="Bears")

    assert [game.id for game in edited.games] == ["g2", "g1"]
    game = get_game(edited, "g1")
    assert game.opponent == "Bears"
    assert game.home_away == "away"
    assert game.performances == get_game(library, "g1").performances


def test_edit_game_rejects_performance_changes_and_unknown_ids():
    library = _library_with_games()

    with pytest.raises(ValueError):
        edit_game(library, "g1", performances={})
    with pytest.raises(GameNotFoundError):
        edit_game(library, "missing", opponent="Bears")


def test_delete_game_and_prune():
    library = _library_with_games()

    kept = delete_game(library, "g2")
    assert [game.id for game in kept.games] == ["g1"]
    assert "Mia" in kept.players

    pruned = delete_game(library, "g2", prune_players=True)
    assert set(pruned.players) == {"Alex"}
    assert prune_registry(kept).players.keys() == pruned.players.keys()


def test_delete_missing_game_is_noop():
    library = _library_with_games()

    assert delete_game(library, "missing") is library


def test_player_history_in_date_order():
    library = _library_with_games()

    history = player_history(library, "Alex")

    assert [record["pts"] for record in history] == [Count(value=14), Count(value=10)]
    assert player_history(library, "Nobody") == []


def test_recompute_game_is_idempotent():
    game = get_game(_library_with_games(), "g2")

    assert recompute_game(game) == game
    assert recompute_game(recompute_game(game)) == game
