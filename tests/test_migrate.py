import pytest

from basketstat.library import migrate
from basketstat.models import ABSENT, CURRENT_SCHEMA_VERSION, Count, MadeAttempted, RawText


def _legacy_payload():
    return {
        "games": [
            {
                "date": "2025-02-01",
                "opponent": "Tigers",
                "league": "U16",
                "homeAway": "away",
                "entries": [
                    {
                        "player": "#5 Alex",
                        "stats": {"MIN": 20, "PTS": 10, "FG": {"made": 4, "attempted": 9}, "ASST": 4, "TO": 1, "Note": "sick"},
                    },
                ],
            },
            {
                "id": "early",
                "date": "2025-01-10",
                "opponent": "Lions",
                "entries": [
                    {"name": "Alex", "number": 5, "stats": {"pts": "12", "fg%": "40%", "min": None}},
                    {"name": "Sam", "stats": {"pts": 2}},
                ],
            },
        ],
        "players": {"Sam": {"number": 7, "active": False}},
    }


def test_migrate_legacy_entries_to_performances():
    library = migrate(_legacy_payload())

    assert library.schema_version == CURRENT_SCHEMA_VERSION
    assert [game.opponent for game in library.games] == ["Lions", "Tigers"]
    tigers = library.games[1]
    assert tigers.home_away == "away"
    alex = tigers.performances["Alex"]
    assert alex["fg"] == MadeAttempted(made=4, attempted=9)
    assert alex["note"] == RawText(text="sick")
    assert alex["a/to"] == Count(value=4.0)

    lions = library.games[0]
    assert lions.id == "early"
    assert lions.performances["Alex"]["pts"] == Count(value=12)
    assert lions.performances["Alex"]["fg%"] == Count(value=40)
    assert lions.performances["Alex"]["min"] == ABSENT


def test_migrate_builds_registry_and_keeps_active_flags():
    library = migrate(_legacy_payload())

    assert library.players["Alex"].number == 5
    assert library.players["Sam"].number == 7
    assert library.players["Sam"].active is False


def test_migrate_assigns_stable_ids():
    first = migrate(_legacy_payload())
    second = migrate(_legacy_payload())

    assert first.games[1].id == second.games[1].id
    assert first == second


def test_migrate_current_payload_round_trip():
    library = migrate(_legacy_payload())

    reloaded = migrate(library.model_dump(mode="json"))

    assert reloaded == library


def test_migrate_rejects_unknown_versions():
    with pytest.raises(ValueError):
        migrate({"schema_version": 99, "games": []})


def test_migrate_empty_legacy_store():
    library = migrate({})

    assert library.games == []
    assert library.players == {}


def test_migrate_null_number_keeps_number_from_name():
    payload = {
        "games": [
            {
                "date": "2025-01-10",
                "opponent": "Lions",
                "entries": [{"player": "#9 Mia", "number": None, "stats": {"pts": 6}}],
            }
        ]
    }

    library = migrate(payload)

    assert library.players["Mia"].number == 9
