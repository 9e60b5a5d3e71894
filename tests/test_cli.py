import json
from pathlib import Path

from basketstat.cli import game_metadata_from_path, main


def _write_games(csv_dir: Path) -> None:
    csv_dir.mkdir()
    (csv_dir / "2025-01-05_Lions.csv").write_text(
        "player,min,pts,asst,to\n#5 Alex,20,4,0,3\n#7 Sam,0,0,0,0\nTotals,40,4,0,3\n",
        encoding="utf-8",
    )
    (csv_dir / "2025-01-12_Tigers.csv").write_text(
        "player,min,pts,asst,to\n#5 Alex,22,16,4,1\n#7 Sam,5,2,0,0\n",
        encoding="utf-8",
    )


def test_game_metadata_from_file_name(tmp_path: Path):
    path = tmp_path / "2025-01-12_Blue_Tigers.csv"
    path.write_text("player\n", encoding="utf-8")

    assert game_metadata_from_path(path) == ("2025-01-12", "Blue Tigers")


def test_validate_reports_played_and_excluded(tmp_path: Path, capsys):
    csv_dir = tmp_path / "csv"
    _write_games(csv_dir)

    assert main(["validate", str(csv_dir)]) == 0

    out = capsys.readouterr().out
    assert "Players who PLAYED: 1" in out
    assert "#7 Sam (0 min / no stats)" in out
    assert "Alex: 2 game(s)" in out
    assert "Sam: 1 game(s)" in out
    assert "Total games: 2" in out


def test_analyze_json(tmp_path: Path, capsys):
    csv_dir = tmp_path / "csv"
    _write_games(csv_dir)

    assert main(["analyze", str(csv_dir), "--player", "Alex", "--window", "3", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["games_analyzed"] == 2
    assert payload["sufficient_data"] is True
    assert payload["stats"]["pts"]["window"]["current_avg"] == 10.0


def test_analyze_single_stat_text(tmp_path: Path, capsys):
    csv_dir = tmp_path / "csv"
    _write_games(csv_dir)

    assert main(["analyze", str(csv_dir), "--player", "Alex", "--stat", "PTS", "--window", "3"]) == 0

    out = capsys.readouterr().out
    assert "Alex - PTS (last 2 of 2 games)" in out
    assert "not enough earlier games" in out


def test_analyze_unknown_player(tmp_path: Path, capsys):
    csv_dir = tmp_path / "csv"
    _write_games(csv_dir)

    assert main(["analyze", str(csv_dir), "--player", "Nobody"]) == 1


def test_malformed_csv_exit_code(tmp_path: Path, capsys):
    csv_dir = tmp_path / "csv"
    csv_dir.mkdir()
    (csv_dir / "2025-01-05_Lions.csv").write_text("name,pts\n#5 Alex,4\n", encoding="utf-8")

    assert main(["analyze", str(csv_dir), "--player", "Alex"]) == 2
    assert "player" in capsys.readouterr().err


def test_validate_reports_undecodable_file_and_continues(tmp_path: Path, capsys):
    csv_dir = tmp_path / "csv"
    _write_games(csv_dir)
    (csv_dir / "2025-01-19_Bears.csv").write_bytes(b"player,min\n#5 Bj\xf8rn,20\n")

    assert main(["validate", str(csv_dir)]) == 0

    out = capsys.readouterr().out
    assert "2025-01-19_Bears.csv: not UTF-8 text" in out
    assert "Alex: 2 game(s)" in out


def test_analyze_undecodable_file_exit_code(tmp_path: Path, capsys):
    csv_dir = tmp_path / "csv"
    csv_dir.mkdir()
    (csv_dir / "2025-01-19_Bears.csv").write_bytes(b"player,min\n#5 Bj\xf8rn,20\n")

    assert main(["analyze", str(csv_dir), "--player", "Alex"]) == 2
    assert "not UTF-8" in capsys.readouterr().err


def test_validate_lists_players_without_numbers(tmp_path: Path, capsys):
    csv_dir = tmp_path / "csv"
    csv_dir.mkdir()
    (csv_dir / "2025-01-05_Lions.csv").write_text("player,min,pts\n#Alex,20,4\n#5 Mia,12,2\n", encoding="utf-8")

    assert main(["validate", str(csv_dir)]) == 0

    out = capsys.readouterr().out
    assert "    + #Alex" in out
    assert "    + #5 Mia" in out
    assert "None" not in out
