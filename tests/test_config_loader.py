import json
from pathlib import Path

from basketstat.config import DEFAULT_BENCHMARKS
from basketstat.config_loader import BenchmarkProfile, load_benchmarks


def test_profile_overrides_and_adds_stats(tmp_path: Path):
    path = tmp_path / "benchmarks.json"
    path.write_text(
        json.dumps(
            {
                "meta": {"ageGroup": "U18", "lastUpdated": "2026-03-01"},
                "stats": {
                    "pts": {"p75": 16, "p90": 24},
                    "to": {"invertedScale": True, "p25": 5},
                    "charges": {"name": "Charges Taken", "p25": 0, "p50": 0, "p75": 1, "p90": 2},
                },
            }
        ),
        encoding="utf-8",
    )

    table = BenchmarkProfile.load(path).apply()

    assert table.get("pts").p90 == 24
    assert table.get("pts").p25 == 4
    assert table.get("to").p25 == 5
    assert table.get("to").inverted_scale is True
    assert table.get("charges").name == "Charges Taken"
    assert table.meta.age_group == "U18"
    assert table.meta.last_updated == "2026-03-01"
    assert DEFAULT_BENCHMARKS.get("pts").p90 == 20


def test_profile_round_trip(tmp_path: Path):
    path = tmp_path / "saved.json"
    BenchmarkProfile.from_table(DEFAULT_BENCHMARKS).save(path)

    table = BenchmarkProfile.load(path).apply()

    assert dict(table.stats) == dict(DEFAULT_BENCHMARKS.stats)


def test_load_benchmarks_uses_environment(tmp_path: Path, monkeypatch):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"stats": {"asst": {"p90": 6}}}), encoding="utf-8")

    monkeypatch.delenv("BASKETSTAT_BENCHMARKS", raising=False)
    assert load_benchmarks() is DEFAULT_BENCHMARKS

    monkeypatch.setenv("BASKETSTAT_BENCHMARKS", str(path))
    assert load_benchmarks().get("asst").p90 == 6
