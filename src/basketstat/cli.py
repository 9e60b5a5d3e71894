"""Command-line interface for validating box scores and analysing players."""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from collections import Counter
from dataclasses import asdict
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Sequence

from basketstat.analysis import analyze_player, analyze_window, stat_series
from basketstat.config import default_window_size
from basketstat.config_loader import load_benchmarks
from basketstat.ingest import MalformedInputError, load_boxscore_csv, read_csv_text, scan_boxscore, split_csv_text
from basketstat.library import create_game, player_history
from basketstat.models import GameLibrary, PlayerIdentity


logger = logging.getLogger(__name__)

_FILENAME_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})[_\s-]*(.*)$")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="basketstat", description="Youth basketball box score tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Report who played in each CSV file")
    validate.add_argument("csv_dir", type=Path, help="Directory of box score CSV files")

    analyze = subparsers.add_parser("analyze", help="Trend analysis for one player")
    analyze.add_argument("csv_dir", type=Path, help="Directory of box score CSV files")
    analyze.add_argument("--player", required=True, help="Player name as written after the jersey number")
    analyze.add_argument("--stat", default=None, help="Only report window stats for this stat key")
    analyze.add_argument(
        "--window",
        type=int,
        default=None,
        help="Games per trend window (default from BASKETSTAT_WINDOW_SIZE or 5)",
    )
    analyze.add_argument("--benchmarks", type=Path, default=None, help="Benchmark override profile JSON")
    analyze.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    return parser.parse_args(argv)


def _csv_files(csv_dir: Path) -> List[Path]:
    if not csv_dir.is_dir():
        raise FileNotFoundError(f"{csv_dir} is not a directory")
    return sorted(path for path in csv_dir.iterdir() if path.suffix.lower() == ".csv")


def game_metadata_from_path(path: Path) -> tuple[str, str]:
    """Game date and opponent from ``YYYY-MM-DD_opponent.csv``, else mtime and stem."""

    match = _FILENAME_PATTERN.match(path.stem)
    if match:
        try:
            parsed = date.fromisoformat(match.group(1))
        except ValueError:
            parsed = None
        if parsed is not None:
            opponent = match.group(2).replace("_", " ").strip()
            return parsed.isoformat(), opponent or path.stem
    logger.warning("No date in file name %s; using modification time", path.name)
    modified = datetime.fromtimestamp(path.stat().st_mtime).date()
    return modified.isoformat(), path.stem


def build_library(csv_dir: Path) -> GameLibrary:
    library = GameLibrary()
    for path in _csv_files(csv_dir):
        game_date, opponent = game_metadata_from_path(path)
        result = load_boxscore_csv(path)
        library, _ = create_game(library, result, date=game_date, opponent=opponent)
    return library


def _display_name(identity: PlayerIdentity) -> str:
    if identity.number is None:
        return identity.name
    return f"#{identity.number} {identity.name}"


def _run_validate(csv_dir: Path) -> int:
    files = _csv_files(csv_dir)
    if not files:
        print(f"No CSV files found in {csv_dir}")
        return 0

    print(f"Found {len(files)} CSV file(s):\n")
    game_counts: Counter[str] = Counter()
    for path in files:
        try:
            header, rows = split_csv_text(read_csv_text(path))
            _, scanned, _ = scan_boxscore(header, rows)
        except MalformedInputError as exc:
            print(f"{path.name}: {exc}\n")
            continue
        played = [row for row in scanned if row.played]
        benched = [row for row in scanned if not row.played]
        print(path.name)
        print(f"  Players who PLAYED: {len(played)}")
        for row in played:
            print(f"    + {_display_name(row.identity)}")
            game_counts[row.identity.name] += 1
        if benched:
            print(f"  Players who DID NOT PLAY (excluded): {len(benched)}")
            for row in benched:
                print(f"    - {_display_name(row.identity)} (0 min / no stats)")
        print("")

    print("Player game counts:")
    for name, count in sorted(game_counts.items(), key=lambda item: (-item[1], item[0])):
        print(f"  {name}: {count} game(s)")
    print(f"\n  Total: {len(game_counts)} unique players")
    print(f"  Total games: {len(files)}")
    return 0


def _format_number(value: Optional[float]) -> str:
    return "-" if value is None else f"{value:.2f}"


def _run_analyze(args: argparse.Namespace) -> int:
    window_size = args.window if args.window is not None else default_window_size()
    if window_size <= 0:
        print("--window must be positive", file=sys.stderr)
        return 2
    benchmarks = load_benchmarks(args.benchmarks)
    library = build_library(args.csv_dir)
    history = player_history(library, args.player)
    if not history:
        print(f"No games found for player {args.player!r}", file=sys.stderr)
        return 1

    if args.stat:
        window = analyze_window(stat_series(history, args.stat.lower()), window_size)
        if window is None:
            print(f"No values recorded for {args.stat!r}", file=sys.stderr)
            return 1
        if args.json:
            print(json.dumps(asdict(window), indent=2))
            return 0
        print(f"{args.player} - {args.stat} (last {window.games_in_window} of {window.total_games} games)")
        print(f"  average {_format_number(window.current_avg)}  median {_format_number(window.current_median)}")
        print(f"  range {_format_number(window.current_min)} - {_format_number(window.current_max)}")
        if window.has_prev_window:
            print(
                f"  trend avg {window.avg_trend:+.2f}  median {window.median_trend:+.2f}"
                f"  range {window.variance_trend:+.2f}"
            )
        else:
            print("  not enough earlier games for a trend")
        return 0

    analysis = analyze_player(history, window_size, benchmarks)
    if args.json:
        print(json.dumps(asdict(analysis), indent=2))
        return 0
    print(f"{args.player}: {analysis.games_analyzed} games, window {analysis.window_size}")
    if not analysis.sufficient_data:
        print(f"  {analysis.message}")
        return 0
    for label, keys in (
        ("Strengths", analysis.strengths),
        ("Weaknesses", analysis.weaknesses),
        ("Improving", analysis.improving),
        ("Declining", analysis.declining),
        ("Hot streaks", analysis.hot_streaks),
        ("Cold streaks", analysis.cold_streaks),
    ):
        print(f"  {label}: {', '.join(keys) if keys else '-'}")
    if analysis.recommendation:
        print(f"  Recommendation: {analysis.recommendation.message}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "validate":
            return _run_validate(args.csv_dir)
        return _run_analyze(args)
    except MalformedInputError as exc:
        print(f"Malformed CSV: {exc}", file=sys.stderr)
        return 2
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
