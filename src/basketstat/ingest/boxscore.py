"""Turn an exported box score CSV into per-player performance records."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from basketstat.ingest.cells import clean_cell, extract_player_identity, is_player_cell, parse_stat_value
from basketstat.models import (
    MadeAttempted,
    PerformanceRecord,
    PlayerIdentity,
    PlayerRegistryEntry,
    StatValue,
    numeric_value,
)


logger = logging.getLogger(__name__)

PLAYER_COLUMN = "player"

_OTHER_ACTIVITY_KEYS = ("oreb", "dreb", "asst", "stl", "blk", "foul", "to")
_LINE_SPLIT = re.compile(r"\r?\n")


class MalformedInputError(ValueError):
    """Raised when a CSV cannot be ingested at all."""

    def __init__(self, message: str, headers: Sequence[str] = ()):
        super().__init__(message)
        self.headers = list(headers)


@dataclass(frozen=True)
class ScannedRow:
    identity: PlayerIdentity
    stats: PerformanceRecord
    played: bool


@dataclass(frozen=True)
class IngestResult:
    stat_headers: List[str]
    performances: Dict[str, PerformanceRecord]
    players_found: Dict[str, PlayerRegistryEntry]
    skipped_rows: int = 0
    not_played: List[str] = field(default_factory=list)


def _lookup(record: Mapping[str, StatValue], key: str) -> Optional[StatValue]:
    if key in record:
        return record[key]
    for candidate, value in record.items():
        if candidate.lower() == key:
            return value
    return None


def _positive(record: Mapping[str, StatValue], key: str) -> bool:
    number = numeric_value(_lookup(record, key))
    return number is not None and number > 0


def played_game(record: Mapping[str, StatValue]) -> bool:
    """Decide whether a roster row shows actual participation.

    Minutes alone are not trusted: some exports record 0 minutes for players
    who scored, so any sign of involvement counts.
    """

    has_minutes = _positive(record, "min")
    has_points = _positive(record, "pts")
    fg = _lookup(record, "fg")
    has_fg_attempts = isinstance(fg, MadeAttempted) and fg.attempted > 0
    plus_minus = numeric_value(_lookup(record, "+/-"))
    has_other_stats = any(_positive(record, key) for key in _OTHER_ACTIVITY_KEYS) or (
        plus_minus is not None and plus_minus != 0
    )
    return has_minutes or has_points or has_fg_attempts or has_other_stats


def _split_row(line: str) -> List[str]:
    return [clean_cell(cell) for cell in line.split(",")]


def _parse_header(header_row: str) -> tuple[List[str], int]:
    headers = _split_row(header_row)
    lowered = [header.lower() for header in headers]
    if PLAYER_COLUMN not in lowered:
        raise MalformedInputError(
            f"CSV must include a 'player' column; found headers: {headers}",
            headers,
        )
    return headers, lowered.index(PLAYER_COLUMN)


def scan_boxscore(header_row: str, data_rows: Sequence[str]) -> tuple[List[str], List[ScannedRow], int]:
    """Parse every player row, keeping non-participants tagged as such.

    Returns the lowercased stat headers, the scanned player rows in input order
    and the number of rows dropped for shape or team-total reasons.
    """

    headers, player_index = _parse_header(header_row)
    stat_columns = [(index, header.lower()) for index, header in enumerate(headers) if index != player_index]

    scanned: List[ScannedRow] = []
    skipped = 0
    for line_number, line in enumerate(data_rows, start=2):
        cells = _split_row(line)
        if len(cells) != len(headers):
            logger.debug("Dropping line %d: %d cells, expected %d", line_number, len(cells), len(headers))
            skipped += 1
            continue
        player_cell = cells[player_index]
        if not is_player_cell(player_cell):
            logger.debug("Dropping line %d: %r is not a player row", line_number, player_cell)
            skipped += 1
            continue
        stats: PerformanceRecord = {key: parse_stat_value(cells[index]) for index, key in stat_columns}
        scanned.append(
            ScannedRow(
                identity=extract_player_identity(player_cell),
                stats=stats,
                played=played_game(stats),
            )
        )
    return [key for _, key in stat_columns], scanned, skipped


def ingest(header_row: str, data_rows: Sequence[str]) -> IngestResult:
    """Build the performance map and registry delta for one game.

    Raises :class:`MalformedInputError` when no player column exists; every
    other anomaly drops the offending row.
    """

    stat_headers, scanned, skipped = scan_boxscore(header_row, data_rows)

    performances: Dict[str, PerformanceRecord] = {}
    players_found: Dict[str, PlayerRegistryEntry] = {}
    not_played: List[str] = []
    for row in scanned:
        name = row.identity.name
        if not row.played:
            not_played.append(name)
            continue
        if name in performances:
            logger.warning("Player %s appears more than once; keeping the later row", name)
        performances[name] = row.stats
        players_found[name] = PlayerRegistryEntry(number=row.identity.number, active=True)

    logger.info(
        "Ingested %d players (%d did not play, %d rows dropped)",
        len(performances),
        len(not_played),
        skipped,
    )
    return IngestResult(
        stat_headers=stat_headers,
        performances=performances,
        players_found=players_found,
        skipped_rows=skipped,
        not_played=not_played,
    )


def split_csv_text(text: str) -> tuple[str, List[str]]:
    lines = _LINE_SPLIT.split(text.strip())
    if not lines or not lines[0].strip():
        raise MalformedInputError("CSV is empty; found headers: []")
    return lines[0], lines[1:]


def ingest_csv_text(text: str) -> IngestResult:
    header, rows = split_csv_text(text)
    return ingest(header, rows)


def read_csv_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"not UTF-8 text (byte {exc.start})") from exc


def load_boxscore_csv(path: Path) -> IngestResult:
    try:
        return ingest_csv_text(read_csv_text(path))
    except MalformedInputError as exc:
        raise MalformedInputError(f"{path.name}: {exc}", exc.headers) from None
