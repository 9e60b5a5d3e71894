"""Input adapters that turn exported box scores into stat records."""

from .boxscore import (
    IngestResult,
    MalformedInputError,
    ScannedRow,
    ingest,
    ingest_csv_text,
    load_boxscore_csv,
    played_game,
    read_csv_text,
    scan_boxscore,
    split_csv_text,
)
from .cells import clean_cell, extract_player_identity, is_player_cell, parse_stat_value

__all__ = [
    "IngestResult",
    "MalformedInputError",
    "ScannedRow",
    "clean_cell",
    "extract_player_identity",
    "ingest",
    "ingest_csv_text",
    "is_player_cell",
    "load_boxscore_csv",
    "parse_stat_value",
    "read_csv_text",
    "played_game",
    "scan_boxscore",
    "split_csv_text",
]
