"""Cell-level parsing for exported box score CSVs."""

from __future__ import annotations

import re

from basketstat.models import ABSENT, Count, MadeAttempted, PlayerIdentity, RawText, StatValue


_MADE_ATTEMPTED_PATTERN = re.compile(r"^(\d{1,9})-(\d{1,9})$")
_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")
# Decimal literal only; float() would also accept "nan", "inf" and "1_000".
_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_PLAYER_PATTERN = re.compile(r"^#(\d{1,9})\s+(.+)$")


def clean_cell(raw: str) -> str:
    """Trim a cell and drop one pair of surrounding quotes."""

    cleaned = raw.strip()
    for quote in ('"', "'"):
        if len(cleaned) >= 2 and cleaned[0] == quote and cleaned[-1] == quote:
            cleaned = cleaned[1:-1]
    return cleaned.strip()


def parse_stat_value(raw: str) -> StatValue:
    """Convert a raw cell into a typed stat value.

    Never raises: anything unrecognised is kept as :class:`RawText`.
    """

    text = clean_cell(raw)
    if text == "" or text == "-":
        return ABSENT

    match = _MADE_ATTEMPTED_PATTERN.match(text)
    if match:
        return MadeAttempted(made=int(match.group(1)), attempted=int(match.group(2)))

    if text.endswith("%"):
        prefix = _LEADING_INT_PATTERN.match(text[:-1])
        if prefix is None:
            return ABSENT
        return Count(value=float(prefix.group(1)))

    if _NUMBER_PATTERN.match(text):
        return Count(value=float(text))
    return RawText(text=text)


def extract_player_identity(raw: str) -> PlayerIdentity:
    text = clean_cell(raw)
    match = _PLAYER_PATTERN.match(text)
    if match is None:
        return PlayerIdentity(number=None, name=text)
    return PlayerIdentity(number=int(match.group(1)), name=match.group(2).strip())


def is_player_cell(raw: str) -> bool:
    """Player rows start with a jersey number; team totals do not."""

    return clean_cell(raw).startswith("#")
