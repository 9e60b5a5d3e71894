"""Tagged stat values stored per player per game."""

from __future__ import annotations

from typing import Annotated, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Absent(BaseModel):
    """No value recorded for the stat."""

    kind: Literal["absent"] = "absent"

    model_config = ConfigDict(frozen=True)


class Count(BaseModel):
    """Plain numeric stat (points, rebounds, percentages, ratios)."""

    kind: Literal["count"] = "count"
    value: float

    model_config = ConfigDict(frozen=True)


class MadeAttempted(BaseModel):
    """Shot pair such as ``9-19`` field goals."""

    kind: Literal["made_attempted"] = "made_attempted"
    made: int = Field(..., ge=0)
    attempted: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class RawText(BaseModel):
    """Cell text that was neither empty nor numeric, kept verbatim."""

    kind: Literal["raw_text"] = "raw_text"
    text: str

    model_config = ConfigDict(frozen=True)


StatValue = Annotated[Union[Absent, Count, MadeAttempted, RawText], Field(discriminator="kind")]

# stat key (lowercase) -> value, one player in one game
PerformanceRecord = Dict[str, StatValue]

ABSENT = Absent()


def numeric_value(value: StatValue | None) -> Optional[float]:
    """Return the number used for charting and classification.

    Made/attempted pairs contribute their ``made`` component. Absent, raw text
    and missing values yield ``None``.
    """

    if isinstance(value, Count):
        return value.value
    if isinstance(value, MadeAttempted):
        return float(value.made)
    return None


def count_value(value: StatValue | None, default: float = 0.0) -> float:
    """Return the value of a plain count, ``default`` for anything else."""

    if isinstance(value, Count):
        return value.value
    return default


def attempts(value: StatValue | None) -> int:
    if isinstance(value, MadeAttempted):
        return value.attempted
    return 0
