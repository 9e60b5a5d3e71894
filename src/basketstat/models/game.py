"""Game, player registry and library models."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from basketstat.models.stats import PerformanceRecord


CURRENT_SCHEMA_VERSION = 2


class PlayerIdentity(BaseModel):
    """Jersey number and name parsed from a ``#22 Christoffer`` cell."""

    number: Optional[int] = None
    name: str

    model_config = ConfigDict(frozen=True)


class PlayerRegistryEntry(BaseModel):
    number: Optional[int] = None
    active: bool = True

    model_config = ConfigDict(frozen=True)


class Game(BaseModel):
    """One uploaded box score.

    ``performances`` only holds players who actually took the floor.
    """

    id: str = Field(..., min_length=1)
    date: str
    opponent: str = ""
    league: str = ""
    home_away: Literal["home", "away"] = "home"
    performances: Dict[str, PerformanceRecord] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class GameLibrary(BaseModel):
    """Everything a team has uploaded, in the current persisted shape."""

    schema_version: int = CURRENT_SCHEMA_VERSION
    games: List[Game] = Field(default_factory=list)
    players: Dict[str, PlayerRegistryEntry] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
