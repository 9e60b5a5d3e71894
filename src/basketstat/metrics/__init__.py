"""Derived per-game metrics."""

from .computed import (
    AST_TO_KEY,
    ATTACK_KEY,
    COMPUTED_KEYS,
    DEFENCE_KEY,
    SHOOTING_KEY,
    augment_record,
    compute_ast_to_ratio,
    compute_attack_energy,
    compute_defence_domination,
    compute_shooting_star,
    compute_stats,
    get_foul_multiplier,
    round1,
    round2,
)

__all__ = [
    "AST_TO_KEY",
    "ATTACK_KEY",
    "COMPUTED_KEYS",
    "DEFENCE_KEY",
    "SHOOTING_KEY",
    "augment_record",
    "compute_ast_to_ratio",
    "compute_attack_energy",
    "compute_defence_domination",
    "compute_shooting_star",
    "compute_stats",
    "get_foul_multiplier",
    "round1",
    "round2",
]
