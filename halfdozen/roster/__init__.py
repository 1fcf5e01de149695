"""ABOUTME: Roster package for halfdozen.
ABOUTME: Exports the immutable roster snapshot types consumed by the engine."""

from halfdozen.roster.dataclasses import (
    DAMAGE_CLASSES,
    MAX_MOVES,
    ROSTER_SIZE,
    Creature,
    Roster,
    SelectedMove,
)

__all__ = [
    "DAMAGE_CLASSES",
    "MAX_MOVES",
    "ROSTER_SIZE",
    "Creature",
    "Roster",
    "SelectedMove",
]
