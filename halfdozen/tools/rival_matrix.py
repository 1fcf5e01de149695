# ABOUTME: Rival matchup matrix comparing a team's moves against a scouted enemy team.
# ABOUTME: Each cell holds the best composite multiplier a user creature lands on an enemy creature.

from typing import TypedDict

from halfdozen.roster.dataclasses import Creature, Roster
from halfdozen.tools.effectiveness import NO_DATA, has_offensive_data, resolve_defending_types
from halfdozen.utils.type_chart import (
    IMMUNITY_VALUE,
    NEUTRAL_VALUE,
    SUPER_EFFECTIVE_THRESHOLD,
    get_matrix_for_generation,
    lookup,
)

NO_DATA_CATEGORY = "no data"


class RivalCell(TypedDict):
    """Best multiplier of one user creature against one enemy creature."""

    enemy_slot: int
    enemy_name: str
    best_multiplier: float
    best_move: str | None
    category: str


class RivalRow(TypedDict):
    """One user creature's matchups across the enemy team."""

    user_slot: int
    user_name: str
    cells: list[RivalCell]


def categorize_multiplier(multiplier: float) -> str:
    """Label a multiplier as "super", "neutral", "resisted", "immune" or "no data"."""
    if not has_offensive_data(multiplier):
        return NO_DATA_CATEGORY
    if multiplier >= SUPER_EFFECTIVE_THRESHOLD:
        return "super"
    if multiplier == NEUTRAL_VALUE:
        return "neutral"
    if multiplier == IMMUNITY_VALUE:
        return "immune"
    return "resisted"


def best_move_against(attacker: Creature, defender: Creature, gen: int) -> tuple[float, str | None]:
    """Return the best composite multiplier and move of an attacker against a defender.

    Only damaging moves count. Without any, the result is (NO_DATA, None).
    The first damaging move is reported until another one does better, so a
    fully immune defender still names a move.
    """
    damaging = attacker.damaging_moves
    if not damaging:
        return NO_DATA, None

    matrix = get_matrix_for_generation(gen)
    def_types = resolve_defending_types(defender, gen)

    best_multiplier = IMMUNITY_VALUE
    best_move = damaging[0].name
    for move in damaging:
        multiplier = NEUTRAL_VALUE
        for def_type in def_types:
            multiplier *= lookup(matrix, move.type.lower(), def_type)
        if multiplier > best_multiplier:
            best_multiplier, best_move = multiplier, move.name
    return best_multiplier, best_move


def build_rival_matrix(user_roster: Roster, enemy_roster: Roster, gen: int) -> list[RivalRow] | None:
    """Build the matchup grid between two teams.

    Args:
        user_roster: The player's team.
        enemy_roster: The scouted rival team.
        gen: Generation id.

    Returns:
        One RivalRow per occupied user slot, or None if either team is empty.
    """
    if user_roster.is_empty or enemy_roster.is_empty:
        return None

    rows: list[RivalRow] = []
    for user_slot, user in user_roster.members():
        cells: list[RivalCell] = []
        for enemy_slot, enemy in enemy_roster.members():
            multiplier, move_name = best_move_against(user, enemy, gen)
            cells.append(
                {
                    "enemy_slot": enemy_slot,
                    "enemy_name": enemy.display_name,
                    "best_multiplier": multiplier,
                    "best_move": move_name,
                    "category": categorize_multiplier(multiplier),
                }
            )
        rows.append({"user_slot": user_slot, "user_name": user.display_name, "cells": cells})
    return rows
