# ABOUTME: Effectiveness calculator shared by every team view.
# ABOUTME: Combines typing, custom type overrides, ability and item modifiers per generation.

from typing import TypedDict

from halfdozen.roster.dataclasses import Creature
from halfdozen.utils.modifiers import (
    ABILITY_GENERATION,
    DEFAULT_MODIFIERS,
    ITEM_GENERATION,
    ModifierTables,
    get_ability_immunities,
)
from halfdozen.utils.type_chart import (
    IMMUNITY_VALUE,
    NEUTRAL_VALUE,
    clamp_generation,
    get_matrix_for_generation,
    get_types_for_generation,
    lookup,
)

# Returned when an attacker has no damaging moves; never a real multiplier
NO_DATA = -1.0


class CreatureProfile(TypedDict):
    """Per-creature defensive breakdown across a generation's types."""

    name: str
    types: list[str]
    weaknesses: list[str]
    resistances: list[str]
    immunities: list[str]
    neutral: list[str]
    ability_immunities: list[str]
    multipliers: dict[str, float]


def resolve_defending_types(defender: Creature, gen: int) -> tuple[str, ...]:
    """Return the types a creature defends with under a generation.

    A non-empty custom override replaces the native typing. Types that do not
    exist in the generation are dropped, so a Fairy override defends as
    typeless before Gen 6.

    Args:
        defender: The defending creature.
        gen: Generation id.

    Returns:
        Tuple of distinct type ids, possibly empty.
    """
    available = get_types_for_generation(gen)
    resolved: list[str] = []
    for def_type in defender.active_types:
        if def_type in available and def_type not in resolved:
            resolved.append(def_type)
    return tuple(resolved)


def compute_multiplier(
    attacking_type: str,
    defender: Creature,
    gen: int,
    modifiers: ModifierTables = DEFAULT_MODIFIERS,
) -> float:
    """Calculate the multiplier an attacking type deals to a creature.

    Typing resolves first. Ability (Gen 3+) and held item (Gen 2+) overrides
    are multiplied in afterwards, and only while the multiplier is non-zero.

    Args:
        attacking_type: The attacking type (e.g., "ground").
        defender: The defending creature.
        gen: Generation id selecting the chart and modifier gates.
        modifiers: Ability and item tables.

    Returns:
        Final multiplier (0, 0.125, 0.25, 0.5, 1, 2 or 4).
    """
    gen = clamp_generation(gen)
    matrix = get_matrix_for_generation(gen)

    multiplier = NEUTRAL_VALUE
    for def_type in resolve_defending_types(defender, gen):
        multiplier *= lookup(matrix, attacking_type, def_type)

    if multiplier > IMMUNITY_VALUE and gen >= ABILITY_GENERATION:
        override = modifiers.ability_modifier(defender.ability, attacking_type)
        if override is not None:
            multiplier *= override

    if multiplier > IMMUNITY_VALUE and gen >= ITEM_GENERATION:
        override = modifiers.item_modifier(defender.item, attacking_type)
        if override is not None:
            multiplier *= override

    return multiplier


def compute_best_offensive_multiplier(defending_type: str, attacker: Creature, gen: int) -> float:
    """Return the best multiplier any of a creature's damaging moves deals to a single type.

    Args:
        defending_type: The defending type.
        attacker: The attacking creature.
        gen: Generation id selecting the chart.

    Returns:
        The highest chart value across damaging moves, or NO_DATA when the
        creature has no named physical or special move.
    """
    damaging = attacker.damaging_moves
    if not damaging:
        return NO_DATA

    matrix = get_matrix_for_generation(gen)
    return max(lookup(matrix, move.type.lower(), defending_type) for move in damaging)


def has_offensive_data(multiplier: float) -> bool:
    """True unless the value is the NO_DATA sentinel."""
    return multiplier != NO_DATA


def profile_creature(
    defender: Creature,
    gen: int,
    modifiers: ModifierTables = DEFAULT_MODIFIERS,
) -> CreatureProfile:
    """Classify every attacking type of a generation against one creature.

    Args:
        defender: The defending creature.
        gen: Generation id.
        modifiers: Ability and item tables.

    Returns:
        CreatureProfile with weaknesses, resistances (excluding immunities),
        immunities, neutral types, display-only ability immunities and the raw
        multiplier per attacking type.
    """
    weaknesses: list[str] = []
    resistances: list[str] = []
    immunities: list[str] = []
    neutral: list[str] = []
    multipliers: dict[str, float] = {}

    types = get_types_for_generation(gen)
    for atk_type in types:
        multiplier = compute_multiplier(atk_type, defender, gen, modifiers)
        multipliers[atk_type] = multiplier

        if multiplier == IMMUNITY_VALUE:
            immunities.append(atk_type)
        elif multiplier < NEUTRAL_VALUE:
            resistances.append(atk_type)
        elif multiplier == NEUTRAL_VALUE:
            neutral.append(atk_type)
        else:  # multiplier > 1.0
            weaknesses.append(atk_type)

    ability_immunities: list[str] = []
    if clamp_generation(gen) >= ABILITY_GENERATION:
        ability_immunities = [t for t in get_ability_immunities(defender.ability) if t in types]

    return {
        "name": defender.display_name,
        "types": list(resolve_defending_types(defender, gen)),
        "weaknesses": weaknesses,
        "resistances": resistances,
        "immunities": immunities,
        "neutral": neutral,
        "ability_immunities": ability_immunities,
        "multipliers": multipliers,
    }


def count_weaknesses(defender: Creature, gen: int, modifiers: ModifierTables = DEFAULT_MODIFIERS) -> int:
    """Count the attacking types that hit a creature for more than 1x."""
    return sum(
        1 for atk_type in get_types_for_generation(gen) if compute_multiplier(atk_type, defender, gen, modifiers) > 1
    )
