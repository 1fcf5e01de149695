# ABOUTME: Generation-aware Pokemon type effectiveness charts (Gen 1, Gen 2-5, Gen 6+).
# ABOUTME: Provides ruleset lookup per generation and pure typing matchup helpers.

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TypedDict

logger = logging.getLogger(__name__)

# Effectiveness thresholds
SUPER_EFFECTIVE_THRESHOLD = 2.0
RESISTANCE_THRESHOLD = 0.5
NEUTRAL_VALUE = 1.0
IMMUNITY_VALUE = 0.0

FIRST_GENERATION = 1
LATEST_GENERATION = 9
# First generation of each chart tier
STEEL_DARK_GENERATION = 2
FAIRY_GENERATION = 6

EffectivenessMatrix = Mapping[str, Mapping[str, float]]

TYPES: tuple[str, ...] = (
    "normal",
    "fire",
    "water",
    "electric",
    "grass",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
)


class GenerationInfo(TypedDict):
    """Display metadata for a generation."""

    id: int
    name: str
    region: str
    limit: int


GENERATIONS: tuple[GenerationInfo, ...] = (
    {"id": 1, "name": "Gen 1", "region": "Kanto", "limit": 151},
    {"id": 2, "name": "Gen 2", "region": "Johto", "limit": 251},
    {"id": 3, "name": "Gen 3", "region": "Hoenn", "limit": 386},
    {"id": 4, "name": "Gen 4", "region": "Sinnoh", "limit": 493},
    {"id": 5, "name": "Gen 5", "region": "Unova", "limit": 649},
    {"id": 6, "name": "Gen 6", "region": "Kalos", "limit": 721},
    {"id": 7, "name": "Gen 7", "region": "Alola", "limit": 809},
    {"id": 8, "name": "Gen 8", "region": "Galar", "limit": 898},
    {"id": 9, "name": "Gen 9", "region": "Paldea", "limit": 1025},
)

# Sparse charts: CHART[attacking_type][defending_type]. Missing entries are neutral (1x).
_MODERN_CHART: dict[str, dict[str, float]] = {
    "normal": {"rock": 0.5, "ghost": 0.0, "steel": 0.5},
    "fire": {"fire": 0.5, "water": 0.5, "grass": 2.0, "ice": 2.0, "bug": 2.0, "rock": 0.5, "dragon": 0.5, "steel": 2.0},
    "water": {"fire": 2.0, "water": 0.5, "grass": 0.5, "ground": 2.0, "rock": 2.0, "dragon": 0.5},
    "electric": {"water": 2.0, "electric": 0.5, "grass": 0.5, "ground": 0.0, "flying": 2.0, "dragon": 0.5},
    "grass": {
        "fire": 0.5,
        "water": 2.0,
        "grass": 0.5,
        "poison": 0.5,
        "ground": 2.0,
        "flying": 0.5,
        "bug": 0.5,
        "rock": 2.0,
        "dragon": 0.5,
        "steel": 0.5,
    },
    "ice": {"fire": 0.5, "water": 0.5, "grass": 2.0, "ice": 0.5, "ground": 2.0, "flying": 2.0, "dragon": 2.0, "steel": 0.5},
    "fighting": {
        "normal": 2.0,
        "ice": 2.0,
        "poison": 0.5,
        "flying": 0.5,
        "psychic": 0.5,
        "bug": 0.5,
        "rock": 2.0,
        "ghost": 0.0,
        "dark": 2.0,
        "steel": 2.0,
        "fairy": 0.5,
    },
    "poison": {"grass": 2.0, "poison": 0.5, "ground": 0.5, "rock": 0.5, "ghost": 0.5, "steel": 0.0, "fairy": 2.0},
    "ground": {"fire": 2.0, "electric": 2.0, "grass": 0.5, "poison": 2.0, "flying": 0.0, "bug": 0.5, "rock": 2.0, "steel": 2.0},
    "flying": {"electric": 0.5, "grass": 2.0, "fighting": 2.0, "bug": 2.0, "rock": 0.5, "steel": 0.5},
    "psychic": {"fighting": 2.0, "poison": 2.0, "psychic": 0.5, "dark": 0.0, "steel": 0.5},
    "bug": {
        "fire": 0.5,
        "grass": 2.0,
        "fighting": 0.5,
        "poison": 0.5,
        "flying": 0.5,
        "psychic": 2.0,
        "ghost": 0.5,
        "dark": 2.0,
        "steel": 0.5,
        "fairy": 0.5,
    },
    "rock": {"fire": 2.0, "ice": 2.0, "fighting": 0.5, "ground": 0.5, "flying": 2.0, "bug": 2.0, "steel": 0.5},
    "ghost": {"normal": 0.0, "psychic": 2.0, "ghost": 2.0, "dark": 0.5},
    "dragon": {"dragon": 2.0, "steel": 0.5, "fairy": 0.0},
    "dark": {"fighting": 0.5, "psychic": 2.0, "ghost": 2.0, "dark": 0.5, "fairy": 0.5},
    "steel": {"fire": 0.5, "water": 0.5, "electric": 0.5, "ice": 2.0, "rock": 2.0, "steel": 0.5, "fairy": 2.0},
    "fairy": {"fire": 0.5, "fighting": 2.0, "poison": 0.5, "dragon": 2.0, "dark": 2.0, "steel": 0.5},
}


def _build_gen2_5_chart() -> dict[str, dict[str, float]]:
    """Derive the pre-Fairy chart from the modern one.

    Fairy is dropped both as an attacking row and as a defending column, and
    Steel regains its resistance to Ghost and Dark.
    """
    chart = {
        atk_type: {def_type: mult for def_type, mult in row.items() if def_type != "fairy"}
        for atk_type, row in _MODERN_CHART.items()
        if atk_type != "fairy"
    }
    chart["ghost"]["steel"] = RESISTANCE_THRESHOLD
    chart["dark"]["steel"] = RESISTANCE_THRESHOLD
    return chart


# No Steel/Dark/Fairy. Includes the Gen 1 cartridge quirks: Ice neutral on Fire,
# Poison and Bug super effective on each other, Ghost unable to touch Psychic.
_GEN1_CHART: dict[str, dict[str, float]] = {
    "normal": {"rock": 0.5, "ghost": 0.0},
    "fire": {"fire": 0.5, "water": 0.5, "grass": 2.0, "ice": 2.0, "bug": 2.0, "rock": 0.5, "dragon": 0.5},
    "water": {"fire": 2.0, "water": 0.5, "grass": 0.5, "ground": 2.0, "rock": 2.0, "dragon": 0.5},
    "electric": {"water": 2.0, "electric": 0.5, "grass": 0.5, "ground": 0.0, "flying": 2.0, "dragon": 0.5},
    "grass": {
        "fire": 0.5,
        "water": 2.0,
        "grass": 0.5,
        "poison": 0.5,
        "ground": 2.0,
        "flying": 0.5,
        "bug": 0.5,
        "rock": 2.0,
        "dragon": 0.5,
    },
    "ice": {"water": 0.5, "grass": 2.0, "ice": 0.5, "ground": 2.0, "flying": 2.0, "dragon": 2.0, "fire": 1.0},
    "fighting": {
        "normal": 2.0,
        "ice": 2.0,
        "poison": 0.5,
        "flying": 0.5,
        "psychic": 0.5,
        "bug": 0.5,
        "rock": 2.0,
        "ghost": 0.0,
    },
    "poison": {"grass": 2.0, "poison": 0.5, "ground": 0.5, "rock": 0.5, "ghost": 0.5, "bug": 2.0},
    "ground": {"fire": 2.0, "electric": 2.0, "grass": 0.5, "poison": 2.0, "flying": 0.0, "bug": 0.5, "rock": 2.0},
    "flying": {"electric": 0.5, "grass": 2.0, "fighting": 2.0, "bug": 2.0, "rock": 0.5},
    "psychic": {"fighting": 2.0, "poison": 2.0, "psychic": 0.5},
    "bug": {"fire": 0.5, "grass": 2.0, "fighting": 0.5, "poison": 2.0, "flying": 0.5, "psychic": 2.0, "ghost": 0.5},
    "rock": {"fire": 2.0, "ice": 2.0, "fighting": 0.5, "ground": 0.5, "flying": 2.0, "bug": 2.0},
    "ghost": {"normal": 0.0, "psychic": 0.0, "ghost": 2.0},
    "dragon": {"dragon": 2.0},
}


def _freeze(chart: dict[str, dict[str, float]]) -> EffectivenessMatrix:
    return MappingProxyType({atk_type: MappingProxyType(dict(row)) for atk_type, row in chart.items()})


MODERN_CHART: EffectivenessMatrix = _freeze(_MODERN_CHART)
GEN2_5_CHART: EffectivenessMatrix = _freeze(_build_gen2_5_chart())
GEN1_CHART: EffectivenessMatrix = _freeze(_GEN1_CHART)

_GEN1_TYPES: tuple[str, ...] = tuple(t for t in TYPES if t not in ("dark", "steel", "fairy"))
_GEN2_5_TYPES: tuple[str, ...] = tuple(t for t in TYPES if t != "fairy")


def clamp_generation(gen: int) -> int:
    """Clamp a generation id into the supported range.

    Args:
        gen: Requested generation id. Anything below 1 behaves as Gen 1,
            anything above the latest known generation as the latest one.

    Returns:
        Generation id between FIRST_GENERATION and LATEST_GENERATION.
    """
    clamped = min(max(gen, FIRST_GENERATION), LATEST_GENERATION)
    if clamped != gen:
        logger.debug("Generation %s clamped to %s", gen, clamped)
    return clamped


def get_matrix_for_generation(gen: int) -> EffectivenessMatrix:
    """Return the effectiveness chart that applies to a generation.

    Args:
        gen: Generation id. Out-of-range values are clamped, never rejected.

    Returns:
        Read-only sparse chart keyed by attacking then defending type.
    """
    gen = clamp_generation(gen)
    if gen < STEEL_DARK_GENERATION:
        return GEN1_CHART
    if gen < FAIRY_GENERATION:
        return GEN2_5_CHART
    return MODERN_CHART


def get_types_for_generation(gen: int) -> tuple[str, ...]:
    """Return the ordered list of types that exist in a generation.

    Args:
        gen: Generation id. Out-of-range values are clamped, never rejected.

    Returns:
        Tuple of type ids in canonical chart order.
    """
    gen = clamp_generation(gen)
    if gen < STEEL_DARK_GENERATION:
        return _GEN1_TYPES
    if gen < FAIRY_GENERATION:
        return _GEN2_5_TYPES
    return TYPES


def lookup(matrix: EffectivenessMatrix, atk_type: str, def_type: str) -> float:
    """Single chart lookup; a missing row or column is neutral."""
    row = matrix.get(atk_type)
    if row is None:
        return NEUTRAL_VALUE
    return row.get(def_type, NEUTRAL_VALUE)


def get_effectiveness(atk_type: str, def_types: Iterable[str], gen: int = LATEST_GENERATION) -> float:
    """Calculate the pure typing multiplier of an attack against a defender.

    Args:
        atk_type: The attacking type (e.g., "fire").
        def_types: The defender's types. Types absent from the generation are ignored.
        gen: Generation id selecting the chart.

    Returns:
        Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.

    Note:
        A type listed twice counts once (e.g., water vs fire/fire = 2x, NOT 4x).
    """
    matrix = get_matrix_for_generation(gen)
    available = get_types_for_generation(gen)

    multiplier = NEUTRAL_VALUE
    seen: set[str] = set()
    for def_type in def_types:
        if def_type in seen or def_type not in available:
            continue
        seen.add(def_type)
        multiplier *= lookup(matrix, atk_type, def_type)
    return multiplier


def get_weaknesses(def_types: Iterable[str], gen: int = LATEST_GENERATION) -> list[str]:
    """Return attacking types that are super effective (>=2x) against the typing."""
    def_types = tuple(def_types)
    return [
        atk_type
        for atk_type in get_types_for_generation(gen)
        if get_effectiveness(atk_type, def_types, gen) >= SUPER_EFFECTIVE_THRESHOLD
    ]


def get_resistances(def_types: Iterable[str], gen: int = LATEST_GENERATION) -> list[str]:
    """Return attacking types resisted (<=0.5x, excluding 0x) by the typing."""
    def_types = tuple(def_types)
    return [
        atk_type
        for atk_type in get_types_for_generation(gen)
        if IMMUNITY_VALUE < get_effectiveness(atk_type, def_types, gen) <= RESISTANCE_THRESHOLD
    ]


def get_immunities(def_types: Iterable[str], gen: int = LATEST_GENERATION) -> list[str]:
    """Return attacking types the typing is immune to (0x)."""
    def_types = tuple(def_types)
    return [
        atk_type
        for atk_type in get_types_for_generation(gen)
        if get_effectiveness(atk_type, def_types, gen) == IMMUNITY_VALUE
    ]


def get_neutral(def_types: Iterable[str], gen: int = LATEST_GENERATION) -> list[str]:
    """Return attacking types at neutral (1x) effectiveness against the typing."""
    def_types = tuple(def_types)
    return [
        atk_type
        for atk_type in get_types_for_generation(gen)
        if get_effectiveness(atk_type, def_types, gen) == NEUTRAL_VALUE
    ]
