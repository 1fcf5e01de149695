# ABOUTME: Swap advisor for a full team facing its worst defensive threat.
# ABOUTME: Picks the weakest member to bench and a well-known typing archetype to bring in.

import logging
from dataclasses import dataclass

from halfdozen.roster.dataclasses import Roster
from halfdozen.tools.defensive_suggester import recommend_defensive_counters
from halfdozen.tools.effectiveness import compute_multiplier, count_weaknesses
from halfdozen.tools.team_matrix import aggregate_defensive
from halfdozen.utils.modifiers import DEFAULT_MODIFIERS, ModifierTables
from halfdozen.utils.type_chart import NEUTRAL_VALUE, get_effectiveness, get_types_for_generation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Archetype:
    """A well-known Pokemon used to illustrate a defensive typing."""

    name: str
    types: tuple[str, ...]


# Illustrative only. Order decides which example is shown first for a counter type.
ARCHETYPES: tuple[Archetype, ...] = (
    Archetype("Skarmory", ("steel", "flying")),
    Archetype("Ferrothorn", ("grass", "steel")),
    Archetype("Heatran", ("fire", "steel")),
    Archetype("Metagross", ("steel", "psychic")),
    Archetype("Klefki", ("steel", "fairy")),
    Archetype("Excadrill", ("ground", "steel")),
    Archetype("Empoleon", ("water", "steel")),
    Archetype("Scizor", ("bug", "steel")),
    Archetype("Swampert", ("water", "ground")),
    Archetype("Gastrodon", ("water", "ground")),
    Archetype("Toxapex", ("water", "poison")),
    Archetype("Azumarill", ("water", "fairy")),
    Archetype("Gyarados", ("water", "flying")),
    Archetype("Lapras", ("water", "ice")),
    Archetype("Rotom-Wash", ("electric", "water")),
    Archetype("Zapdos", ("electric", "flying")),
    Archetype("Magnezone", ("electric", "steel")),
    Archetype("Venusaur", ("grass", "poison")),
    Archetype("Breloom", ("grass", "fighting")),
    Archetype("Charizard", ("fire", "flying")),
    Archetype("Volcarona", ("bug", "fire")),
    Archetype("Blaziken", ("fire", "fighting")),
    Archetype("Garchomp", ("dragon", "ground")),
    Archetype("Dragonite", ("dragon", "flying")),
    Archetype("Kingdra", ("water", "dragon")),
    Archetype("Gliscor", ("ground", "flying")),
    Archetype("Rhydon", ("ground", "rock")),
    Archetype("Tyranitar", ("rock", "dark")),
    Archetype("Sableye", ("dark", "ghost")),
    Archetype("Gengar", ("ghost", "poison")),
    Archetype("Mimikyu", ("ghost", "fairy")),
    Archetype("Aegislash", ("steel", "ghost")),
    Archetype("Clefable", ("fairy",)),
    Archetype("Umbreon", ("dark",)),
    Archetype("Snorlax", ("normal",)),
    Archetype("Lucario", ("fighting", "steel")),
    Archetype("Machamp", ("fighting",)),
    Archetype("Alakazam", ("psychic",)),
    Archetype("Slowbro", ("water", "psychic")),
    Archetype("Articuno", ("ice", "flying")),
    Archetype("Weezing", ("poison",)),
    Archetype("Arcanine", ("fire",)),
    Archetype("Vaporeon", ("water",)),
    Archetype("Jolteon", ("electric",)),
)


@dataclass(frozen=True)
class SwapSuggestion:
    """Advice to replace one roster member to patch the worst threat.

    Attributes:
        threat_type: The attacking type the team is most exposed to.
        threat_score: Net defensive score of that type.
        swap_out_slot: Zero-based roster slot of the member to replace.
        swap_out_name: Display name of that member.
        swap_out_weakness_count: How many types that member is weak to.
        counter_types: Types that resist or ignore the threat.
        swap_in: Example Pokemon or "Any <Type> type".
        swap_in_types: Typing of the example, or the single fallback type.
    """

    threat_type: str
    threat_score: int
    swap_out_slot: int
    swap_out_name: str
    swap_out_weakness_count: int
    counter_types: tuple[str, ...]
    swap_in: str
    swap_in_types: tuple[str, ...]


def find_archetype(threat_type: str, counter_types: list[str], gen: int) -> Archetype | None:
    """Return the first archetype that resists the threat, by counter type order.

    Archetypes with a type missing from the generation are skipped.
    """
    available = set(get_types_for_generation(gen))
    for counter_type in counter_types:
        for archetype in ARCHETYPES:
            if counter_type not in archetype.types:
                continue
            if not available.issuperset(archetype.types):
                continue
            if get_effectiveness(threat_type, archetype.types, gen) < NEUTRAL_VALUE:
                return archetype
    return None


def suggest_swap(
    roster: Roster,
    gen: int,
    modifiers: ModifierTables = DEFAULT_MODIFIERS,
) -> SwapSuggestion | None:
    """Suggest a single swap for a full roster.

    Args:
        roster: Team snapshot; must have all six slots filled.
        gen: Generation id.
        modifiers: Ability and item tables.

    Returns:
        SwapSuggestion, or None when the roster is not full, has no positive
        defensive threat, or the threat has no counter type in this generation.
    """
    if not roster.is_full:
        return None

    threats = recommend_defensive_counters(aggregate_defensive(roster, gen, modifiers), gen, limit=1)
    if not threats:
        return None

    threat = threats[0]
    threat_type = threat["threat_type"]
    counter_types = threat["suggested_counter_types"]
    if not counter_types:
        logger.debug("No type resists %s in gen %s, no swap suggested", threat_type, gen)
        return None

    # Highest total weakness count wins; ties keep the earliest slot
    best_slot: int | None = None
    best_name = ""
    best_count = -1
    for slot, creature in roster.members():
        if compute_multiplier(threat_type, creature, gen, modifiers) <= NEUTRAL_VALUE:
            continue
        weakness_count = count_weaknesses(creature, gen, modifiers)
        if weakness_count > best_count:
            best_slot, best_name, best_count = slot, creature.display_name, weakness_count

    if best_slot is None:
        return None

    archetype = find_archetype(threat_type, counter_types, gen)
    if archetype is not None:
        swap_in, swap_in_types = archetype.name, archetype.types
    else:
        swap_in, swap_in_types = f"Any {counter_types[0].title()} type", (counter_types[0],)

    logger.debug("Swap %s (slot %s) for %s against %s", best_name, best_slot, swap_in, threat_type)

    return SwapSuggestion(
        threat_type=threat_type,
        threat_score=threat["score"],
        swap_out_slot=best_slot,
        swap_out_name=best_name,
        swap_out_weakness_count=best_count,
        counter_types=tuple(counter_types),
        swap_in=swap_in,
        swap_in_types=swap_in_types,
    )
