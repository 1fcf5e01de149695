# ABOUTME: Utils package for halfdozen.
# ABOUTME: Contains the generation charts, modifier tables and name normalization.

from halfdozen.utils.modifiers import DEFAULT_MODIFIERS, ModifierTables
from halfdozen.utils.normalize import is_unset, slugify
from halfdozen.utils.type_chart import (
    GENERATIONS,
    TYPES,
    clamp_generation,
    get_effectiveness,
    get_immunities,
    get_matrix_for_generation,
    get_neutral,
    get_resistances,
    get_types_for_generation,
    get_weaknesses,
)

__all__ = [
    "DEFAULT_MODIFIERS",
    "GENERATIONS",
    "TYPES",
    "ModifierTables",
    "clamp_generation",
    "get_effectiveness",
    "get_immunities",
    "get_matrix_for_generation",
    "get_neutral",
    "get_resistances",
    "get_types_for_generation",
    "get_weaknesses",
    "is_unset",
    "slugify",
]
