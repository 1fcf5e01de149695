# ABOUTME: Static ability and held-item type modifier tables.
# ABOUTME: Immutable, injected into the effectiveness calculator rather than read as globals.

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from halfdozen.utils.normalize import slugify

# Abilities arrived in Gen 3, held items in Gen 2
ABILITY_GENERATION = 3
ITEM_GENERATION = 2

ModifierTable = Mapping[str, Mapping[str, float]]


def _freeze(table: dict[str, dict[str, float]]) -> ModifierTable:
    return MappingProxyType({slugify(name): MappingProxyType(dict(row)) for name, row in table.items()})


ABILITY_MODIFIERS: ModifierTable = _freeze(
    {
        "levitate": {"ground": 0.0},
        "thick-fat": {"fire": 0.5, "ice": 0.5},
        "sap-sipper": {"grass": 0.0},
        "volt-absorb": {"electric": 0.0},
        "water-absorb": {"water": 0.0},
        "flash-fire": {"fire": 0.0},
        "earth-eater": {"ground": 0.0},
        "well-baked-body": {"fire": 0.0},
        "wind-rider": {"flying": 0.0},
    }
)

ITEM_MODIFIERS: ModifierTable = _freeze(
    {
        "air-balloon": {"ground": 0.0},
    }
)

# Display only: abilities that ignore attacks of these types. Never feeds multipliers.
IMMUNITY_ABILITIES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        slugify(name): types
        for name, types in {
            "levitate": ("ground",),
            "volt-absorb": ("electric",),
            "flash-fire": ("fire",),
            "wonder-guard": (
                "normal",
                "water",
                "electric",
                "grass",
                "ice",
                "fighting",
                "poison",
                "ground",
                "psychic",
                "bug",
                "dragon",
                "steel",
                "fairy",
            ),
            "lightning-rod": ("electric",),
            "motor-drive": ("electric",),
            "water-absorb": ("water",),
            "dry-skin": ("water",),
            "sap-sipper": ("grass",),
            "earth-eater": ("ground",),
        }.items()
    }
)


@dataclass(frozen=True)
class ModifierTables:
    """Ability and item overrides applied on top of pure typing.

    Attributes:
        abilities: Ability slug -> attacking type -> multiplier.
        items: Item slug -> attacking type -> multiplier.
    """

    abilities: ModifierTable = field(default_factory=lambda: ABILITY_MODIFIERS)
    items: ModifierTable = field(default_factory=lambda: ITEM_MODIFIERS)

    def ability_modifier(self, ability: str | None, atk_type: str) -> float | None:
        """Return the ability override for an attacking type, or None if there is none."""
        return _find(self.abilities, ability, atk_type)

    def item_modifier(self, item: str | None, atk_type: str) -> float | None:
        """Return the held-item override for an attacking type, or None if there is none."""
        return _find(self.items, item, atk_type)


def _find(table: ModifierTable, name: str | None, atk_type: str) -> float | None:
    if not name:
        return None
    row = table.get(slugify(name))
    if row is None:
        return None
    return row.get(atk_type)


def get_ability_immunities(ability: str | None) -> tuple[str, ...]:
    """Return the types an ability is known to ignore, for display badges."""
    if not ability:
        return ()
    return IMMUNITY_ABILITIES.get(slugify(ability), ())


DEFAULT_MODIFIERS = ModifierTables()
