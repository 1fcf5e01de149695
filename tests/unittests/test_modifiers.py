# ABOUTME: Unit tests for the ability and item modifier tables.
# ABOUTME: Tests name matching, immutability and display-only immunity lookups.

from types import MappingProxyType

import pytest

from halfdozen.utils.modifiers import (
    ABILITY_MODIFIERS,
    DEFAULT_MODIFIERS,
    ITEM_MODIFIERS,
    ModifierTables,
    get_ability_immunities,
)


class TestModifierTables:
    """Tests for ModifierTables lookups."""

    def test_ability_lookup(self) -> None:
        """Ability names match regardless of spelling style."""
        assert DEFAULT_MODIFIERS.ability_modifier("Levitate", "ground") == 0.0
        assert DEFAULT_MODIFIERS.ability_modifier("thick-fat", "fire") == 0.5
        assert DEFAULT_MODIFIERS.ability_modifier("Thick Fat", "ice") == 0.5
        assert DEFAULT_MODIFIERS.ability_modifier("Well Baked Body", "fire") == 0.0

    def test_untouched_type(self) -> None:
        """Types an ability does not affect return None."""
        assert DEFAULT_MODIFIERS.ability_modifier("Levitate", "water") is None
        assert DEFAULT_MODIFIERS.ability_modifier("Blaze", "fire") is None
        assert DEFAULT_MODIFIERS.ability_modifier(None, "fire") is None

    def test_item_lookup(self) -> None:
        """Air Balloon grants a Ground immunity."""
        assert DEFAULT_MODIFIERS.item_modifier("Air Balloon", "ground") == 0.0
        assert DEFAULT_MODIFIERS.item_modifier("Leftovers", "ground") is None

    def test_default_tables(self) -> None:
        """A default instance uses the shipped tables."""
        tables = ModifierTables()
        assert tables.abilities is ABILITY_MODIFIERS
        assert tables.items is ITEM_MODIFIERS

    def test_custom_tables(self) -> None:
        """Injected tables replace the shipped ones."""
        tables = ModifierTables(abilities=MappingProxyType({"heatproof": {"fire": 0.5}}), items={})
        assert tables.ability_modifier("Heatproof", "fire") == 0.5
        assert tables.ability_modifier("Levitate", "ground") is None

    def test_tables_are_read_only(self) -> None:
        """Shipped tables cannot be mutated."""
        with pytest.raises(TypeError):
            ABILITY_MODIFIERS["levitate"] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            ABILITY_MODIFIERS["levitate"]["ground"] = 1.0  # type: ignore[index]


class TestAbilityImmunities:
    """Tests for get_ability_immunities."""

    def test_known_ability(self) -> None:
        """Volt Absorb ignores Electric."""
        assert get_ability_immunities("Volt Absorb") == ("electric",)

    def test_wonder_guard(self) -> None:
        """Wonder Guard lists the types it blocks for display."""
        immunities = get_ability_immunities("Wonder Guard")
        assert "normal" in immunities
        assert "fire" not in immunities

    def test_unknown_ability(self) -> None:
        """Unknown or unset abilities have no badge."""
        assert get_ability_immunities("Intimidate") == ()
        assert get_ability_immunities(None) == ()
