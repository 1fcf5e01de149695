# ABOUTME: Unit tests for the rival matchup matrix.
# ABOUTME: Tests best-move selection, categorization and empty-team handling.

from halfdozen.roster.dataclasses import Creature, Roster, SelectedMove
from halfdozen.tools.effectiveness import NO_DATA
from halfdozen.tools.rival_matrix import (
    NO_DATA_CATEGORY,
    best_move_against,
    build_rival_matrix,
    categorize_multiplier,
)


class TestCategorizeMultiplier:
    """Tests for categorize_multiplier."""

    def test_categories(self) -> None:
        """Each multiplier band maps to a label."""
        assert categorize_multiplier(4.0) == "super"
        assert categorize_multiplier(2.0) == "super"
        assert categorize_multiplier(1.0) == "neutral"
        assert categorize_multiplier(0.5) == "resisted"
        assert categorize_multiplier(0.25) == "resisted"
        assert categorize_multiplier(0.0) == "immune"
        assert categorize_multiplier(NO_DATA) == NO_DATA_CATEGORY


class TestBestMoveAgainst:
    """Tests for best_move_against."""

    def test_composite_over_dual_type(self, make_creature) -> None:
        """Multipliers combine across both enemy types."""
        attacker = make_creature("Lapras", ("water", "ice"), move_types=("ice", "water"))
        garchomp = Creature("Garchomp", ("dragon", "ground"))

        multiplier, move = best_move_against(attacker, garchomp, 9)

        assert multiplier == 4.0
        assert move == "ice move"

    def test_no_damaging_moves(self, gengar: Creature, charizard: Creature) -> None:
        """An attacker without damaging moves has no data."""
        assert best_move_against(gengar, charizard, 9) == (NO_DATA, None)

    def test_immune_defender_names_move(self, gengar: Creature) -> None:
        """A fully immune defender still reports the first damaging move."""
        tauros = Creature("Tauros", ("normal",), moves=(SelectedMove("Body Slam", "normal", "physical", 85),))
        assert best_move_against(tauros, gengar, 9) == (0.0, "Body Slam")

    def test_status_moves_ignored(self, charizard: Creature) -> None:
        """Status moves never count."""
        attacker = Creature("Jolteon", ("electric",), moves=(SelectedMove("Thunder Wave", "electric", "status"),))
        assert best_move_against(attacker, charizard, 9) == (NO_DATA, None)

    def test_abilities_ignored(self, make_creature) -> None:
        """Enemy abilities do not change the matrix."""
        attacker = make_creature("Garchomp", ("dragon", "ground"), move_types=("ground",))
        bronzong = Creature("Bronzong", ("steel", "psychic"), ability="levitate")
        assert best_move_against(attacker, bronzong, 9)[0] == 2.0

    def test_custom_types_used(self, make_creature) -> None:
        """Enemy typing overrides are respected."""
        attacker = make_creature("Raichu", ("electric",), move_types=("electric",))
        rotom = Creature("Rotom", ("electric", "ghost"), custom_types=("electric", "water"))
        assert best_move_against(attacker, rotom, 9)[0] == 1.0


class TestBuildRivalMatrix:
    """Tests for build_rival_matrix."""

    def test_empty_side_returns_none(self, charizard: Creature) -> None:
        """Either empty team yields None."""
        assert build_rival_matrix(Roster((charizard,)), Roster(), 9) is None
        assert build_rival_matrix(Roster(), Roster((charizard,)), 9) is None

    def test_grid_shape(self, charizard: Creature, gengar: Creature, make_creature) -> None:
        """Rows follow occupied user slots and cells follow occupied enemy slots."""
        scizor = make_creature("Scizor", ("bug", "steel"))
        rows = build_rival_matrix(Roster((None, charizard, gengar)), Roster((scizor, None, gengar)), 9)

        assert rows is not None
        assert [row["user_slot"] for row in rows] == [1, 2]
        assert [cell["enemy_slot"] for cell in rows[0]["cells"]] == [0, 2]

        scizor_cell = rows[0]["cells"][0]
        assert scizor_cell["enemy_name"] == "Scizor"
        assert scizor_cell["best_multiplier"] == 4.0
        assert scizor_cell["best_move"] == "Flamethrower"
        assert scizor_cell["category"] == "super"

        gengar_row = rows[1]
        assert all(cell["best_multiplier"] == NO_DATA for cell in gengar_row["cells"])
        assert all(cell["category"] == NO_DATA_CATEGORY for cell in gengar_row["cells"])

    def test_no_data_differs_from_immunity(self, gengar: Creature) -> None:
        """A moveless attacker and an immune matchup produce different cells."""
        chansey = Creature("Chansey", ("normal",))
        tauros = Creature("Tauros", ("normal",), moves=(SelectedMove("Body Slam", "normal", "physical", 85),))

        rows = build_rival_matrix(Roster((chansey, tauros)), Roster((gengar,)), 9)

        assert rows is not None
        no_data_cell, immune_cell = rows[0]["cells"][0], rows[1]["cells"][0]
        assert no_data_cell != immune_cell
        assert no_data_cell["category"] == NO_DATA_CATEGORY
        assert no_data_cell["best_move"] is None
        assert immune_cell["category"] == "immune"
        assert immune_cell["best_multiplier"] == 0.0
        assert immune_cell["best_move"] == "Body Slam"
