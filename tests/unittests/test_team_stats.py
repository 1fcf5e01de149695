# ABOUTME: Unit tests for team base-stat averages.
# ABOUTME: Tests averaging, members without stats and focus classification.

from halfdozen.roster.dataclasses import Creature, Roster
from halfdozen.tools.team_stats import (
    average_base_stats,
    base_stat_total,
    classify_focus,
    strongest_stat,
)


def _stats(hp: int, atk: int, df: int, spa: int, spd: int, spe: int) -> tuple[tuple[str, int], ...]:
    return (
        ("hp", hp),
        ("attack", atk),
        ("defense", df),
        ("special-attack", spa),
        ("special-defense", spd),
        ("speed", spe),
    )


class TestAverageBaseStats:
    """Tests for average_base_stats."""

    def test_no_stats(self, charizard: Creature) -> None:
        """Teams without stat data have no averages."""
        assert average_base_stats(Roster((charizard,))) is None
        assert average_base_stats(Roster()) is None

    def test_members_without_stats_ignored(self, charizard: Creature) -> None:
        """Only members carrying stats count toward the average."""
        fast = Creature("Jolteon", ("electric",), stats=_stats(65, 65, 60, 110, 95, 130))
        slow = Creature("Snorlax", ("normal",), stats=_stats(161, 109, 64, 64, 109, 30))

        averages = average_base_stats(Roster((fast, charizard, slow)))

        assert averages == [("HP", 113), ("ATK", 87), ("DEF", 62), ("SPA", 87), ("SPD", 102), ("SPE", 80)]

    def test_average_over_members_with_stats_only(self) -> None:
        """A member without stats does not halve the average."""
        fast = Creature("Ninjask", ("bug", "flying"), stats=_stats(61, 90, 45, 50, 50, 120))
        blank = Creature("Shedinja", ("bug", "ghost"))

        averages = average_base_stats(Roster((fast, blank)))

        assert averages is not None
        assert dict(averages)["SPE"] == 120
        assert classify_focus(averages) == "Hyper Offense"

    def test_unknown_stats_skipped(self) -> None:
        """Stat names outside the six base stats are ignored."""
        creature = Creature("Mew", ("psychic",), stats=(*_stats(100, 100, 100, 100, 100, 100), ("accuracy", 5)))
        averages = average_base_stats(Roster((creature,)))
        assert averages is not None
        assert len(averages) == 6


class TestSummaries:
    """Tests for the summary helpers."""

    def test_total_and_strongest(self) -> None:
        """BST sums averages and the first maximum wins."""
        averages = [("HP", 80), ("ATK", 120), ("DEF", 70), ("SPA", 120), ("SPD", 70), ("SPE", 90)]
        assert base_stat_total(averages) == 550
        assert strongest_stat(averages) == "ATK"
        assert strongest_stat([]) is None

    def test_focus(self) -> None:
        """Average speed above 100 is hyper offense."""
        assert classify_focus([("SPE", 101)]) == "Hyper Offense"
        assert classify_focus([("SPE", 100)]) == "Balanced"
        assert classify_focus([]) == "Balanced"
