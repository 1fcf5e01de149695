# ABOUTME: Team base-stat averages for the analytics summary.
# ABOUTME: Averages the six base stats over members that carry stat data.

from halfdozen.roster.dataclasses import Roster

STAT_ABBREVIATIONS: dict[str, str] = {
    "hp": "HP",
    "attack": "ATK",
    "defense": "DEF",
    "special-attack": "SPA",
    "special-defense": "SPD",
    "speed": "SPE",
}

HYPER_OFFENSE_SPEED = 100


def average_base_stats(roster: Roster) -> list[tuple[str, int]] | None:
    """Average each base stat across the team.

    Members without stats (e.g., restored from trimmed storage) are ignored.

    Args:
        roster: Team snapshot.

    Returns:
        List of (abbreviation, rounded average) in HP..SPE order, or None if
        no member carries stats.
    """
    active = [creature for _, creature in roster.members() if creature.stats]
    if not active:
        return None

    sums = dict.fromkeys(STAT_ABBREVIATIONS, 0)
    for creature in active:
        for stat_name, value in creature.stat_map.items():
            if stat_name in sums:
                sums[stat_name] += value

    return [(STAT_ABBREVIATIONS[name], round(total / len(active))) for name, total in sums.items()]


def base_stat_total(averages: list[tuple[str, int]]) -> int:
    """Sum of averaged stats."""
    return sum(value for _, value in averages)


def strongest_stat(averages: list[tuple[str, int]]) -> str | None:
    """Abbreviation of the highest averaged stat; first one wins ties."""
    if not averages:
        return None
    return max(averages, key=lambda item: item[1])[0]


def classify_focus(averages: list[tuple[str, int]]) -> str:
    """Label the team "Hyper Offense" when average speed exceeds 100, else "Balanced"."""
    speed = dict(averages).get("SPE", 0)
    return "Hyper Offense" if speed > HYPER_OFFENSE_SPEED else "Balanced"
