# ABOUTME: Defensive counter suggester for a team's aggregated weaknesses.
# ABOUTME: Surfaces the worst threat types and the types that resist or ignore them.

from collections.abc import Sequence
from typing import TypedDict

from halfdozen.tools.team_matrix import DefensiveRow
from halfdozen.utils.type_chart import (
    NEUTRAL_VALUE,
    get_matrix_for_generation,
    get_types_for_generation,
    lookup,
)

MAX_THREATS = 3
MAX_COUNTER_TYPES = 4


class DefensiveRecommendation(TypedDict):
    """A type the team is weak to and the types that answer it."""

    threat_type: str
    score: int
    suggested_counter_types: list[str]


def get_counter_types(threat_type: str, gen: int) -> list[str]:
    """Return every type that resists or is immune to an attacking type.

    Args:
        threat_type: The attacking type to answer.
        gen: Generation id.

    Returns:
        Defending types in canonical order where the chart value is below 1x.
    """
    matrix = get_matrix_for_generation(gen)
    return [
        def_type for def_type in get_types_for_generation(gen) if lookup(matrix, threat_type, def_type) < NEUTRAL_VALUE
    ]


def recommend_defensive_counters(
    rows: Sequence[DefensiveRow],
    gen: int,
    limit: int = MAX_THREATS,
    max_counters: int = MAX_COUNTER_TYPES,
) -> list[DefensiveRecommendation]:
    """Pick the worst defensive threats and suggest counter types.

    Only rows with a positive score are considered. A balanced or favourable
    team yields an empty list.

    Args:
        rows: Output of aggregate_defensive.
        gen: Generation id.
        limit: Maximum number of threats to return.
        max_counters: Maximum counter types listed per threat.

    Returns:
        Recommendations sorted by score DESC; ties keep type order.
    """
    threats = sorted((row for row in rows if row["score"] > 0), key=lambda r: r["score"], reverse=True)

    return [
        {
            "threat_type": row["type"],
            "score": row["score"],
            "suggested_counter_types": get_counter_types(row["type"], gen)[:max_counters],
        }
        for row in threats[:limit]
    ]
