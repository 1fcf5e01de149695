# ABOUTME: Offensive coverage suggester for a team's aggregated move coverage.
# ABOUTME: Surfaces the types the team cannot hit hard and the attacking types that would.

from collections.abc import Sequence
from typing import TypedDict

from halfdozen.tools.team_matrix import OffensiveRow
from halfdozen.utils.type_chart import (
    NEUTRAL_VALUE,
    get_matrix_for_generation,
    get_types_for_generation,
    lookup,
)

MAX_GAPS = 3
MAX_ATTACK_TYPES = 4


class OffensiveRecommendation(TypedDict):
    """A coverage gap and the attacking types that would close it."""

    gap_type: str
    score: int
    suggested_attack_types: list[str]


def get_attack_types(gap_type: str, gen: int) -> list[str]:
    """Return every attacking type that is super effective against a type.

    Args:
        gap_type: The defending type to cover.
        gen: Generation id.

    Returns:
        Attacking types in canonical order where the chart value is above 1x.
    """
    matrix = get_matrix_for_generation(gen)
    return [atk_type for atk_type in get_types_for_generation(gen) if lookup(matrix, atk_type, gap_type) > NEUTRAL_VALUE]


def recommend_offensive_coverage(
    rows: Sequence[OffensiveRow],
    gen: int,
    limit: int = MAX_GAPS,
    max_types: int = MAX_ATTACK_TYPES,
) -> list[OffensiveRecommendation]:
    """Pick the worst coverage gaps and suggest attacking types.

    Rows with a score of zero or below are gaps.

    Args:
        rows: Output of aggregate_offensive.
        gen: Generation id.
        limit: Maximum number of gaps to return.
        max_types: Maximum attacking types listed per gap.

    Returns:
        Recommendations sorted by score ASC; ties keep type order.
    """
    gaps = sorted((row for row in rows if row["score"] <= 0), key=lambda r: r["score"])

    return [
        {
            "gap_type": row["type"],
            "score": row["score"],
            "suggested_attack_types": get_attack_types(row["type"], gen)[:max_types],
        }
        for row in gaps[:limit]
    ]
