# ABOUTME: Tools package for team analysis.
# ABOUTME: Contains the effectiveness calculator, team matrices, suggesters and swap advisor.

from halfdozen.tools.defensive_suggester import get_counter_types, recommend_defensive_counters
from halfdozen.tools.effectiveness import (
    NO_DATA,
    compute_best_offensive_multiplier,
    compute_multiplier,
    profile_creature,
    resolve_defending_types,
)
from halfdozen.tools.offensive_suggester import get_attack_types, recommend_offensive_coverage
from halfdozen.tools.rival_matrix import build_rival_matrix
from halfdozen.tools.swap_advisor import suggest_swap
from halfdozen.tools.team_matrix import (
    aggregate_defensive,
    aggregate_offensive,
    get_critical_rows,
)
from halfdozen.tools.team_stats import average_base_stats, classify_focus

__all__ = [
    "NO_DATA",
    "aggregate_defensive",
    "aggregate_offensive",
    "average_base_stats",
    "build_rival_matrix",
    "classify_focus",
    "compute_best_offensive_multiplier",
    "compute_multiplier",
    "get_attack_types",
    "get_counter_types",
    "get_critical_rows",
    "profile_creature",
    "recommend_defensive_counters",
    "recommend_offensive_coverage",
    "resolve_defending_types",
    "suggest_swap",
]
