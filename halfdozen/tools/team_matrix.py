# ABOUTME: Team aggregation engine for the defensive and offensive matrices.
# ABOUTME: Scans every roster slot per type and produces weak/resist and strong/resisted counts.

from collections.abc import Sequence
from typing import TypedDict

import polars as pl

from halfdozen.roster.dataclasses import Roster
from halfdozen.tools.effectiveness import (
    compute_best_offensive_multiplier,
    compute_multiplier,
    has_offensive_data,
)
from halfdozen.utils.modifiers import DEFAULT_MODIFIERS, ModifierTables
from halfdozen.utils.type_chart import (
    IMMUNITY_VALUE,
    NEUTRAL_VALUE,
    SUPER_EFFECTIVE_THRESHOLD,
    get_types_for_generation,
)


class DefensiveRow(TypedDict):
    """How the team fares against attacks of one type.

    A positive score means the team is collectively weak to the type.
    """

    type: str
    weak_count: int
    resist_count: int
    immune_count: int
    score: int


class OffensiveRow(TypedDict):
    """How well the team's moves hit one defending type.

    A positive score means the team can collectively threaten the type.
    """

    type: str
    strong_count: int
    resisted_count: int
    immune_count: int
    score: int


def aggregate_defensive(
    roster: Roster,
    gen: int,
    modifiers: ModifierTables = DEFAULT_MODIFIERS,
) -> list[DefensiveRow]:
    """Aggregate defensive matchups for every type of a generation.

    Immunities are counted inside resist_count; immune_count repeats them
    for display and does not enter the score.

    Args:
        roster: Team snapshot; empty slots are skipped.
        gen: Generation id.
        modifiers: Ability and item tables.

    Returns:
        One DefensiveRow per type, in the generation's type order.
    """
    members = roster.members()
    rows: list[DefensiveRow] = []

    for atk_type in get_types_for_generation(gen):
        weak = resist = immune = 0
        for _, creature in members:
            multiplier = compute_multiplier(atk_type, creature, gen, modifiers)
            if multiplier > NEUTRAL_VALUE:
                weak += 1
            elif multiplier < NEUTRAL_VALUE:
                resist += 1
                if multiplier == IMMUNITY_VALUE:
                    immune += 1

        rows.append(
            {
                "type": atk_type,
                "weak_count": weak,
                "resist_count": resist,
                "immune_count": immune,
                "score": weak - resist,
            }
        )

    return rows


def aggregate_offensive(roster: Roster, gen: int) -> list[OffensiveRow]:
    """Aggregate offensive coverage for every type of a generation.

    Members without damaging moves contribute to neither count.

    Args:
        roster: Team snapshot; empty slots are skipped.
        gen: Generation id.

    Returns:
        One OffensiveRow per type, in the generation's type order.
    """
    members = roster.members()
    rows: list[OffensiveRow] = []

    for def_type in get_types_for_generation(gen):
        strong = resisted = immune = 0
        for _, creature in members:
            best = compute_best_offensive_multiplier(def_type, creature, gen)
            if not has_offensive_data(best):
                continue
            if best >= SUPER_EFFECTIVE_THRESHOLD:
                strong += 1
            elif best < NEUTRAL_VALUE:
                resisted += 1
                if best == IMMUNITY_VALUE:
                    immune += 1

        rows.append(
            {
                "type": def_type,
                "strong_count": strong,
                "resisted_count": resisted,
                "immune_count": immune,
                "score": strong - resisted,
            }
        )

    return rows


def get_critical_rows(
    rows: Sequence[DefensiveRow] | Sequence[OffensiveRow],
    threshold: int = 1,
) -> list[DefensiveRow] | list[OffensiveRow]:
    """Return rows whose score exceeds a threshold, highest score first.

    On defensive rows these are the critical team vulnerabilities, on
    offensive rows the team's offensive powerhouses.
    """
    critical = [row for row in rows if row["score"] > threshold]
    return sorted(critical, key=lambda r: r["score"], reverse=True)  # type: ignore[return-value]


def defensive_rows_to_frame(rows: Sequence[DefensiveRow]) -> pl.DataFrame:
    """Convert defensive rows into a DataFrame.

    Returns:
        DataFrame with columns: type, weak_count, resist_count, immune_count, score
    """
    if not rows:
        return pl.DataFrame(
            schema={
                "type": pl.String,
                "weak_count": pl.Int64,
                "resist_count": pl.Int64,
                "immune_count": pl.Int64,
                "score": pl.Int64,
            }
        )
    return pl.DataFrame(list(rows))


def offensive_rows_to_frame(rows: Sequence[OffensiveRow]) -> pl.DataFrame:
    """Convert offensive rows into a DataFrame.

    Returns:
        DataFrame with columns: type, strong_count, resisted_count, immune_count, score
    """
    if not rows:
        return pl.DataFrame(
            schema={
                "type": pl.String,
                "strong_count": pl.Int64,
                "resisted_count": pl.Int64,
                "immune_count": pl.Int64,
                "score": pl.Int64,
            }
        )
    return pl.DataFrame(list(rows))


def build_slot_frame(roster: Roster, gen: int, modifiers: ModifierTables = DEFAULT_MODIFIERS) -> pl.DataFrame:
    """Per-slot defensive multipliers, one row per attacking type.

    Returns:
        DataFrame with a "type" column and one Float64 column per slot
        ("slot_1" .. "slot_6"); empty slots hold nulls.
    """
    data: dict[str, list[object]] = {"type": list(get_types_for_generation(gen))}
    for index, creature in enumerate(roster):
        column = f"slot_{index + 1}"
        if creature is None:
            data[column] = [None] * len(data["type"])
        else:
            data[column] = [compute_multiplier(t, creature, gen, modifiers) for t in data["type"]]

    schema: dict[str, pl.DataType | type[pl.DataType]] = {"type": pl.String}
    schema.update({f"slot_{i + 1}": pl.Float64 for i in range(len(roster))})
    return pl.DataFrame(data, schema=schema)
