"""ABOUTME: CLI entry point for halfdozen commands.
ABOUTME: Provides defense, offense, advise, rival and team commands via Typer."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from halfdozen.config import RosterConfig, load_roster_file
from halfdozen.logs import init_logging
from halfdozen.settings import settings
from halfdozen.tools.defensive_suggester import recommend_defensive_counters
from halfdozen.tools.effectiveness import profile_creature
from halfdozen.tools.offensive_suggester import recommend_offensive_coverage
from halfdozen.tools.rival_matrix import NO_DATA_CATEGORY, RivalCell, build_rival_matrix
from halfdozen.tools.swap_advisor import suggest_swap
from halfdozen.tools.team_matrix import (
    aggregate_defensive,
    aggregate_offensive,
    build_slot_frame,
    defensive_rows_to_frame,
    get_critical_rows,
    offensive_rows_to_frame,
)
from halfdozen.tools.team_stats import average_base_stats, base_stat_total, classify_focus, strongest_stat
from halfdozen.utils.type_chart import clamp_generation

app = typer.Typer(
    name="halfdozen",
    help="Pokemon team type-matchup analysis.",
    no_args_is_help=True,
)

console = Console()

ROSTER_ARGUMENT = typer.Argument(..., help="Path to a roster YAML file")
GEN_OPTION = typer.Option(None, "--gen", "-g", help="Generation ruleset (defaults to the file, then settings)")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show debug logging")


def _load(path: Path, verbose: bool) -> RosterConfig:
    """Initialize logging and load a roster file, exiting on errors."""
    if settings.logging_config_path.exists():
        init_logging(settings.logging_config_path, level="DEBUG" if verbose else None)
    try:
        return load_roster_file(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


def _resolve_gen(config: RosterConfig, gen: int | None) -> int:
    """Pick the generation from the CLI, the file, or settings, in that order."""
    if gen is not None:
        return clamp_generation(gen)
    if config.generation is not None:
        return clamp_generation(config.generation)
    return clamp_generation(settings.DEFAULT_GENERATION)


def _format_multiplier(value: float | None) -> str:
    if value is None:
        return ""
    if value == 1:
        return "[dim]-[/]"
    labels = {0.0: "0", 0.125: "⅛", 0.25: "¼", 0.5: "½"}
    text = labels.get(value, f"{value:g}")
    color = "red" if value > 1 else "cyan" if value == 0 else "green"
    return f"[{color}]{text}[/]"


def _format_rival_cell(cell: RivalCell) -> str:
    if cell["category"] == NO_DATA_CATEGORY:
        return "[dim]no data[/]"
    return _format_multiplier(cell["best_multiplier"])


def _format_score(score: int, positive_is_bad: bool) -> str:
    if score == 0:
        return "[dim]-[/]"
    good = score < 0 if positive_is_bad else score > 0
    text = f"+{score}" if score > 0 else str(score)
    return f"[{'green' if good else 'red'}]{text}[/]"


@app.command()
def defense(
    roster_file: Path = ROSTER_ARGUMENT,
    gen: int | None = GEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the defensive matrix: what hits the team hard."""
    config = _load(roster_file, verbose)
    generation = _resolve_gen(config, gen)
    roster = config.to_roster()

    slot_df = build_slot_frame(roster, generation)
    totals_df = defensive_rows_to_frame(aggregate_defensive(roster, generation))

    table = Table(title=f"Defensive Matrix (Gen {generation})")
    table.add_column("ATK")
    for creature in roster:
        table.add_column(creature.display_name if creature else "-", justify="center")
    table.add_column("Team", justify="center")

    slot_columns = [c for c in slot_df.columns if c != "type"]
    for slot_row, total in zip(slot_df.iter_rows(named=True), totals_df.iter_rows(named=True), strict=True):
        cells = [_format_multiplier(slot_row[column]) for column in slot_columns]
        table.add_row(slot_row["type"], *cells, _format_score(total["score"], positive_is_bad=True))

    console.print(table)


@app.command()
def offense(
    roster_file: Path = ROSTER_ARGUMENT,
    gen: int | None = GEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the offensive matrix: what the team hits hard."""
    config = _load(roster_file, verbose)
    generation = _resolve_gen(config, gen)
    rows = aggregate_offensive(config.to_roster(), generation)

    table = Table(title=f"Offensive Matrix (Gen {generation})")
    table.add_column("DEF")
    table.add_column("SE", justify="right")
    table.add_column("Resisted", justify="right")
    table.add_column("Immune", justify="right")
    table.add_column("Net Score", justify="center")
    for row in offensive_rows_to_frame(rows).iter_rows(named=True):
        table.add_row(
            row["type"],
            str(row["strong_count"]),
            str(row["resisted_count"]),
            str(row["immune_count"]),
            _format_score(row["score"], positive_is_bad=False),
        )
    console.print(table)

    powerhouses = get_critical_rows(rows)
    if powerhouses:
        console.print("Offensive powerhouses: " + ", ".join(f"{r['type']} (+{r['score']})" for r in powerhouses))
    else:
        console.print("[dim]Add damaging moves for more offensive intel.[/]")


@app.command()
def advise(
    roster_file: Path = ROSTER_ARGUMENT,
    gen: int | None = GEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Suggest counter types, coverage types and a swap."""
    config = _load(roster_file, verbose)
    generation = _resolve_gen(config, gen)
    roster = config.to_roster()

    counters = recommend_defensive_counters(aggregate_defensive(roster, generation), generation)
    if counters:
        console.print("[bold]Defensive threats[/]")
        for rec in counters:
            suggestions = ", ".join(rec["suggested_counter_types"]) or "-"
            console.print(f"  {rec['threat_type']} (+{rec['score']}): add {suggestions}")
    else:
        console.print("[green]No defensive issues: team coverage is balanced.[/]")

    coverage = recommend_offensive_coverage(aggregate_offensive(roster, generation), generation)
    if coverage:
        console.print("[bold]Coverage gaps[/]")
        for rec in coverage:
            suggestions = ", ".join(rec["suggested_attack_types"]) or "-"
            console.print(f"  {rec['gap_type']} ({rec['score']}): use {suggestions}")
    else:
        console.print("[green]No coverage gaps.[/]")

    swap = suggest_swap(roster, generation)
    if swap is not None:
        console.print(
            f"[bold]Swap:[/] {swap.swap_out_name} (slot {swap.swap_out_slot + 1}) -> {swap.swap_in}"
            f" [dim]({'/'.join(swap.swap_in_types)} vs {swap.threat_type})[/]"
        )
    elif not roster.is_full:
        console.print("[dim]Fill all six slots for swap advice.[/]")


@app.command()
def rival(
    roster_file: Path = ROSTER_ARGUMENT,
    gen: int | None = GEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the best multiplier each team member lands on the rival team."""
    config = _load(roster_file, verbose)
    generation = _resolve_gen(config, gen)

    rows = build_rival_matrix(config.to_roster(), config.to_rival_roster(), generation)
    if rows is None:
        console.print("[yellow]Both a team and a rival team are needed for the rival matrix.[/]")
        raise typer.Exit(1)

    table = Table(title=f"Rival Matchups (Gen {generation})")
    table.add_column("Team")
    for cell in rows[0]["cells"]:
        table.add_column(cell["enemy_name"], justify="center")
    for row in rows:
        table.add_row(row["user_name"], *(_format_rival_cell(cell) for cell in row["cells"]))
    console.print(table)


@app.command()
def team(
    roster_file: Path = ROSTER_ARGUMENT,
    gen: int | None = GEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show each member's defensive profile and the team's base-stat averages."""
    config = _load(roster_file, verbose)
    generation = _resolve_gen(config, gen)
    roster = config.to_roster()

    table = Table(title=f"Team Profiles (Gen {generation})")
    table.add_column("Pokemon")
    table.add_column("Types")
    table.add_column("Weak")
    table.add_column("Resist")
    table.add_column("Immune")
    table.add_column("Ability")
    for _, creature in roster.members():
        profile = profile_creature(creature, generation)
        types = "/".join(profile["types"]) or "-"
        if creature.uses_custom_types:
            types += " [dim](custom)[/]"
        table.add_row(
            profile["name"],
            types,
            ", ".join(profile["weaknesses"]) or "-",
            ", ".join(profile["resistances"]) or "-",
            ", ".join(profile["immunities"]) or "-",
            ", ".join(profile["ability_immunities"]) or "-",
        )
    console.print(table)

    averages = average_base_stats(roster)
    if averages is None:
        console.print("[dim]No base stats available for averages.[/]")
        return

    console.print(" ".join(f"{name} {value}" for name, value in averages))
    console.print(
        f"BST average {base_stat_total(averages)}, strongest {strongest_stat(averages)}, focus {classify_focus(averages)}"
    )


if __name__ == "__main__":
    app()
