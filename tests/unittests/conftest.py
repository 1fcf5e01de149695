"""Contains configurations for the test run."""

from collections.abc import Callable

import pytest

from halfdozen.roster.dataclasses import Creature, SelectedMove

CreatureFactory = Callable[..., Creature]


@pytest.fixture
def make_creature() -> CreatureFactory:
    """Returns a factory building creatures with damaging moves given as type names."""

    def _make(
        name: str,
        types: tuple[str, ...],
        move_types: tuple[str, ...] = (),
        **kwargs: object,
    ) -> Creature:
        moves = kwargs.pop("moves", None)
        if moves is None:
            moves = tuple(SelectedMove(f"{t} move", t, "special", 80) for t in move_types)
        return Creature(name=name, types=types, moves=moves, **kwargs)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def charizard() -> Creature:
    """Fire/Flying with a single Fire move and three empty slots."""
    return Creature(
        name="Charizard",
        types=("fire", "flying"),
        moves=(
            SelectedMove("Flamethrower", "fire", "special", 90),
            SelectedMove("", "normal", "physical"),
            SelectedMove("", "normal", "physical"),
            SelectedMove("", "normal", "physical"),
        ),
    )


@pytest.fixture
def gengar() -> Creature:
    """Ghost/Poison with no ability selected."""
    return Creature(name="Gengar", types=("ghost", "poison"), ability="none")
