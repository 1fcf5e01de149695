"""ABOUTME: Data classes for roster snapshots handed to the effectiveness engine.
ABOUTME: Contains SelectedMove, Creature and the fixed six-slot Roster."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from halfdozen.utils.normalize import is_unset

ROSTER_SIZE = 6
MAX_MOVES = 4
MAX_TYPES = 2

DAMAGE_CLASSES = ("physical", "special", "status")
STATUS_CLASS = "status"


def _clean_types(types: Iterable[str]) -> tuple[str, ...]:
    """Lowercase type names and drop empty or "none" slots."""
    return tuple(t.strip().lower() for t in types if not is_unset(t))


@dataclass(frozen=True)
class SelectedMove:
    """A move chosen for one of a creature's four move slots.

    Attributes:
        name: Display name; an empty name marks an unused slot.
        type: Type id of the move (e.g., "fire").
        damage_class: One of "physical", "special", "status".
        power: Base power, None for status or variable-power moves.
    """

    name: str
    type: str
    damage_class: str
    power: int | None = None

    @property
    def is_damaging(self) -> bool:
        """True when the move counts toward offensive coverage."""
        return bool(self.name.strip()) and self.damage_class.lower() != STATUS_CLASS


@dataclass(frozen=True)
class Creature:
    """Read-only snapshot of a roster member.

    Attributes:
        name: Species name.
        types: Native typing, one or two type ids.
        custom_types: None to use the native typing; otherwise an override of
            zero to two types that fully replaces it. "none" placeholders are
            dropped on construction.
        ability: Selected ability, None when unset.
        item: Selected held item, None when unset.
        moves: Up to four selected moves, in slot order.
        nickname: Optional nickname for display.
        stats: Base stats keyed by PokeAPI stat name (e.g., "special-attack").
    """

    name: str
    types: tuple[str, ...]
    custom_types: tuple[str, ...] | None = None
    ability: str | None = None
    item: str | None = None
    moves: tuple[SelectedMove, ...] = ()
    nickname: str | None = None
    stats: tuple[tuple[str, int], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", _clean_types(self.types))
        if self.custom_types is not None:
            object.__setattr__(self, "custom_types", _clean_types(self.custom_types))
        object.__setattr__(self, "ability", None if is_unset(self.ability) else self.ability)
        object.__setattr__(self, "item", None if is_unset(self.item) else self.item)
        object.__setattr__(self, "moves", tuple(self.moves))
        object.__setattr__(self, "stats", tuple(self.stats))
        if len(self.moves) > MAX_MOVES:
            raise ValueError(f"{self.name} has {len(self.moves)} moves, at most {MAX_MOVES} allowed")

    @property
    def display_name(self) -> str:
        """Nickname if set, species name otherwise."""
        return self.nickname or self.name

    @property
    def uses_custom_types(self) -> bool:
        """True when a non-empty typing override is in force."""
        return bool(self.custom_types)

    @property
    def active_types(self) -> tuple[str, ...]:
        """Typing used for chart lookups, before generation filtering."""
        if self.custom_types:
            return self.custom_types
        return self.types

    @property
    def damaging_moves(self) -> tuple[SelectedMove, ...]:
        """Moves that count toward offensive coverage."""
        return tuple(move for move in self.moves if move.is_damaging)

    @property
    def stat_map(self) -> dict[str, int]:
        """Base stats as a dict."""
        return dict(self.stats)


@dataclass(frozen=True)
class Roster:
    """Fixed-size ordered team of six optional slots.

    Shorter sequences are padded with empty slots.
    """

    slots: tuple[Creature | None, ...] = field(default=())

    def __post_init__(self) -> None:
        slots = tuple(self.slots)
        if len(slots) > ROSTER_SIZE:
            raise ValueError(f"A roster holds at most {ROSTER_SIZE} creatures, got {len(slots)}")
        object.__setattr__(self, "slots", slots + (None,) * (ROSTER_SIZE - len(slots)))

    def __iter__(self) -> Iterator[Creature | None]:
        return iter(self.slots)

    def __len__(self) -> int:
        return ROSTER_SIZE

    def __getitem__(self, index: int) -> Creature | None:
        return self.slots[index]

    def members(self) -> list[tuple[int, Creature]]:
        """Return (slot index, creature) for every occupied slot."""
        return [(index, creature) for index, creature in enumerate(self.slots) if creature is not None]

    @property
    def is_full(self) -> bool:
        """True when all six slots are occupied."""
        return all(creature is not None for creature in self.slots)

    @property
    def is_empty(self) -> bool:
        """True when no slot is occupied."""
        return all(creature is None for creature in self.slots)
