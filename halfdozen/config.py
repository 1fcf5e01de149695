"""ABOUTME: Configuration loaders for roster files.
ABOUTME: Validates YAML team definitions and converts them into immutable roster snapshots."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from halfdozen.roster.dataclasses import (
    DAMAGE_CLASSES,
    MAX_MOVES,
    MAX_TYPES,
    ROSTER_SIZE,
    Creature,
    Roster,
    SelectedMove,
)
from halfdozen.utils.normalize import NONE_SENTINEL
from halfdozen.utils.type_chart import TYPES

logger = logging.getLogger(__name__)


def _check_type(value: str) -> str:
    value = value.strip().lower()
    if value not in TYPES:
        raise ValueError(f"Unknown type '{value}'")
    return value


class MoveConfig(BaseModel):
    """Configuration for a single selected move."""

    name: str = ""
    type: str
    damage_class: str = "physical"
    power: int | None = None

    @field_validator("type")
    @classmethod
    def _valid_type(cls, value: str) -> str:
        return _check_type(value)

    @field_validator("damage_class")
    @classmethod
    def _valid_damage_class(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in DAMAGE_CLASSES:
            raise ValueError(f"Unknown damage class '{value}', expected one of {', '.join(DAMAGE_CLASSES)}")
        return value

    def to_move(self) -> SelectedMove:
        """Convert into a SelectedMove snapshot."""
        return SelectedMove(name=self.name, type=self.type, damage_class=self.damage_class, power=self.power)


class CreatureConfig(BaseModel):
    """Configuration for a single roster member."""

    name: str
    nickname: str | None = None
    types: list[str] = Field(min_length=1, max_length=MAX_TYPES)
    custom_types: list[str] | None = Field(default=None, max_length=MAX_TYPES)
    ability: str | None = None
    item: str | None = None
    moves: list[MoveConfig] = Field(default_factory=list, max_length=MAX_MOVES)
    stats: dict[str, int] = Field(default_factory=dict)

    @field_validator("types")
    @classmethod
    def _valid_types(cls, value: list[str]) -> list[str]:
        return [_check_type(t) for t in value]

    @field_validator("custom_types")
    @classmethod
    def _valid_custom_types(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [t.strip().lower() if t.strip().lower() == NONE_SENTINEL else _check_type(t) for t in value]

    def to_creature(self) -> Creature:
        """Convert into a Creature snapshot."""
        return Creature(
            name=self.name,
            nickname=self.nickname,
            types=tuple(self.types),
            custom_types=tuple(self.custom_types) if self.custom_types is not None else None,
            ability=self.ability,
            item=self.item,
            moves=tuple(move.to_move() for move in self.moves),
            stats=tuple(self.stats.items()),
        )


class RosterConfig(BaseModel):
    """Configuration for a team file."""

    generation: int | None = None
    team: list[CreatureConfig | None] = Field(default_factory=list, max_length=ROSTER_SIZE)
    rival: list[CreatureConfig | None] = Field(default_factory=list, max_length=ROSTER_SIZE)

    def to_roster(self) -> Roster:
        """Convert the team into a Roster snapshot."""
        return Roster(tuple(c.to_creature() if c is not None else None for c in self.team))

    def to_rival_roster(self) -> Roster:
        """Convert the rival team into a Roster snapshot."""
        return Roster(tuple(c.to_creature() if c is not None else None for c in self.rival))


def load_roster_file(config_path: Path) -> RosterConfig:
    """Load a roster definition from a YAML file.

    Args:
        config_path: Path to the roster file.

    Returns:
        Parsed RosterConfig object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not valid YAML or fails validation.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Roster file not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ValueError(f"Roster file {config_path} must contain a mapping")

    try:
        config = RosterConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ValueError(f"Invalid roster in {config_path}:\n{e}") from e

    logger.info("Loaded roster %s with %d team slots", config_path, len(config.team))
    return config
