"""Game settings."""

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from adventure.config import (
    DEFAULT_CLAMP_HP_FLOOR,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_HP,
    DEFAULT_MAX_INPUT_LENGTH,
    DEFAULT_MAX_STRENGTH,
    DEFAULT_STARTING_HP,
    DEFAULT_STARTING_STRENGTH,
)
from adventure.models.character import Character

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class GameSettings(BaseModel):
    """Validated bundle of the configuration defaults."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    max_hp: int = Field(default=DEFAULT_MAX_HP, ge=1, description="Maximum health points")
    max_strength: int = Field(default=DEFAULT_MAX_STRENGTH, ge=1, description="Maximum strength")
    starting_hp: int = Field(default=DEFAULT_STARTING_HP, ge=0, description="Health at game start")
    starting_strength: int = Field(
        default=DEFAULT_STARTING_STRENGTH, ge=0, description="Strength at game start"
    )
    clamp_hp_floor: bool = Field(
        default=DEFAULT_CLAMP_HP_FLOOR, description="Clamp hp at zero instead of letting it go negative"
    )
    max_input_length: int = Field(
        default=DEFAULT_MAX_INPUT_LENGTH, ge=1, le=4000, description="Longest accepted input token"
    )
    log_level: LogLevel = Field(default=DEFAULT_LOG_LEVEL, description="Root logging level")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="Logging format string")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for ``logging.basicConfig``."""
        return logging.getLevelName(self.log_level)

    def new_character(self) -> Character:
        """Create the starting character."""
        return Character(
            max_hp=self.max_hp,
            max_strength=self.max_strength,
            clamp_hp_floor=self.clamp_hp_floor,
            hp=self.starting_hp,
            strength=self.starting_strength,
        )
