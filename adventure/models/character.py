"""Character model."""

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from adventure.config import (
    DEFAULT_CLAMP_HP_FLOOR,
    DEFAULT_MAX_HP,
    DEFAULT_MAX_STRENGTH,
    DEFAULT_STARTING_HP,
    DEFAULT_STARTING_STRENGTH,
)
from adventure.models.modes import AttackMode, FightMode

if TYPE_CHECKING:
    from adventure.console import Console

logger = logging.getLogger(__name__)


class Character(BaseModel):
    """The single mutable game character."""

    model_config = ConfigDict(validate_assignment=True)  # Clamp on every mutation

    # Limits are declared first so the stat validators can see them
    max_hp: int = Field(default=DEFAULT_MAX_HP, ge=1, description="Upper bound for hp")
    max_strength: int = Field(default=DEFAULT_MAX_STRENGTH, ge=1, description="Upper bound for strength")
    clamp_hp_floor: bool = Field(
        default=DEFAULT_CLAMP_HP_FLOOR, description="Whether hp is also clamped at zero"
    )

    hp: int = Field(default=DEFAULT_STARTING_HP, description="Current health points")
    strength: int = Field(default=DEFAULT_STARTING_STRENGTH, description="Current strength")

    attack_mode: AttackMode = Field(default=AttackMode.NORMAL, description="Current state")
    fight_mode: FightMode = Field(default=FightMode.MELEE, description="Current fighting strategy")

    @field_validator("hp")
    @classmethod
    def clamp_hp(cls, value: int, info: ValidationInfo) -> int:
        """Cap hp at max_hp; the floor is only applied when clamp_hp_floor is set."""
        value = min(value, info.data.get("max_hp", DEFAULT_MAX_HP))
        if info.data.get("clamp_hp_floor", DEFAULT_CLAMP_HP_FLOOR):
            value = max(0, value)
        return value

    @field_validator("strength")
    @classmethod
    def clamp_strength(cls, value: int, info: ValidationInfo) -> int:
        """Keep strength within [0, max_strength]."""
        return max(0, min(value, info.data.get("max_strength", DEFAULT_MAX_STRENGTH)))

    @model_validator(mode="after")
    def reclamp_stats(self) -> "Character":
        """Re-apply the stat bounds after a limit or the floor setting changes."""
        hp = min(self.hp, self.max_hp)
        if self.clamp_hp_floor:
            hp = max(0, hp)
        # Written through __dict__ so assignment validation does not re-enter
        self.__dict__["hp"] = hp
        self.__dict__["strength"] = max(0, min(self.strength, self.max_strength))
        return self

    def set_attack_mode(self, mode: AttackMode, console: "Console") -> None:
        """Switch state and announce it."""
        self.attack_mode = mode
        logger.debug(f"attack_mode -> {self.attack_mode.value}")
        console.say(f"🌀 character state changed to: {self.attack_mode.display_name}")

    def set_fight_mode(self, mode: FightMode, console: "Console") -> None:
        """Switch fighting strategy and announce it."""
        self.fight_mode = mode
        logger.debug(f"fight_mode -> {self.fight_mode.value}")
        console.say(f"⚔️ character strategy changed to: {self.fight_mode.display_name}")

    def attack(self, console: "Console") -> None:
        """Attack using the behavior of the current state."""
        from adventure.engine.attack_modes import get_attack_behavior

        get_attack_behavior(self.attack_mode).attack(self, console)

    def fight(self, console: "Console") -> None:
        """Fight using the behavior of the current strategy."""
        from adventure.engine.fight_modes import get_fight_behavior

        get_fight_behavior(self.fight_mode).fight(self, console)

    def status_report(self) -> str:
        """Render the status block shown before every main menu."""
        return "\n".join(
            [
                "\n✨ Character status ✨",
                f"State: {self.attack_mode.display_name}",
                f"Strategy: {self.fight_mode.display_name}",
                f"Hp: {self.hp}/{self.max_hp}",
                f"Strength: {self.strength}/{self.max_strength}",
                "---------------------------",
            ]
        )
