"""Fighting strategies."""

import logging
from abc import ABC, abstractmethod

from adventure.config import MAGIC_HP_COST, MELEE_HP_COST, RANGED_HP_COST
from adventure.console import Console
from adventure.models.character import Character
from adventure.models.modes import FightMode

logger = logging.getLogger(__name__)


class FightBehavior(ABC):
    """A fighting strategy; each costs the character some hp."""

    mode: FightMode
    hp_cost: int
    message: str

    @abstractmethod
    def fight(self, character: Character, console: Console) -> None:
        """Announce the fight and apply its hp cost."""


class _HpCostFight(FightBehavior):
    """Strategy that prints its message and subtracts a fixed hp cost."""

    def fight(self, character: Character, console: Console) -> None:
        console.say(self.message)
        character.hp -= self.hp_cost
        logger.debug(f"{self.mode.value} fight: hp={character.hp}")


class MeleeFight(_HpCostFight):
    """Close combat."""

    mode = FightMode.MELEE
    hp_cost = MELEE_HP_COST
    message = "🪓 character fights up close with melee attacks!"


class RangedFight(_HpCostFight):
    """Attacks from a distance."""

    mode = FightMode.RANGED
    hp_cost = RANGED_HP_COST
    message = "🏹 character fights from afar with ranged attacks!"


class MagicFight(_HpCostFight):
    """Spellcasting; the most expensive strategy."""

    mode = FightMode.MAGIC
    hp_cost = MAGIC_HP_COST
    message = "✨ character casts magical spells!"


_BEHAVIORS = {behavior.mode: behavior for behavior in (MeleeFight(), RangedFight(), MagicFight())}


def get_fight_behavior(mode: FightMode) -> FightBehavior:
    """Look up the strategy for a fight mode, raising ValueError if unknown."""
    try:
        return _BEHAVIORS[FightMode(mode)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown fight mode: {mode!r}") from e
