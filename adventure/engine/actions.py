"""Game actions built on a fixed start/perform/end sequence."""

import logging
from abc import ABC, abstractmethod
from typing import final

from adventure.config import HEAL_AMOUNT
from adventure.console import Console
from adventure.models.character import Character
from adventure.models.modes import ActionType

logger = logging.getLogger(__name__)


class GameAction(ABC):
    """Base action; subclasses only provide the middle step."""

    action_type: ActionType

    @final
    def execute_action(self, character: Character, console: Console) -> None:
        """
        Run the action.

        Always announces the start, performs the action, then announces the
        end, in that order.
        """
        logger.debug(f"executing {self.action_type.value} action")
        self.start(console)
        self.perform_action(character, console)
        self.end(console)

    def start(self, console: Console) -> None:
        console.say("🔸 preparing action...")

    @abstractmethod
    def perform_action(self, character: Character, console: Console) -> None:
        """Action-specific step."""

    def end(self, console: Console) -> None:
        console.say("🔸 action completed.\n")


class AttackAction(GameAction):
    """Attack according to the character's current state."""

    action_type = ActionType.ATTACK

    def perform_action(self, character: Character, console: Console) -> None:
        character.attack(console)


class DefendAction(GameAction):
    """Defend; leaves the character unchanged."""

    action_type = ActionType.DEFEND

    def perform_action(self, character: Character, console: Console) -> None:
        console.say("🛡️ character defends against attacks.")


class HealAction(GameAction):
    """Restore some hp."""

    action_type = ActionType.HEAL

    def perform_action(self, character: Character, console: Console) -> None:
        console.say("💖 character heals for some health.")
        character.hp += HEAL_AMOUNT
        logger.debug(f"healed: hp={character.hp}")


_ACTIONS = {
    action.action_type: action
    for action in (AttackAction(), DefendAction(), HealAction())
}


def get_action(action_type: ActionType) -> GameAction:
    """Look up the action for an action type, raising ValueError if unknown."""
    try:
        return _ACTIONS[ActionType(action_type)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown action type: {action_type!r}") from e
