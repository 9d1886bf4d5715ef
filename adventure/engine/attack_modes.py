"""Attack behaviors, one per character state."""

import logging
from abc import ABC, abstractmethod

from adventure.config import NORMAL_ATTACK_STRENGTH_GAIN, POWERED_UP_ATTACK_STRENGTH_GAIN
from adventure.console import Console
from adventure.models.character import Character
from adventure.models.modes import AttackMode

logger = logging.getLogger(__name__)


class AttackBehavior(ABC):
    """Defines how a character attacks while in a given state."""

    mode: AttackMode

    @abstractmethod
    def attack(self, character: Character, console: Console) -> None:
        """Announce the attack and update the character's strength."""


class NormalAttack(AttackBehavior):
    """Normal state: each attack adds a little strength."""

    mode = AttackMode.NORMAL

    def attack(self, character: Character, console: Console) -> None:
        console.say("💥 Character attacks with standard strength!")
        character.strength += NORMAL_ATTACK_STRENGTH_GAIN
        logger.debug(f"normal attack: strength={character.strength}")


class PoweredUpAttack(AttackBehavior):
    """Powered up state: each attack adds more strength."""

    mode = AttackMode.POWERED_UP

    def attack(self, character: Character, console: Console) -> None:
        console.say("🔥 Character attacks with powerful strength!")
        character.strength += POWERED_UP_ATTACK_STRENGTH_GAIN
        logger.debug(f"powered up attack: strength={character.strength}")


class DefeatedAttack(AttackBehavior):
    """Defeated state: attacking drains all strength."""

    mode = AttackMode.DEFEATED

    def attack(self, character: Character, console: Console) -> None:
        console.say("💀 character is defeated and cannot attack.")
        character.strength = 0
        logger.debug("defeated attack: strength reset to 0")


_BEHAVIORS = {behavior.mode: behavior for behavior in (NormalAttack(), PoweredUpAttack(), DefeatedAttack())}


def get_attack_behavior(mode: AttackMode) -> AttackBehavior:
    """
    Look up the attack behavior for a state.

    Raises:
        ValueError: if ``mode`` is not an AttackMode
    """
    try:
        return _BEHAVIORS[AttackMode(mode)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown attack mode: {mode!r}") from e
