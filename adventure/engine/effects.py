"""Effects that visit the character and modify one of its stats."""

import logging
from abc import ABC, abstractmethod

from adventure.config import BOOST_STRENGTH_GAIN, DAMAGE_HP_LOSS
from adventure.console import Console
from adventure.models.character import Character
from adventure.models.modes import EffectType

logger = logging.getLogger(__name__)


class EffectVisitor(ABC):
    """An effect exposes both capabilities; each variant only acts on one."""

    effect_type: EffectType

    @abstractmethod
    def apply_boost(self, character: Character, console: Console) -> None:
        ...

    @abstractmethod
    def apply_damage(self, character: Character, console: Console) -> None:
        ...

    def apply(self, character: Character, console: Console) -> None:
        """Run both capabilities in order, boost first."""
        self.apply_boost(character, console)
        self.apply_damage(character, console)


class BoostEffect(EffectVisitor):
    """Raises strength."""

    effect_type = EffectType.BOOST

    def apply_boost(self, character: Character, console: Console) -> None:
        console.say("✨ character feels stronger!")
        character.strength += BOOST_STRENGTH_GAIN
        logger.debug(f"boosted: strength={character.strength}")

    def apply_damage(self, character: Character, console: Console) -> None:
        pass  # not applicable for boost


class DamageEffect(EffectVisitor):
    """Deals heavy damage to hp."""

    effect_type = EffectType.DAMAGE

    def apply_boost(self, character: Character, console: Console) -> None:
        pass  # not applicable for damage

    def apply_damage(self, character: Character, console: Console) -> None:
        console.say("💥 character takes heavy damage!")
        character.hp -= DAMAGE_HP_LOSS
        logger.debug(f"damaged: hp={character.hp}")


_EFFECTS = {effect.effect_type: effect for effect in (BoostEffect(), DamageEffect())}


def get_effect(effect_type: EffectType) -> EffectVisitor:
    """Look up the effect for an effect type, raising ValueError if unknown."""
    try:
        return _EFFECTS[EffectType(effect_type)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown effect type: {effect_type!r}") from e
