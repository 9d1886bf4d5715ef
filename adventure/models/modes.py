"""Mode, action and effect enums."""

from enum import Enum


class AttackMode(str, Enum):
    """Character state driving strength growth on attack."""

    NORMAL = "normal"
    POWERED_UP = "powered_up"
    DEFEATED = "defeated"

    @property
    def display_name(self) -> str:
        return _ATTACK_MODE_NAMES[self]


class FightMode(str, Enum):
    """Fighting strategy driving hp loss when the character fights."""

    MELEE = "melee"
    RANGED = "ranged"
    MAGIC = "magic"

    @property
    def display_name(self) -> str:
        return _FIGHT_MODE_NAMES[self]


class ActionType(str, Enum):
    """Templated actions available from the action menu."""

    ATTACK = "attack"
    DEFEND = "defend"
    HEAL = "heal"


class EffectType(str, Enum):
    """One-shot effects applied directly to the character."""

    BOOST = "boost"
    DAMAGE = "damage"


_ATTACK_MODE_NAMES = {
    AttackMode.NORMAL: "NormalState",
    AttackMode.POWERED_UP: "PoweredUpState",
    AttackMode.DEFEATED: "DefeatedState",
}

_FIGHT_MODE_NAMES = {
    FightMode.MELEE: "MeleeStrategy",
    FightMode.RANGED: "RangedStrategy",
    FightMode.MAGIC: "MagicStrategy",
}
