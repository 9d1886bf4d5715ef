"""Game engine package."""

from adventure.engine.actions import AttackAction, DefendAction, GameAction, HealAction, get_action
from adventure.engine.attack_modes import (
    AttackBehavior,
    DefeatedAttack,
    NormalAttack,
    PoweredUpAttack,
    get_attack_behavior,
)
from adventure.engine.effects import BoostEffect, DamageEffect, EffectVisitor, get_effect
from adventure.engine.fight_modes import FightBehavior, MagicFight, MeleeFight, RangedFight, get_fight_behavior
from adventure.engine.menu import GameMenu, MenuState

__all__ = [
    # Attack modes
    "AttackBehavior",
    "NormalAttack",
    "PoweredUpAttack",
    "DefeatedAttack",
    "get_attack_behavior",
    # Fight modes
    "FightBehavior",
    "MeleeFight",
    "RangedFight",
    "MagicFight",
    "get_fight_behavior",
    # Actions
    "GameAction",
    "AttackAction",
    "DefendAction",
    "HealAction",
    "get_action",
    # Effects
    "EffectVisitor",
    "BoostEffect",
    "DamageEffect",
    "get_effect",
    # Menu
    "GameMenu",
    "MenuState",
]
