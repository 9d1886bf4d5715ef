"""Data models module for the adventure game."""

# Modes
from adventure.models.modes import ActionType, AttackMode, EffectType, FightMode

# Character
from adventure.models.character import Character

__all__ = [
    # Modes
    "AttackMode",
    "FightMode",
    "ActionType",
    "EffectType",
    # Character
    "Character",
]
