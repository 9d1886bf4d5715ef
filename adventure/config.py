"""Central configuration defaults and constants for the adventure game."""

import os

_TRUTHY = ("true", "1", "yes", "on")

# Character Defaults
DEFAULT_MAX_HP = int(os.getenv("ADVENTURE_MAX_HP", "100"))
DEFAULT_MAX_STRENGTH = int(os.getenv("ADVENTURE_MAX_STRENGTH", "100"))
DEFAULT_STARTING_HP = int(os.getenv("ADVENTURE_STARTING_HP", "100"))
DEFAULT_STARTING_STRENGTH = int(os.getenv("ADVENTURE_STARTING_STRENGTH", "10"))
# hp may drop below zero unless this is enabled
DEFAULT_CLAMP_HP_FLOOR = os.getenv("ADVENTURE_CLAMP_HP_FLOOR", "false").lower() in _TRUTHY

# Stat deltas applied by the behaviors
NORMAL_ATTACK_STRENGTH_GAIN = 1
POWERED_UP_ATTACK_STRENGTH_GAIN = 5
MELEE_HP_COST = 10
RANGED_HP_COST = 5
MAGIC_HP_COST = 15
HEAL_AMOUNT = 20
BOOST_STRENGTH_GAIN = 10
DAMAGE_HP_LOSS = 30

# Console Input Defaults
DEFAULT_MAX_INPUT_LENGTH = int(os.getenv("ADVENTURE_MAX_INPUT_LENGTH", "32"))  # Longer tokens are rejected

# Logging Defaults
DEFAULT_LOG_LEVEL = os.getenv("ADVENTURE_LOG_LEVEL", "WARNING").upper()
DEFAULT_LOG_FORMAT = "[%(name)-19s - %(levelname)5s] %(message)s"
