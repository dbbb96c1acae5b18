"""Dice system for Scum and Villainy.

Provides dice pools, pool notation parsing and the roll engine.

Usage:
    >>> from scum_bot.dice import parse_pool, roll_pool
    >>> result = roll_pool(parse_pool("3d"))
    >>> print(f"rolled 3d = {result}")
"""

# Types
from scum_bot.dice.types import (
    MAXIMUM_ROLLS,
    MAXIMUM_ROLLS_DISPLAY,
    DicePool,
    RollMode,
    RollOutcome,
    RollResult,
    RollsTooGreatError,
)

# Parser
from scum_bot.dice.parser import DiceParseError, PoolTooLargeError, parse_pool

# Roller
from scum_bot.dice.roller import RandomSource, roll_dice, roll_pool

__all__ = [
    # Types
    "MAXIMUM_ROLLS",
    "MAXIMUM_ROLLS_DISPLAY",
    "DicePool",
    "RollMode",
    "RollOutcome",
    "RollResult",
    "RollsTooGreatError",
    # Parser
    "DiceParseError",
    "PoolTooLargeError",
    "parse_pool",
    # Roller
    "RandomSource",
    "roll_dice",
    "roll_pool",
]
