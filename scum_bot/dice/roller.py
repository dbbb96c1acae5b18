"""Core dice rolling engine.

Rolls a pool of six-sided dice and classifies the outcome:
- A pool of one or more dice keeps the highest die. Two or more
  sixes is a critical success.
- A pool of zero dice rolls two dice and keeps the lowest. It can
  never be a critical.

The random source is injectable so outcomes can be tested with fixed
sequences. Anything with a ``randint(a, b)`` method works; the default
is the ``random`` module itself.
"""

import random
from typing import Protocol

from scum_bot.dice.types import DicePool, RollMode, RollOutcome, RollResult


DIE_SIZE = 6

# Dice rolled for a zero-dice pool
RESISTANCE_DICE = 2


class RandomSource(Protocol):
    """Anything that can draw uniform integers, e.g. ``random.Random``."""

    def randint(self, a: int, b: int) -> int:
        ...


def roll_dice(count: int, rng: RandomSource | None = None) -> tuple[int, ...]:
    """Roll ``count`` independent six-sided dice.

    Args:
        count: Number of dice.
        rng: Random source (defaults to the ``random`` module).

    Returns:
        Tuple of die values in roll order.
    """
    source = rng if rng is not None else random
    return tuple(source.randint(1, DIE_SIZE) for _ in range(count))


def roll_pool(pool: DicePool, rng: RandomSource | None = None) -> RollResult:
    """Roll a dice pool.

    Args:
        pool: The dice pool to roll.
        rng: Random source (defaults to the ``random`` module).

    Returns:
        RollResult with the representative die, every die rolled and
        the outcome tier.

    Examples:
        >>> result = roll_pool(DicePool(3))
        >>> len(result.dice)
        3
        >>> result = roll_pool(DicePool(0))
        >>> result.mode
        <RollMode.MIN: 'min'>
    """
    if pool.size > 0:
        dice = roll_dice(pool.size, rng)
        result = max(dice)
        critical = dice.count(DIE_SIZE) > 1
        mode = RollMode.MAX
    else:
        dice = roll_dice(RESISTANCE_DICE, rng)
        result = min(dice)
        critical = False
        mode = RollMode.MIN

    return RollResult(
        result=result,
        mode=mode,
        dice=dice,
        outcome=RollOutcome.from_result(result, critical),
    )
