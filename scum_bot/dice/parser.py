"""Dice pool notation parser.

Parses Scum and Villainy pool notation like 3d or 0d: a number of
six-sided dice, with no die size or modifier.
"""

import re

from scum_bot.dice.types import MAXIMUM_ROLLS, DicePool, RollsTooGreatError


class DiceParseError(ValueError):
    """Error parsing dice pool notation."""

    pass


class PoolTooLargeError(DiceParseError):
    """Notation was valid but asked for more dice than allowed.

    Attributes:
        count: The requested number of dice.
    """

    def __init__(self, count: int) -> None:
        super().__init__(f"Must roll no more than {MAXIMUM_ROLLS} dice, got {count}")
        self.count = count


# Pattern: dice count followed by 'd'
# Examples: 3d, 0d, 12D
POOL_PATTERN = re.compile(r"^\s*(\d+)d\s*$", re.IGNORECASE)


def parse_pool(notation: str) -> DicePool:
    """Parse pool notation into a DicePool.

    Args:
        notation: Pool notation string (e.g., "3d").

    Returns:
        DicePool with the parsed size.

    Raises:
        DiceParseError: If notation is invalid.
        PoolTooLargeError: If the pool is larger than 100 dice.

    Examples:
        >>> parse_pool("3d")
        DicePool(size=3)
        >>> parse_pool("0d")
        DicePool(size=0)
    """
    match = POOL_PATTERN.match(notation or "")
    if not match:
        raise DiceParseError(f"Invalid dice notation: '{notation}'")

    count = int(match.group(1))
    try:
        return DicePool.create(count)
    except RollsTooGreatError as e:
        raise PoolTooLargeError(e.count) from e
