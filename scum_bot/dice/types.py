"""Dice system type definitions.

Immutable dataclasses for dice pools and roll results.
"""

from dataclasses import dataclass
from enum import Enum


# The maximum number of dice that may be rolled at one time.
MAXIMUM_ROLLS = 100

# The maximum number of individual dice that are displayed in full.
MAXIMUM_ROLLS_DISPLAY = 10


class RollsTooGreatError(ValueError):
    """A dice pool larger than MAXIMUM_ROLLS was requested.

    Attributes:
        count: The requested number of dice.
    """

    def __init__(self, count: int) -> None:
        super().__init__(f"Must roll no more than {MAXIMUM_ROLLS} dice.")
        self.count = count


class RollMode(str, Enum):
    """Which die of the pool determines the result."""

    MIN = "min"  # Zero-rated resistance: worst of two
    MAX = "max"


class RollOutcome(str, Enum):
    """Outcome tier of a dice roll.

    Determined by the representative die:
    - CRITICAL_SUCCESS: two or more sixes
    - FULL_SUCCESS: 6
    - PARTIAL_SUCCESS: 4-5
    - BAD_OUTCOME: 1-3
    """

    CRITICAL_SUCCESS = "critical_success"
    FULL_SUCCESS = "full_success"
    PARTIAL_SUCCESS = "partial_success"
    BAD_OUTCOME = "bad_outcome"

    @classmethod
    def from_result(cls, result: int, critical: bool) -> "RollOutcome":
        """Classify a representative die value."""
        if critical:
            return cls.CRITICAL_SUCCESS
        if result >= 6:
            return cls.FULL_SUCCESS
        if result >= 4:
            return cls.PARTIAL_SUCCESS
        return cls.BAD_OUTCOME

    @property
    def label(self) -> str:
        """Human-readable suffix shown after a roll."""
        return OUTCOME_LABELS[self]


OUTCOME_LABELS: dict[RollOutcome, str] = {
    RollOutcome.CRITICAL_SUCCESS: "Critical Success 🤩",
    RollOutcome.FULL_SUCCESS: "Full Success 😄",
    RollOutcome.PARTIAL_SUCCESS: "Partial Success 😑",
    RollOutcome.BAD_OUTCOME: "Bad Outcome 😰",
}


@dataclass(frozen=True)
class DicePool:
    """A number of six-sided dice to roll for one check.

    A pool of zero dice is legal: it is rolled as two dice keeping the
    lowest (a resistance roll for an unrated ability).

    Attributes:
        size: Number of dice, 0 to MAXIMUM_ROLLS.
    """

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"Dice pool size cannot be negative, got {self.size}")
        if self.size > MAXIMUM_ROLLS:
            raise RollsTooGreatError(self.size)

    @classmethod
    def create(cls, size: int) -> "DicePool":
        """Create a pool, validating it is no larger than MAXIMUM_ROLLS.

        Raises:
            RollsTooGreatError: If size exceeds MAXIMUM_ROLLS.
        """
        return cls(size=size)

    @property
    def is_resistance(self) -> bool:
        return self.size == 0

    def __str__(self) -> str:
        return f"{self.size}d"


@dataclass(frozen=True)
class RollResult:
    """The detailed result of rolling a dice pool.

    Attributes:
        result: The representative die value (highest, or lowest for
            a zero-dice pool).
        mode: Whether result is the max or min of the dice.
        dice: Every die rolled, in roll order.
        outcome: Outcome tier.
    """

    result: int
    mode: RollMode
    dice: tuple[int, ...]
    outcome: RollOutcome

    @property
    def is_critical(self) -> bool:
        return self.outcome == RollOutcome.CRITICAL_SUCCESS

    def __str__(self) -> str:
        text = f"**{self.result}**"
        if len(self.dice) > 1:
            shown = [str(die) for die in self.dice[:MAXIMUM_ROLLS_DISPLAY]]
            if len(self.dice) > MAXIMUM_ROLLS_DISPLAY:
                shown.append("…")
            text += f" = {self.mode.value}({', '.join(shown)})"
        return f"{text} — {self.outcome.label}"
