"""Character checks: which rating to roll, and how many dice it gives.

A check is either an attribute (resistance) roll or an action roll with
optional bonus dice:

    insight                      -> AttributeCheck(INSIGHT)
    hack                         -> ActionCheck(HACK, bonus=0)
    hack with 2 bonus dice       -> ActionCheck(HACK, bonus=2)
"""

import re
from dataclasses import dataclass

from scum_bot.character.ratings import ActionName, AttributeName, Character


@dataclass(frozen=True)
class AttributeCheck:
    """Roll an attribute rating."""

    name: AttributeName

    def __str__(self) -> str:
        return self.name.display_name


@dataclass(frozen=True)
class ActionCheck:
    """Roll an action rating plus bonus dice."""

    name: ActionName
    bonus: int = 0

    def __post_init__(self) -> None:
        if self.bonus < 0:
            raise ValueError(f"Bonus dice cannot be negative, got {self.bonus}")

    def __str__(self) -> str:
        return self.name.display_name


Check = AttributeCheck | ActionCheck


ACTION_CHECK_PATTERN = re.compile(
    r"^(.*?)(?:\s+with\s+(\d+)\s+bonus\s+dice)?$",
    re.IGNORECASE,
)


def parse_check(text: str) -> Check | None:
    """Parse a check from text.

    Attribute names are tried first, then action names with an
    optional "with N bonus dice" clause.

    Args:
        text: Check text, e.g. "prowess" or "scrap with 1 bonus dice".

    Returns:
        The parsed check, or None if the text is not a check.
    """
    text = text.strip()

    if attribute := AttributeName.parse(text):
        return AttributeCheck(attribute)

    match = ACTION_CHECK_PATTERN.match(text)
    if not match:
        return None

    action = ActionName.parse(match.group(1))
    if action is None:
        return None

    bonus = int(match.group(2)) if match.group(2) else 0
    return ActionCheck(action, bonus)


def resolve_check(check: Check, character: Character) -> int | None:
    """Work out the dice pool size for a check.

    Args:
        check: The check being rolled.
        character: The character rolling it.

    Returns:
        Number of dice to roll, or None if the character has no rating
        for the action.
    """
    if isinstance(check, AttributeCheck):
        return character.attribute(check.name).rating

    action = character.action(check.name)
    if action is None:
        return None
    return action.rating + check.bonus
