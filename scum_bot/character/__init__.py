"""Character ratings and the checks rolled against them."""

from scum_bot.character.checks import (
    ActionCheck,
    AttributeCheck,
    Check,
    parse_check,
    resolve_check,
)
from scum_bot.character.ratings import (
    ATTRIBUTE_ACTIONS,
    ActionName,
    ActionRating,
    AttributeName,
    AttributeRating,
    Character,
)

__all__ = [
    # Ratings
    "ATTRIBUTE_ACTIONS",
    "ActionName",
    "ActionRating",
    "AttributeName",
    "AttributeRating",
    "Character",
    # Checks
    "ActionCheck",
    "AttributeCheck",
    "Check",
    "parse_check",
    "resolve_check",
]
