"""Map classified intents to commands.

Each intent name has its own slot requirements:
- rollDice: optional number slot "rolls" (default 1)
- rollResistance: required custom slot "attribute"
- rollAction: required custom slot "action" (no bonus dice)
- showHelp: no slots
"""

import math

from scum_bot.character.checks import ActionCheck, AttributeCheck
from scum_bot.character.ratings import ActionName, AttributeName
from scum_bot.dice.types import DicePool, RollsTooGreatError
from scum_bot.parser.commands import (
    CharacterRollCommand,
    Command,
    HelpCommand,
    RollCommand,
)
from scum_bot.parser.errors import (
    MissingActionError,
    MissingAttributeError,
    NoIntentError,
    TooManyDiceError,
    UnknownIntentError,
)
from scum_bot.parser.intent_types import CustomValue, IntentResult, NumberValue


ROLL_DICE = "rollDice"
ROLL_RESISTANCE = "rollResistance"
ROLL_ACTION = "rollAction"
SHOW_HELP = "showHelp"


def parse_intent_result(result: IntentResult) -> Command:
    """Convert a classified intent into a command.

    Args:
        result: Classifier output.

    Returns:
        The command the intent represents.

    Raises:
        NoIntentError: The classifier abstained.
        UnknownIntentError: The intent name has no command.
        TooManyDiceError: rollDice asked for more than 100 dice.
        MissingAttributeError: rollResistance without an attribute.
        MissingActionError: rollAction without an action.
    """
    intent_name = result.intent_name
    if intent_name is None:
        raise NoIntentError()

    if intent_name == ROLL_ACTION:
        return _parse_roll_action(result)
    if intent_name == ROLL_DICE:
        return _parse_roll_dice(result)
    if intent_name == ROLL_RESISTANCE:
        return _parse_roll_resistance(result)
    if intent_name == SHOW_HELP:
        return HelpCommand()
    raise UnknownIntentError(intent_name)


def _parse_roll_dice(result: IntentResult) -> RollCommand:
    rolls = _extract_count_slot(result, "rolls")
    if rolls is None:
        rolls = 1
    try:
        return RollCommand(DicePool.create(rolls))
    except RollsTooGreatError:
        raise TooManyDiceError(rolls) from None


def _parse_roll_resistance(result: IntentResult) -> CharacterRollCommand:
    value = _extract_custom_slot(result, "attribute")
    attribute = AttributeName.parse(value) if value else None
    if attribute is None:
        raise MissingAttributeError()
    return CharacterRollCommand(AttributeCheck(attribute))


def _parse_roll_action(result: IntentResult) -> CharacterRollCommand:
    value = _extract_custom_slot(result, "action")
    action = ActionName.parse(value) if value else None
    if action is None:
        raise MissingActionError()
    return CharacterRollCommand(ActionCheck(action))


def _extract_count_slot(result: IntentResult, slot_name: str) -> int | None:
    """Read a number slot as a dice count. Negative numbers are ignored."""
    slot = result.find_slot(slot_name)
    if slot is None or not isinstance(slot.value, NumberValue):
        return None
    if not math.isfinite(slot.value.value):
        return None
    count = int(slot.value.value)
    return count if count >= 0 else None


def _extract_custom_slot(result: IntentResult, slot_name: str) -> str | None:
    slot = result.find_slot(slot_name)
    if slot is None or not isinstance(slot.value, CustomValue):
        return None
    return slot.value.value
