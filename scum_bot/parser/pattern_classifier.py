"""Pattern-based intent classification.

An offline IntentClassifier built from keyword patterns, ordered from
most specific to least specific. Each rule yields an intent name, the
slots it can fill and a confidence:

    "help me"                        -> showHelp
    "perform an insight resistance"  -> rollResistance(attribute=insight)
    "do a hacking roll"              -> rollAction(action=hack)
    "roll three dice"                -> rollDice(rolls=3)
"""

import logging
import re
from dataclasses import dataclass

from scum_bot.character.ratings import ActionName, AttributeName
from scum_bot.parser.intent_mapper import (
    ROLL_ACTION,
    ROLL_DICE,
    ROLL_RESISTANCE,
    SHOW_HELP,
)
from scum_bot.parser.intent_types import CustomValue, IntentResult, NumberValue, Slot

logger = logging.getLogger(__name__)


# Words (and inflections) that name an attribute
ATTRIBUTE_SYNONYMS: dict[str, AttributeName] = {
    "insight": AttributeName.INSIGHT,
    "insightful": AttributeName.INSIGHT,
    "prowess": AttributeName.PROWESS,
    "resolve": AttributeName.RESOLVE,
}

# Words (and inflections) that name an action
ACTION_SYNONYMS: dict[str, ActionName] = {
    "attune": ActionName.ATTUNE,
    "attuning": ActionName.ATTUNE,
    "attunement": ActionName.ATTUNE,
    "command": ActionName.COMMAND,
    "commanding": ActionName.COMMAND,
    "consort": ActionName.CONSORT,
    "consorting": ActionName.CONSORT,
    "doctor": ActionName.DOCTOR,
    "doctoring": ActionName.DOCTOR,
    "healing": ActionName.DOCTOR,
    "hack": ActionName.HACK,
    "hacking": ActionName.HACK,
    "helm": ActionName.HELM,
    "helming": ActionName.HELM,
    "piloting": ActionName.HELM,
    "rig": ActionName.RIG,
    "rigging": ActionName.RIG,
    "scramble": ActionName.SCRAMBLE,
    "scrambling": ActionName.SCRAMBLE,
    "scrap": ActionName.SCRAP,
    "scrapping": ActionName.SCRAP,
    "fighting": ActionName.SCRAP,
    "skulk": ActionName.SKULK,
    "skulking": ActionName.SKULK,
    "sneaking": ActionName.SKULK,
    "study": ActionName.STUDY,
    "studying": ActionName.STUDY,
    "sway": ActionName.SWAY,
    "swaying": ActionName.SWAY,
}

UNITS: dict[str, int] = {
    "zero": 0, "no": 0, "a": 1, "an": 1, "one": 1, "single": 1,
    "two": 2, "three": 3, "four": 4, "five": 5, "six": 6, "seven": 7,
    "eight": 8, "nine": 9, "ten": 10, "eleven": 11, "twelve": 12,
    "thirteen": 13, "fourteen": 14, "fifteen": 15, "sixteen": 16,
    "seventeen": 17, "eighteen": 18, "nineteen": 19,
}

TENS: dict[str, int] = {
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}

NUMBER_WORDS = set(UNITS) | set(TENS) | {"hundred", "and"}

HELP_PATTERN = re.compile(
    r"\b(?:help|examples?|what\s+can\s+you\s+do|how\s+do\s+(?:i|you))\b"
)
RESISTANCE_PATTERN = re.compile(r"\bresist(?:ance|ing)?\b")
ACTION_ROLL_PATTERN = re.compile(r"\baction\s+(?:roll|check)\b")
DICE_WORDS = {"dice", "die", "d6", "d6s"}
POOL_TOKEN_PATTERN = re.compile(r"^(\d+)d6?$")
ROLL_PATTERN = re.compile(r"\broll(?:s|ing)?\b")

# Rule confidences
HELP_CONFIDENCE = 0.95
ATTRIBUTE_CONFIDENCE = 0.9
ACTION_CONFIDENCE = 0.9
DICE_CONFIDENCE = 0.85
RESISTANCE_CONFIDENCE = 0.8
ACTION_ROLL_CONFIDENCE = 0.7
BARE_ROLL_CONFIDENCE = 0.6


@dataclass
class _Match:
    intent_name: str
    confidence: float
    slots: list[Slot]


def _tokenize(text: str) -> list[str]:
    """Lowercase words, splitting on anything but letters and digits."""
    return re.findall(r"[a-z0-9]+", text.lower())


def words_to_number(words: list[str]) -> int | None:
    """Convert number words to an integer.

    Examples:
        >>> words_to_number(["three"])
        3
        >>> words_to_number(["one", "hundred", "and", "fifty"])
        150
        >>> words_to_number(["fish"]) is None
        True
    """
    if len(words) == 1 and words[0].isdigit():
        return int(words[0])

    current = 0
    seen = False
    for word in words:
        if word == "and":
            continue
        if word in UNITS:
            current += UNITS[word]
        elif word in TENS:
            current += TENS[word]
        elif word == "hundred":
            current = max(current, 1) * 100
        else:
            return None
        seen = True
    return current if seen else None


def _count_before(tokens: list[str], index: int) -> tuple[int, str] | None:
    """Read the number written just before tokens[index]."""
    start = index
    while start > 0 and (tokens[start - 1] in NUMBER_WORDS or tokens[start - 1].isdigit()):
        start -= 1
        if tokens[start].isdigit():
            break

    words = tokens[start:index]
    while words and words[0] == "and":
        words = words[1:]
    if not words:
        return None

    number = words_to_number(words)
    if number is None:
        return None
    return number, " ".join(words)


class PatternIntentClassifier:
    """Keyword-pattern intent classifier.

    Stateless and read-only, so one instance can be shared.
    """

    def classify(self, text: str) -> IntentResult:
        """Classify text.

        Args:
            text: Message text, ideally spelling-corrected.

        Returns:
            IntentResult; intent_name is None if no rule matched.
        """
        lowered = text.lower()
        tokens = _tokenize(text)

        match = (
            self._match_help(lowered)
            or self._match_attribute(tokens)
            or self._match_resistance(lowered)
            or self._match_action(tokens, lowered)
            or self._match_dice(tokens, lowered)
        )

        if match is None:
            logger.debug(f"No intent pattern matched: {text!r}")
            return IntentResult(input=text)

        return IntentResult(
            input=text,
            intent_name=match.intent_name,
            probability=match.confidence,
            slots=match.slots,
        )

    def _match_help(self, lowered: str) -> _Match | None:
        if HELP_PATTERN.search(lowered):
            return _Match(SHOW_HELP, HELP_CONFIDENCE, [])
        return None

    def _match_attribute(self, tokens: list[str]) -> _Match | None:
        for token in tokens:
            if attribute := ATTRIBUTE_SYNONYMS.get(token):
                slot = Slot(
                    slot_name="attribute",
                    raw_value=token,
                    value=CustomValue(value=attribute.value),
                )
                return _Match(ROLL_RESISTANCE, ATTRIBUTE_CONFIDENCE, [slot])
        return None

    def _match_resistance(self, lowered: str) -> _Match | None:
        if RESISTANCE_PATTERN.search(lowered):
            return _Match(ROLL_RESISTANCE, RESISTANCE_CONFIDENCE, [])
        return None

    def _match_action(self, tokens: list[str], lowered: str) -> _Match | None:
        for token in tokens:
            if action := ACTION_SYNONYMS.get(token):
                slot = Slot(
                    slot_name="action",
                    raw_value=token,
                    value=CustomValue(value=action.value),
                )
                return _Match(ROLL_ACTION, ACTION_CONFIDENCE, [slot])

        if ACTION_ROLL_PATTERN.search(lowered):
            return _Match(ROLL_ACTION, ACTION_ROLL_CONFIDENCE, [])
        return None

    def _match_dice(self, tokens: list[str], lowered: str) -> _Match | None:
        for index, token in enumerate(tokens):
            if pool := POOL_TOKEN_PATTERN.match(token):
                return _Match(ROLL_DICE, DICE_CONFIDENCE, [_rolls_slot(int(pool.group(1)), token)])

            if token in DICE_WORDS:
                slots = []
                if count := _count_before(tokens, index):
                    number, raw_value = count
                    slots.append(_rolls_slot(number, raw_value))
                return _Match(ROLL_DICE, DICE_CONFIDENCE, slots)

        if ROLL_PATTERN.search(lowered):
            return _Match(ROLL_DICE, BARE_ROLL_CONFIDENCE, [])
        return None


def _rolls_slot(number: int, raw_value: str) -> Slot:
    return Slot(slot_name="rolls", raw_value=raw_value, value=NumberValue(value=number))
