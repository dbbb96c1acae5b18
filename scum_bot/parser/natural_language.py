"""Natural-language command resolution.

Resolves free-form messages addressed to the bot:

1. Extract the text addressed to the bot (strip the @mention)
2. Correct its spelling
3. Classify it into an intent with slots
4. Map the intent to a command

The classifier and spelling corrector are injected so they can be
replaced with deterministic fakes.
"""

import logging
import re
from dataclasses import dataclass

from scum_bot.parser.commands import Command
from scum_bot.parser.errors import ClassifierError, CommandError
from scum_bot.parser.intent_mapper import parse_intent_result
from scum_bot.parser.intent_types import IntentClassifier, IntentResult, SpellingCorrector

logger = logging.getLogger(__name__)


# Optional leading mention like <@1234> or <@!1234>, then the message
MENTION_PATTERN = re.compile(r"^(?:<@!?(\d+)> *)?(.*)$", re.DOTALL)


@dataclass(frozen=True)
class NaturalLanguageResult:
    """Outcome of resolving an addressed message.

    Attributes:
        command: The resolved command, if resolution succeeded.
        error: Why resolution failed, otherwise.
        intent_result: Raw classifier output (None if the classifier failed).
        text: The addressed text, before spelling correction.
        corrected: The spelling-corrected text, if a correction was made.
    """

    command: Command | None
    error: CommandError | None
    intent_result: IntentResult | None
    text: str
    corrected: str | None = None


def extract_addressed_text(
    message: str,
    bot_mention: str | None,
    dice_only: bool,
) -> str | None:
    """Extract the part of a message addressed to the bot.

    Args:
        message: Message content.
        bot_mention: The bot's user ID, if known.
        dice_only: Whether the channel treats every message as addressed.

    Returns:
        The text after any leading mention, or None if the message is
        not addressed to the bot.
    """
    match = MENTION_PATTERN.match(message)
    if not match:
        return None

    mentioned = match.group(1)
    is_addressed = mentioned is not None and bot_mention is not None and mentioned == bot_mention
    if dice_only or is_addressed:
        return match.group(2)
    return None


class NaturalLanguageResolver:
    """Resolve addressed free-form messages into commands.

    Args:
        classifier: Intent classifier.
        corrector: Spelling corrector, or None to skip correction.
    """

    def __init__(
        self,
        classifier: IntentClassifier,
        corrector: SpellingCorrector | None = None,
    ) -> None:
        self.classifier = classifier
        self.corrector = corrector

    def resolve(
        self,
        message: str,
        bot_mention: str | None = None,
        dice_only: bool = False,
    ) -> NaturalLanguageResult | None:
        """Resolve a message.

        Args:
            message: Message content.
            bot_mention: The bot's user ID, if known.
            dice_only: Whether the channel treats every message as addressed.

        Returns:
            NaturalLanguageResult, or None if the message is not
            addressed to the bot.
        """
        text = extract_addressed_text(message, bot_mention, dice_only)
        if text is None:
            return None

        corrected = self._correct(text)
        used = corrected if corrected is not None else text

        try:
            intent_result = self.classifier.classify(used)
        except Exception as e:
            logger.exception(f"Intent classifier failed for {used!r}")
            return NaturalLanguageResult(
                command=None,
                error=ClassifierError(e),
                intent_result=None,
                text=text,
                corrected=corrected,
            )

        try:
            command = parse_intent_result(intent_result)
        except CommandError as e:
            return NaturalLanguageResult(
                command=None,
                error=e,
                intent_result=intent_result,
                text=text,
                corrected=corrected,
            )

        return NaturalLanguageResult(
            command=command,
            error=None,
            intent_result=intent_result,
            text=text,
            corrected=corrected,
        )

    def _correct(self, text: str) -> str | None:
        if self.corrector is None:
            return None
        return self.corrector.correct(text.strip())
