"""Tests for the command dispatcher."""

from unittest.mock import Mock

import pytest

from scum_bot.character.checks import ActionCheck, AttributeCheck
from scum_bot.character.ratings import ActionName, AttributeName
from scum_bot.dice.types import DicePool
from scum_bot.parser.commands import CharacterRollCommand, HelpCommand, RollCommand
from scum_bot.parser.dispatcher import CommandDispatcher, CommandSource
from scum_bot.parser.errors import ShorthandSyntaxError
from scum_bot.parser.natural_language import NaturalLanguageResolver
from scum_bot.parser.pattern_classifier import PatternIntentClassifier

BOT_ID = "999"


@pytest.fixture
def dispatcher() -> CommandDispatcher:
    return CommandDispatcher(NaturalLanguageResolver(PatternIntentClassifier()))


class TestCommandDispatcher:
    """Tests for CommandDispatcher.parse."""

    def test_shorthand_roll(self, dispatcher):
        """Test that '!roll 3d' is a shorthand roll of three dice."""
        outcome = dispatcher.parse("!roll 3d")
        assert outcome.source == CommandSource.SHORTHAND
        assert outcome.command == RollCommand(DicePool(3))
        assert outcome.intent_result is None

    def test_shorthand_help(self, dispatcher):
        """Test that '!help' is a shorthand help command."""
        outcome = dispatcher.parse("!help")
        assert outcome.source == CommandSource.SHORTHAND
        assert outcome.command == HelpCommand()

    def test_shorthand_error_does_not_fall_back(self):
        """Test that a shorthand error is final."""
        resolver = Mock()
        dispatcher = CommandDispatcher(resolver)
        outcome = dispatcher.parse("!roll zzz", BOT_ID, dice_only=True)
        assert isinstance(outcome.error, ShorthandSyntaxError)
        resolver.resolve.assert_not_called()

    def test_shorthand_needs_no_mention(self, dispatcher):
        """Test that shorthand works in a mention-only channel."""
        outcome = dispatcher.parse("!roll insight", BOT_ID, dice_only=False)
        assert outcome.command == CharacterRollCommand(AttributeCheck(AttributeName.INSIGHT))

    def test_natural_language_with_mention(self, dispatcher):
        """Test that '<@bot> Roll three dice' is a natural-language roll."""
        outcome = dispatcher.parse(f"<@{BOT_ID}> Roll three dice", BOT_ID)
        assert outcome.source == CommandSource.NATURAL_LANGUAGE
        assert outcome.command == RollCommand(DicePool(3))
        assert outcome.intent_result.intent_name == "rollDice"
        assert outcome.text == "Roll three dice"

    def test_natural_language_in_dice_only_channel(self, dispatcher):
        """Test that dice-only channels need no mention."""
        outcome = dispatcher.parse("Do a hacking roll", BOT_ID, dice_only=True)
        assert outcome.command == CharacterRollCommand(ActionCheck(ActionName.HACK))

    def test_unaddressed_message(self, dispatcher):
        """Test that an unaddressed message holds no command."""
        assert dispatcher.parse("Roll three dice", BOT_ID) is None

    def test_custom_prefix(self):
        """Test that the dispatcher uses its configured prefix."""
        dispatcher = CommandDispatcher(Mock(resolve=Mock(return_value=None)), prefix="?")
        assert dispatcher.parse("?roll 2d").command == RollCommand(DicePool(2))
        assert dispatcher.parse("!roll 2d") is None


class TestPermittedPrivately:
    """Tests for private message permissions."""

    def test_help_permitted(self):
        """Test that help is allowed privately."""
        assert CommandDispatcher.is_permitted_privately(HelpCommand())

    def test_roll_permitted(self):
        """Test that dice rolls are allowed privately."""
        assert CommandDispatcher.is_permitted_privately(RollCommand(DicePool(2)))

    def test_character_roll_not_permitted(self):
        """Test that character rolls are not allowed privately."""
        command = CharacterRollCommand(ActionCheck(ActionName.HACK))
        assert not CommandDispatcher.is_permitted_privately(command)
