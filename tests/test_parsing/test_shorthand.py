"""Tests for shorthand command parsing."""

import pytest

from scum_bot.character.checks import ActionCheck, AttributeCheck
from scum_bot.character.ratings import ActionName, AttributeName
from scum_bot.dice.types import DicePool
from scum_bot.parser.commands import CharacterRollCommand, HelpCommand, RollCommand
from scum_bot.parser.errors import ShorthandSyntaxError, TooManyDiceError
from scum_bot.parser.shorthand import parse_shorthand


class TestHelp:
    """Tests for the help shorthand."""

    def test_help(self):
        """Test '!help'."""
        result = parse_shorthand("!help")
        assert result.command == HelpCommand()
        assert not result.is_error

    def test_help_case_insensitive(self):
        """Test '!HELP'."""
        assert parse_shorthand("!HELP").command == HelpCommand()

    def test_help_with_trailing_text_is_not_shorthand(self):
        """Test that '!help me' is not recognised."""
        assert parse_shorthand("!help me") is None


class TestRoll:
    """Tests for the roll shorthand."""

    def test_roll_pool(self):
        """Test '!roll 3d'."""
        assert parse_shorthand("!roll 3d").command == RollCommand(DicePool(3))

    def test_short_alias(self):
        """Test '!r 2d'."""
        assert parse_shorthand("!r 2d").command == RollCommand(DicePool(2))

    def test_zero_pool(self):
        """Test '!roll 0d'."""
        assert parse_shorthand("!roll 0d").command == RollCommand(DicePool(0))

    def test_attribute_check(self):
        """Test '!roll insight'."""
        result = parse_shorthand("!roll insight")
        assert result.command == CharacterRollCommand(AttributeCheck(AttributeName.INSIGHT))

    def test_action_check(self):
        """Test '!roll hack'."""
        result = parse_shorthand("!roll hack")
        assert result.command == CharacterRollCommand(ActionCheck(ActionName.HACK))

    def test_action_check_with_bonus(self):
        """Test '!roll hack with 1 bonus dice'."""
        result = parse_shorthand("!roll hack with 1 bonus dice")
        assert result.command == CharacterRollCommand(ActionCheck(ActionName.HACK, bonus=1))

    def test_case_insensitive_keyword(self):
        """Test '!ROLL Scrap'."""
        result = parse_shorthand("!ROLL Scrap")
        assert result.command == CharacterRollCommand(ActionCheck(ActionName.SCRAP))

    def test_too_many_dice(self):
        """Test that '!roll 101d' is a TooManyDiceError."""
        result = parse_shorthand("!roll 101d")
        assert result.is_error
        assert isinstance(result.error, TooManyDiceError)
        assert result.error.count == 101
        assert "101 dice" in str(result.error)

    def test_too_many_dice_cites_count(self):
        """Test that '!roll 150d' reports 150 dice."""
        result = parse_shorthand("!roll 150d")
        assert result.error.count == 150
        assert "roll 150 dice" in str(result.error)

    def test_hundred_dice_allowed(self):
        """Test that '!roll 100d' parses."""
        assert parse_shorthand("!roll 100d").command == RollCommand(DicePool(100))

    @pytest.mark.parametrize("text", ["!roll zzz", "!roll 3d6", "!r hack with bonus dice"])
    def test_bad_argument_is_syntax_error(self, text):
        """Test that a recognised roll with a bad argument is an error."""
        result = parse_shorthand(text)
        assert result is not None
        assert isinstance(result.error, ShorthandSyntaxError)
        assert "`!help`" in str(result.error)

    @pytest.mark.parametrize("text", ["roll 3d", "Roll three dice", "!rolls 3d", "!roll", "hello"])
    def test_not_shorthand(self, text):
        """Test that non-shorthand text returns None."""
        assert parse_shorthand(text) is None


class TestCustomPrefix:
    """Tests for a configured command prefix."""

    def test_custom_prefix(self):
        """Test '?roll 3d' with prefix '?'."""
        assert parse_shorthand("?roll 3d", prefix="?").command == RollCommand(DicePool(3))

    def test_default_prefix_ignored(self):
        """Test that '!roll 3d' is not shorthand with prefix '?'."""
        assert parse_shorthand("!roll 3d", prefix="?") is None
