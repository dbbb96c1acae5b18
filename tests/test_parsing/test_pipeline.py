"""Tests for the full natural-language pipeline with spelling correction."""

import pytest

from scum_bot.bot.factory import build_dispatcher
from scum_bot.character.checks import ActionCheck, AttributeCheck
from scum_bot.character.ratings import ActionName, AttributeName
from scum_bot.config import Settings
from scum_bot.dice.types import DicePool
from scum_bot.parser.commands import CharacterRollCommand, RollCommand
from scum_bot.parser.errors import TooManyDiceError

BOT_ID = "999"


@pytest.fixture(scope="module")
def dispatcher():
    """Dispatcher built from default settings, English dictionary included."""
    return build_dispatcher(Settings(_env_file=None))


class TestDicePoolPhrases:
    """Tests for pool notation reaching the classifier intact."""

    @pytest.mark.parametrize(
        "text,size",
        [
            ("roll 3d", 3),
            ("roll 2d6", 2),
            ("rol 4d", 4),
            ("roll a d6", 1),
            ("Roll three dice", 3),
        ],
    )
    def test_dice_only_roll(self, dispatcher, text, size):
        """Test dice rolls in a dice-only channel."""
        outcome = dispatcher.parse(text, BOT_ID, dice_only=True)
        assert outcome.error is None
        assert outcome.command == RollCommand(DicePool(size))

    def test_mentioned_roll(self, dispatcher):
        """Test '<@bot> roll 3d' with a mention."""
        outcome = dispatcher.parse(f"<@{BOT_ID}> roll 3d", BOT_ID)
        assert outcome.corrected == "roll 3d"
        assert outcome.command == RollCommand(DicePool(3))

    def test_too_many_dice(self, dispatcher):
        """Test that 'roll 150d' reports 150 dice."""
        outcome = dispatcher.parse("roll 150d", BOT_ID, dice_only=True)
        assert isinstance(outcome.error, TooManyDiceError)
        assert outcome.error.count == 150


class TestHelpExamples:
    """Tests for the examples shown in help."""

    def test_roll_three_dice(self, dispatcher):
        """Test 'Roll three dice'."""
        outcome = dispatcher.parse(f"<@{BOT_ID}> Roll three dice", BOT_ID)
        assert outcome.command == RollCommand(DicePool(3))

    def test_hacking_roll(self, dispatcher):
        """Test 'Do a hacking roll'."""
        outcome = dispatcher.parse(f"<@{BOT_ID}> Do a hacking roll", BOT_ID)
        assert outcome.command == CharacterRollCommand(ActionCheck(ActionName.HACK))

    def test_insight_resistance_roll(self, dispatcher):
        """Test 'Perform an insight resistance roll'."""
        outcome = dispatcher.parse(f"<@{BOT_ID}> Perform an insight resistance roll", BOT_ID)
        assert outcome.command == CharacterRollCommand(AttributeCheck(AttributeName.INSIGHT))
