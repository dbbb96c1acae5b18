"""Tests for character ratings."""

import pytest

from scum_bot.character.ratings import (
    ATTRIBUTE_ACTIONS,
    ActionName,
    ActionRating,
    AttributeName,
    AttributeRating,
    Character,
)


def make_character(**ratings) -> Character:
    return Character(channel_id="100", user_id="42", **ratings)


class TestNames:
    """Tests for attribute and action name parsing."""

    @pytest.mark.parametrize("text", ["insight", "Insight", "INSIGHT", " insight "])
    def test_attribute_parse_is_case_insensitive(self, text):
        """Test case-insensitive attribute parsing."""
        assert AttributeName.parse(text) == AttributeName.INSIGHT

    def test_attribute_parse_unknown(self):
        """Test that unknown attributes parse to None."""
        assert AttributeName.parse("charm") is None

    @pytest.mark.parametrize("text", ["hack", "Hack", "HACK"])
    def test_action_parse_is_case_insensitive(self, text):
        """Test case-insensitive action parsing."""
        assert ActionName.parse(text) == ActionName.HACK

    def test_action_parse_does_not_accept_attributes(self):
        """Test that attribute names are not actions."""
        assert ActionName.parse("prowess") is None

    def test_display_names(self):
        """Test display capitalisation."""
        assert AttributeName.RESOLVE.display_name == "Resolve"
        assert ActionName.SKULK.display_name == "Skulk"

    def test_every_action_belongs_to_one_attribute(self):
        """Test that the attribute groups partition the twelve actions."""
        grouped = [action for actions in ATTRIBUTE_ACTIONS.values() for action in actions]
        assert sorted(grouped) == sorted(ActionName)
        assert len(grouped) == 12


class TestCharacter:
    """Tests for Character rating lookups."""

    def test_action_rating(self):
        """Test reading an action rating."""
        character = make_character(hack=2)
        assert character.action(ActionName.HACK) == ActionRating(2)

    def test_negative_action_clamped_to_zero(self):
        """Test that negative stored ratings clamp to zero."""
        character = make_character(scrap=-1)
        assert character.action(ActionName.SCRAP) == ActionRating(0)

    def test_unset_action_is_none(self):
        """Test that a NULL rating is reported as missing."""
        character = make_character(sway=None)
        assert character.action(ActionName.SWAY) is None

    def test_attribute_counts_rated_actions(self):
        """Test that Insight counts doctor/hack/rig/study ratings above zero."""
        character = make_character(doctor=1, hack=0, rig=2, study=0)
        assert character.attribute(AttributeName.INSIGHT) == AttributeRating(2)
        assert character.insight.rating == 2

    def test_attribute_ignores_rating_size(self):
        """Test that a rating of 4 still counts once."""
        character = make_character(helm=4, scramble=1, scrap=0, skulk=0)
        assert character.prowess.rating == 2

    def test_attribute_ignores_unset_and_negative(self):
        """Test that unset and negative ratings do not count."""
        character = make_character(attune=None, command=-2, consort=1, sway=0)
        assert character.resolve.rating == 1

    def test_attribute_maximum(self):
        """Test that all four rated actions give a rating of 4."""
        character = make_character(doctor=1, hack=1, rig=1, study=1)
        assert character.insight.rating == 4

    def test_new_character_has_zero_attributes(self):
        """Test the default character."""
        character = make_character()
        assert character.insight.rating == 0
        assert character.prowess.rating == 0
        assert character.resolve.rating == 0
