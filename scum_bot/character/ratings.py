"""Character action and attribute ratings.

A Scum and Villainy character has twelve action ratings. The three
attribute ratings are derived from them: each attribute counts how many
of its four actions have a rating above zero.
"""

from dataclasses import dataclass
from enum import Enum


class AttributeName(str, Enum):
    """The three attributes used for resistance rolls."""

    INSIGHT = "insight"
    PROWESS = "prowess"
    RESOLVE = "resolve"

    @classmethod
    def parse(cls, text: str) -> "AttributeName | None":
        """Case-insensitive exact match on the attribute name."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ActionName(str, Enum):
    """The twelve directly-rated actions."""

    ATTUNE = "attune"
    COMMAND = "command"
    CONSORT = "consort"
    DOCTOR = "doctor"
    HACK = "hack"
    HELM = "helm"
    RIG = "rig"
    SCRAMBLE = "scramble"
    SCRAP = "scrap"
    SKULK = "skulk"
    STUDY = "study"
    SWAY = "sway"

    @classmethod
    def parse(cls, text: str) -> "ActionName | None":
        """Case-insensitive exact match on the action name."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


# Each action belongs to exactly one attribute
ATTRIBUTE_ACTIONS: dict[AttributeName, tuple[ActionName, ...]] = {
    AttributeName.INSIGHT: (
        ActionName.DOCTOR,
        ActionName.HACK,
        ActionName.RIG,
        ActionName.STUDY,
    ),
    AttributeName.PROWESS: (
        ActionName.HELM,
        ActionName.SCRAMBLE,
        ActionName.SCRAP,
        ActionName.SKULK,
    ),
    AttributeName.RESOLVE: (
        ActionName.ATTUNE,
        ActionName.COMMAND,
        ActionName.CONSORT,
        ActionName.SWAY,
    ),
}


@dataclass(frozen=True)
class AttributeRating:
    """Derived attribute rating, 0 to 4."""

    rating: int


@dataclass(frozen=True)
class ActionRating:
    """Action rating as a dice count. Never negative."""

    rating: int


@dataclass(frozen=True)
class Character:
    """Snapshot of a character's ratings in one channel.

    Action fields hold the stored rating, or None if the character has
    no value for that action at all.

    Attributes:
        channel_id: Channel the character belongs to.
        user_id: Player who owns the character.
    """

    channel_id: str
    user_id: str

    # Action ratings
    attune: int | None = 0
    command: int | None = 0
    consort: int | None = 0
    doctor: int | None = 0
    hack: int | None = 0
    helm: int | None = 0
    rig: int | None = 0
    scramble: int | None = 0
    scrap: int | None = 0
    skulk: int | None = 0
    study: int | None = 0
    sway: int | None = 0

    def action(self, name: ActionName) -> ActionRating | None:
        """Get an action rating, clamped to zero.

        Returns:
            ActionRating, or None if the rating is not set.
        """
        stored = getattr(self, name.value)
        if stored is None:
            return None
        return ActionRating(rating=max(0, stored))

    def attribute(self, name: AttributeName) -> AttributeRating:
        """Get a derived attribute rating.

        Unset constituent actions count as unrated.
        """
        rated = 0
        for action_name in ATTRIBUTE_ACTIONS[name]:
            stored = getattr(self, action_name.value)
            if stored is not None and stored > 0:
                rated += 1
        return AttributeRating(rating=rated)

    @property
    def insight(self) -> AttributeRating:
        return self.attribute(AttributeName.INSIGHT)

    @property
    def prowess(self) -> AttributeRating:
        return self.attribute(AttributeName.PROWESS)

    @property
    def resolve(self) -> AttributeRating:
        return self.attribute(AttributeName.RESOLVE)
