"""Character sheet model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from scum_bot.character.ratings import ActionName, Character
from scum_bot.database.models.base import Base, TimestampMixin


class CharacterSheet(Base, TimestampMixin):
    """A player's character ratings in one channel.

    A NULL action column means the character has no rating for that
    action at all, which is distinct from a rating of zero.
    """

    __tablename__ = "characters"

    channel_id: Mapped[str] = mapped_column(String(32), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(32), primary_key=True)

    # Action ratings
    attune: Mapped[int | None] = mapped_column(Integer, nullable=True)
    command: Mapped[int | None] = mapped_column(Integer, nullable=True)
    consort: Mapped[int | None] = mapped_column(Integer, nullable=True)
    doctor: Mapped[int | None] = mapped_column(Integer, nullable=True)
    hack: Mapped[int | None] = mapped_column(Integer, nullable=True)
    helm: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rig: Mapped[int | None] = mapped_column(Integer, nullable=True)
    scramble: Mapped[int | None] = mapped_column(Integer, nullable=True)
    scrap: Mapped[int | None] = mapped_column(Integer, nullable=True)
    skulk: Mapped[int | None] = mapped_column(Integer, nullable=True)
    study: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sway: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def to_character(self) -> Character:
        """Snapshot the row as an immutable Character."""
        ratings = {action.value: getattr(self, action.value) for action in ActionName}
        return Character(channel_id=self.channel_id, user_id=self.user_id, **ratings)

    def __repr__(self) -> str:
        return f"<CharacterSheet channel={self.channel_id} user={self.user_id}>"
