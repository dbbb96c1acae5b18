"""CharacterManager: the character rating lookup."""

from scum_bot.character.ratings import Character
from scum_bot.database.models.characters import CharacterSheet
from scum_bot.managers.base import BaseManager


class CharacterManager(BaseManager):
    """Read character ratings.

    Characters are fetched fresh for every command and returned as
    immutable snapshots.
    """

    def get_sheet(self, channel_id: str, user_id: str) -> CharacterSheet | None:
        """Get the stored character sheet row.

        Args:
            channel_id: Channel the character belongs to.
            user_id: Player who owns the character.

        Returns:
            CharacterSheet if found, None otherwise.
        """
        return (
            self.db.query(CharacterSheet)
            .filter(
                CharacterSheet.channel_id == channel_id,
                CharacterSheet.user_id == user_id,
            )
            .first()
        )

    def lookup(self, channel_id: str, user_id: str) -> Character | None:
        """Get a character snapshot.

        Args:
            channel_id: Channel the character belongs to.
            user_id: Player who owns the character.

        Returns:
            Character if found, None otherwise.
        """
        sheet = self.get_sheet(channel_id, user_id)
        return sheet.to_character() if sheet else None
