"""IntentLogManager: audit trail of natural-language classifications."""

from scum_bot.database.models.intent_log import IntentLogEntry
from scum_bot.managers.base import BaseManager
from scum_bot.parser.intent_types import IntentResult


class IntentLogManager(BaseManager):
    """Record classifier output for later review."""

    def log(
        self,
        message_id: str,
        channel_id: str,
        user_id: str,
        content: str,
        intent_result: IntentResult,
        corrected: str | None = None,
    ) -> IntentLogEntry:
        """Add an intent log entry.

        Args:
            message_id: ID of the classified message.
            channel_id: Channel the message was sent in.
            user_id: Sender of the message.
            content: Original message content.
            intent_result: Classifier output.
            corrected: Spelling-corrected text, if any.

        Returns:
            Created IntentLogEntry.
        """
        entry = IntentLogEntry(
            message_id=message_id,
            channel_id=channel_id,
            user_id=user_id,
            content=content,
            corrected_content=corrected,
            intent_name=intent_result.intent_name,
            probability=intent_result.probability,
            slots=[slot.model_dump(mode="json") for slot in intent_result.slots],
        )
        self.db.add(entry)
        self.db.flush()
        return entry

    def recent(self, limit: int = 20) -> list[IntentLogEntry]:
        """Get the most recent entries, newest first."""
        return (
            self.db.query(IntentLogEntry)
            .order_by(IntentLogEntry.id.desc())
            .limit(limit)
            .all()
        )
