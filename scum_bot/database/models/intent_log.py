"""Intent classification audit log model."""

from sqlalchemy import JSON, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from scum_bot.database.models.base import Base, TimestampMixin


class IntentLogEntry(Base, TimestampMixin):
    """One natural-language classification, kept for improving the classifier."""

    __tablename__ = "intent_log"

    id: Mapped[int] = mapped_column(primary_key=True)

    message_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    channel_id: Mapped[str] = mapped_column(String(32), nullable=False)
    user_id: Mapped[str] = mapped_column(String(32), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)
    corrected_content: Mapped[str | None] = mapped_column(Text, nullable=True)

    intent_name: Mapped[str | None] = mapped_column(String(64), nullable=True)
    probability: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    slots: Mapped[list | None] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        return f"<IntentLogEntry {self.message_id} intent={self.intent_name}>"
