"""Per-channel configuration model."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from scum_bot.database.models.base import Base, TimestampMixin


class ChannelConfig(Base, TimestampMixin):
    """How the bot behaves in one channel."""

    __tablename__ = "channels"

    channel_id: Mapped[str] = mapped_column(String(32), primary_key=True)

    enabled: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Whether non-admins may run commands",
    )
    dice_only: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Treat every message as addressed to the bot",
    )

    def __repr__(self) -> str:
        return f"<ChannelConfig {self.channel_id} enabled={self.enabled} dice_only={self.dice_only}>"
