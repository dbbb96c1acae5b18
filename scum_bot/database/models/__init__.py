"""Database models package."""

from scum_bot.database.models.base import Base, TimestampMixin
from scum_bot.database.models.channels import ChannelConfig
from scum_bot.database.models.characters import CharacterSheet
from scum_bot.database.models.intent_log import IntentLogEntry

__all__ = [
    "Base",
    "TimestampMixin",
    "ChannelConfig",
    "CharacterSheet",
    "IntentLogEntry",
]
