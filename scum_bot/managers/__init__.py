"""Managers for reading and writing bot state."""

from scum_bot.managers.base import BaseManager
from scum_bot.managers.channel_manager import ChannelManager, ChannelSettings
from scum_bot.managers.character_manager import CharacterManager
from scum_bot.managers.intent_log_manager import IntentLogManager

__all__ = [
    "BaseManager",
    "ChannelManager",
    "ChannelSettings",
    "CharacterManager",
    "IntentLogManager",
]
