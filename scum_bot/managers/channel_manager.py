"""ChannelManager: per-channel configuration lookup."""

from dataclasses import dataclass

from scum_bot.database.models.channels import ChannelConfig
from scum_bot.managers.base import BaseManager


@dataclass(frozen=True)
class ChannelSettings:
    """Snapshot of a channel's configuration.

    Channels without a stored configuration are disabled and not
    dice-only.
    """

    enabled: bool = False
    dice_only: bool = False


class ChannelManager(BaseManager):
    """Read channel configuration."""

    def get(self, channel_id: str) -> ChannelSettings:
        """Get a channel's settings, falling back to the defaults.

        Args:
            channel_id: Channel to look up.

        Returns:
            ChannelSettings for the channel.
        """
        config = (
            self.db.query(ChannelConfig)
            .filter(ChannelConfig.channel_id == channel_id)
            .first()
        )
        if config is None:
            return ChannelSettings()
        return ChannelSettings(enabled=config.enabled, dice_only=config.dice_only)
