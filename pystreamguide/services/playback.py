import logging
from typing import Optional

from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.players.base import BasePlayer

logger = logging.getLogger(__name__)

NO_STREAM_MESSAGE = "No stream available for this channel"


class PlaybackService:
    """Routes a channel to the player matching its playable address.

    Embed pages go to ``embed_player``; plain streams go to ``stream_player``.
    """

    def __init__(self, stream_player: BasePlayer, embed_player: BasePlayer) -> None:
        self.stream_player: BasePlayer = stream_player
        self.embed_player: BasePlayer = embed_player
        self.current_channel: Optional[ChannelEntity] = None
        self.embed_mode: bool = False
        self.last_error: Optional[str] = None

    def load_channel(self, channel: Optional[ChannelEntity]) -> bool:
        if channel is None or not channel.is_playable:
            self.last_error = NO_STREAM_MESSAGE
            logger.warning(
                f"Cannot play {channel.id if channel else 'unknown channel'}: no stream"
            )
            return False

        self.current_channel = channel
        self.last_error = None
        logger.info(f"Playing channel: {channel.name}")

        if channel.embed_url:
            self.stream_player.stop()
            self.embed_mode = True
            self.embed_player.play(channel.embed_url)
        else:
            self.embed_player.stop()
            self.embed_mode = False
            self.stream_player.play(channel.stream_url)
        return True

    def toggle_play(self) -> None:
        if self.current_channel is not None and not self.embed_mode:
            self.stream_player.toggle_pause()

    def stop(self) -> None:
        self.stream_player.stop()
        self.embed_player.stop()
        self.current_channel = None
