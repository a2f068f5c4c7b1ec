import logging
from pathlib import Path
from typing import Union

from pystreamguide.dao.channel_retrieval.base import BaseChannelRetrieval
from pystreamguide.exceptions import PlaylistFetchError

logger = logging.getLogger(__name__)


class FilePlaylistSource(BaseChannelRetrieval):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def fetch_playlist_text(self) -> str:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, ValueError) as e:
            raise PlaylistFetchError(f"Failed to read playlist {self.path}: {e}") from e
        logger.debug(f"Read playlist file {self.path}")
        return text


class InlinePlaylistSource(BaseChannelRetrieval):
    """Playlist text kept in memory, e.g. bundled with the application."""

    def __init__(self, text: str):
        self.text = text

    def fetch_playlist_text(self) -> str:
        return self.text
