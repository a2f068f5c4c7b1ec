import logging

import requests

from pystreamguide.dao.channel_retrieval.base import BaseChannelRetrieval
from pystreamguide.exceptions import PlaylistFetchError

logger = logging.getLogger(__name__)


class HttpPlaylistSource(BaseChannelRetrieval):
    def __init__(self, url: str, timeout: float = 30):
        self.url = url
        self.timeout = timeout

    def fetch_playlist_text(self) -> str:
        try:
            logger.debug(f"Requesting playlist from {self.url}")
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise PlaylistFetchError(
                f"Failed to load playlist from {self.url}: {e}"
            ) from e

        # Playlists are UTF-8 regardless of what the server advertises
        response.encoding = "utf-8"
        logger.info(f"Retrieved {len(response.content)} bytes from {self.url}")
        return response.text
