import logging
import webbrowser

from pystreamguide.players.base import BasePlayer

logger = logging.getLogger(__name__)


class BrowserPlayer(BasePlayer):
    """Opens embeddable player pages in the system web browser."""

    def __init__(self, opener=webbrowser.open) -> None:
        self.opener = opener
        self.current_url = None

    def play(self, url: str) -> None:
        if not self.opener(url):
            logger.error(f"No browser available to open {url}")
            self.current_url = None
            return
        self.current_url = url

    def stop(self) -> None:
        # The browser tab is out of our hands once opened
        self.current_url = None
