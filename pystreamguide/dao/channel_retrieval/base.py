from abc import ABC, abstractmethod


class BaseChannelRetrieval(ABC):
    @abstractmethod
    def fetch_playlist_text(self) -> str:
        """Return the whole playlist document or raise PlaylistFetchError."""
        pass
