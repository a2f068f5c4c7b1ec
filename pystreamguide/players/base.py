from abc import ABC, abstractmethod


class BasePlayer(ABC):
    @abstractmethod
    def play(self, url: str):
        pass

    @abstractmethod
    def stop(self):
        pass

    def toggle_pause(self) -> None:
        """Players without pause support ignore the request."""
        pass
