import logging
from typing import List, Optional

from pystreamguide.dao.channel_retrieval.base import BaseChannelRetrieval
from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.exceptions import PlaylistError
from pystreamguide.parsers.m3u import parse_m3u

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


class ChannelCatalog:
    """Channels loaded once from a playlist source and queried read-only.

    A failed load leaves the catalog loaded with the seed channels (or none),
    so every query is safe to call before or after ``load``. With ``strict``
    the failure is raised instead and the catalog stays unloaded.

    Duplicate ids are kept as listed; ``get_by_id`` returns the first one.
    """

    def __init__(
        self,
        source: Optional[BaseChannelRetrieval],
        seed: Optional[List[ChannelEntity]] = None,
        strict: bool = False,
    ) -> None:
        self.source: Optional[BaseChannelRetrieval] = source
        self.seed: List[ChannelEntity] = list(seed or [])
        self.strict: bool = strict
        self._channels: List[ChannelEntity] = []
        self._loaded: bool = False

    @classmethod
    def from_channels(cls, channels: List[ChannelEntity]) -> "ChannelCatalog":
        catalog = cls(source=None, seed=channels)
        catalog.load()
        return catalog

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> List[ChannelEntity]:
        if self._loaded:
            return list(self._channels)

        if self.source is None:
            self._channels = list(self.seed)
        else:
            try:
                self._channels = parse_m3u(
                    self.source.fetch_playlist_text(), strict=self.strict
                )
            except PlaylistError as e:
                if self.strict:
                    raise
                logger.error(f"Error loading playlist: {e}")
                self._channels = list(self.seed)
                if self.seed:
                    logger.info(f"Falling back to {len(self.seed)} seed channels")

        self._loaded = True
        logger.info(
            f"Loaded {self.count()} channels ({self.active_count()} playable)"
        )
        return list(self._channels)

    def reset(self) -> None:
        self._channels = []
        self._loaded = False

    def get_all(self) -> List[ChannelEntity]:
        return list(self._channels)

    def get_categories(self) -> List[str]:
        return sorted({ch.category for ch in self._channels if ch.category})

    def get_by_category(self, category: str) -> List[ChannelEntity]:
        if category == ALL_CATEGORIES:
            return self.get_all()
        return [ch for ch in self._channels if ch.category == category]

    def get_by_id(self, channel_id: str) -> Optional[ChannelEntity]:
        return next((ch for ch in self._channels if ch.id == channel_id), None)

    def get_active(self) -> List[ChannelEntity]:
        return [ch for ch in self._channels if ch.is_playable]

    def count(self) -> int:
        return len(self._channels)

    def active_count(self) -> int:
        return len(self.get_active())
