import json
import logging
from typing import List

from pystreamguide.dao.preference_storage.base import BasePreferenceStorage
from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.services.catalog import ChannelCatalog

logger = logging.getLogger(__name__)


class FavoritesService:
    STORAGE_KEY = "favorites"

    def __init__(
        self, storage: BasePreferenceStorage, catalog: ChannelCatalog
    ) -> None:
        self.storage: BasePreferenceStorage = storage
        self.catalog: ChannelCatalog = catalog

    def get_favorites(self) -> List[str]:
        stored = self.storage.get(self.STORAGE_KEY)
        if not stored:
            return []
        try:
            favorites = json.loads(stored)
        except ValueError as e:
            logger.error(f"Error reading favorites: {e}")
            return []
        if not isinstance(favorites, list):
            logger.error(f"Ignoring malformed favorites value: {stored!r}")
            return []
        return [str(channel_id) for channel_id in favorites]

    def _save_favorites(self, favorites: List[str]) -> None:
        self.storage.set(self.STORAGE_KEY, json.dumps(favorites))

    def add_favorite(self, channel_id: str) -> bool:
        favorites = self.get_favorites()
        if channel_id in favorites:
            return False
        favorites.append(channel_id)
        self._save_favorites(favorites)
        return True

    def remove_favorite(self, channel_id: str) -> bool:
        favorites = self.get_favorites()
        if channel_id not in favorites:
            return False
        favorites.remove(channel_id)
        self._save_favorites(favorites)
        return True

    def toggle_favorite(self, channel_id: str) -> bool:
        """Flip the favorite state of a channel and return the new state."""
        if self.is_favorite(channel_id):
            self.remove_favorite(channel_id)
            return False
        self.add_favorite(channel_id)
        return True

    def is_favorite(self, channel_id: str) -> bool:
        return channel_id in self.get_favorites()

    def get_favorite_channels(self) -> List[ChannelEntity]:
        # Ids of channels that are no longer in the catalog are skipped
        channels = [self.catalog.get_by_id(cid) for cid in self.get_favorites()]
        return [ch for ch in channels if ch is not None]

    def clear_favorites(self) -> None:
        self._save_favorites([])
