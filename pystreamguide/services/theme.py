import logging

from pystreamguide.dao.preference_storage.base import BasePreferenceStorage
from pystreamguide.enum.theme import Theme

logger = logging.getLogger(__name__)


class ThemeService:
    STORAGE_KEY = "theme"
    DEFAULT = Theme.DARK

    def __init__(self, storage: BasePreferenceStorage) -> None:
        self.storage: BasePreferenceStorage = storage

    def current(self) -> Theme:
        stored = self.storage.get(self.STORAGE_KEY)
        if stored is None:
            return self.DEFAULT
        try:
            return Theme(stored)
        except ValueError:
            logger.warning(f"Unknown theme {stored!r}, using {self.DEFAULT.value}")
            return self.DEFAULT

    def toggle(self) -> Theme:
        theme = self.current().toggled()
        self.storage.set(self.STORAGE_KEY, theme.value)
        return theme
