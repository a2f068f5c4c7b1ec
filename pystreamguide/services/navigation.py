from typing import List, Optional

from pystreamguide.dto.channel import ChannelEntity

NO_SELECTION = -1


class ChannelNavigator:
    """Keyboard selection over the list of channels currently shown."""

    def __init__(self) -> None:
        self.channels: List[ChannelEntity] = []
        self.selected_index: int = NO_SELECTION

    def set_channels(self, channels: List[ChannelEntity]) -> None:
        self.channels = list(channels)
        self.selected_index = NO_SELECTION

    def move(self, direction: int) -> Optional[ChannelEntity]:
        total = len(self.channels)
        if total == 0:
            return None
        if self.selected_index == NO_SELECTION:
            self.selected_index = 0 if direction > 0 else total - 1
        else:
            self.selected_index = (self.selected_index + direction) % total
        return self.selected()

    def select_number(self, number: int) -> Optional[ChannelEntity]:
        """Quick select with keys 1-9; out of range numbers are ignored."""
        if 1 <= number <= 9 and number <= len(self.channels):
            self.selected_index = number - 1
            return self.selected()
        return None

    def select_id(self, channel_id: str) -> Optional[ChannelEntity]:
        for index, channel in enumerate(self.channels):
            if channel.id == channel_id:
                self.selected_index = index
                return channel
        return None

    def selected(self) -> Optional[ChannelEntity]:
        if 0 <= self.selected_index < len(self.channels):
            return self.channels[self.selected_index]
        return None
