import logging
from typing import Any, Dict, List, Optional

from prompt_toolkit import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import TextArea

from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.enum.theme import Theme
from pystreamguide.services.catalog import ALL_CATEGORIES, ChannelCatalog
from pystreamguide.services.deep_link import build_share_link
from pystreamguide.services.favorites import FavoritesService
from pystreamguide.services.navigation import ChannelNavigator
from pystreamguide.services.playback import PlaybackService
from pystreamguide.services.theme import ThemeService

logger = logging.getLogger(__name__)

STYLES: Dict[Theme, Style] = {
    Theme.DARK: Style.from_dict(
        {
            "categories": "bg:#1a1a1a #8ab4f8",
            "output": "bg:#000000 #ffffff",
            "favorites": "bg:#1a1a1a #ffd700",
            "status": "bg:#1a1a1a #aaaaaa",
            "help": "bg:#333333 #aaaaaa",
        }
    ),
    Theme.LIGHT: Style.from_dict(
        {
            "categories": "bg:#e8eaed #1a73e8",
            "output": "bg:#ffffff #000000",
            "favorites": "bg:#e8eaed #b8860b",
            "status": "bg:#e8eaed #444444",
            "help": "bg:#cccccc #333333",
        }
    ),
}

HELP_TEXT = (
    "Arrows navigate | ENTER play | 1-9 quick play | f favorite | SPACE pause | "
    "TAB category | t theme | s share | Ctrl+C quit"
)


class CLIService:
    def __init__(
        self,
        catalog: ChannelCatalog,
        favorites: FavoritesService,
        playback: PlaybackService,
        theme: ThemeService,
        share_base_url: str,
    ) -> None:
        self.catalog: ChannelCatalog = catalog
        self.favorites: FavoritesService = favorites
        self.playback: PlaybackService = playback
        self.theme: ThemeService = theme
        self.share_base_url: str = share_base_url

        self.navigator: ChannelNavigator = ChannelNavigator()
        self.categories: List[str] = [ALL_CATEGORIES] + self.catalog.get_categories()
        self.current_category: str = ALL_CATEGORIES
        self.view_start_index: int = 0
        self.max_visible_rows: int = 30
        self.status: str = ""

        self.category_bar: TextArea = TextArea(
            style="class:categories", height=1, focusable=False, wrap_lines=False
        )
        self.output_field: TextArea = TextArea(
            style="class:output",
            scrollbar=True,
            focusable=False,
            wrap_lines=False,
        )
        self.favorites_bar: TextArea = TextArea(
            style="class:favorites", height=1, focusable=False, wrap_lines=False
        )
        self.status_bar: TextArea = TextArea(
            style="class:status", height=1, focusable=False, wrap_lines=False
        )
        self.help_bar: TextArea = TextArea(
            text=HELP_TEXT,
            style="class:help",
            height=1,
            focusable=False,
        )

        self.container: HSplit = HSplit(
            [
                self.category_bar,
                self.output_field,
                self.favorites_bar,
                self.status_bar,
                self.help_bar,
            ],
            padding=0,
        )

        self.kb: KeyBindings = KeyBindings()
        self.kb.add("c-c")(self.exit_app)
        self.kb.add("up")(self.move_up)
        self.kb.add("left")(self.move_up)
        self.kb.add("down")(self.move_down)
        self.kb.add("right")(self.move_down)
        self.kb.add("enter")(self.play_selected)
        self.kb.add("f")(self.toggle_current_favorite)
        self.kb.add("F")(self.toggle_current_favorite)
        self.kb.add("space")(self.toggle_play)
        self.kb.add("tab")(self.next_category)
        self.kb.add("s-tab")(self.previous_category)
        self.kb.add("t")(self.toggle_theme)
        self.kb.add("s")(self.share_channel)
        for digit in "123456789":
            self.kb.add(digit)(self.quick_play)

        self.application: Application[Any] = Application(
            layout=Layout(self.container),
            key_bindings=self.kb,
            full_screen=True,
            mouse_support=False,
            style=STYLES[self.theme.current()],
        )

        self.select_category(ALL_CATEGORIES)

    def exit_app(self, event: KeyPressEvent) -> None:
        self.playback.stop()
        event.app.exit()

    def move_up(self, event: KeyPressEvent) -> None:
        self.navigator.move(-1)
        self.update_output()

    def move_down(self, event: KeyPressEvent) -> None:
        self.navigator.move(1)
        self.update_output()

    def play_selected(self, event: KeyPressEvent) -> None:
        selected: Optional[ChannelEntity] = self.navigator.selected()
        if selected is not None:
            self.play_channel(selected.id)

    def quick_play(self, event: KeyPressEvent) -> None:
        channel = self.navigator.select_number(int(event.data))
        if channel is not None:
            self.play_channel(channel.id)

    def toggle_play(self, event: KeyPressEvent) -> None:
        self.playback.toggle_play()

    def next_category(self, event: KeyPressEvent) -> None:
        self._cycle_category(1)

    def previous_category(self, event: KeyPressEvent) -> None:
        self._cycle_category(-1)

    def _cycle_category(self, direction: int) -> None:
        index = self.categories.index(self.current_category)
        self.select_category(self.categories[(index + direction) % len(self.categories)])

    def select_category(self, category: str) -> None:
        self.current_category = category
        self.navigator.set_channels(self.catalog.get_by_category(category))
        self.view_start_index = 0
        self.update_output()

    def toggle_theme(self, event: KeyPressEvent) -> None:
        theme = self.theme.toggle()
        self.application.style = STYLES[theme]
        self.status = f"Theme: {theme.value}"
        self.update_output()

    def share_channel(self, event: KeyPressEvent) -> None:
        current = self.playback.current_channel
        if current is None:
            self.status = "No channel is currently playing"
        else:
            self.status = f"Share: {build_share_link(self.share_base_url, current.id)}"
        self.update_output()

    def toggle_current_favorite(self, event: KeyPressEvent) -> None:
        # The playing channel takes precedence over the keyboard selection
        channel = self.playback.current_channel or self.navigator.selected()
        if channel is None:
            return
        is_favorite = self.favorites.toggle_favorite(channel.id)
        action = "Added to" if is_favorite else "Removed from"
        self.status = f"{action} favorites: {channel.name}"
        self.update_output()

    def play_channel(self, channel_id: str) -> None:
        channel = self.catalog.get_by_id(channel_id)
        if channel is None:
            return
        if channel.is_placeholder:
            self.status = "This channel does not have a stream URL configured yet."
        elif self.playback.load_channel(channel):
            self.navigator.select_id(channel_id)
            self.status = f"Now playing: {channel.name} ({channel.category or '-'})"
        else:
            self.status = self.playback.last_error or "Stream unavailable"
        self.update_output()

    def _render_categories(self) -> str:
        labels = []
        for category in self.categories:
            label = "All" if category == ALL_CATEGORIES else category
            labels.append(f"[{label}]" if category == self.current_category else label)
        return "  ".join(labels)

    def _render_channels(self) -> str:
        channels = self.navigator.channels
        if not channels:
            return "No channels in this category"

        selected_index = self.navigator.selected_index
        if 0 <= selected_index < self.view_start_index:
            self.view_start_index = selected_index
        elif selected_index >= self.view_start_index + self.max_visible_rows:
            self.view_start_index = selected_index - self.max_visible_rows + 1

        current = self.playback.current_channel
        favorite_ids = set(self.favorites.get_favorites())
        lines: List[str] = [f"{'':<6}{'#':<3}{'Name':<32} Category", f"{'':<6}{'-' * 50}"]

        visible_items = self._visible_channels(channels)
        for i, ch in enumerate(visible_items):
            actual_index = self.view_start_index + i
            prefix = ">>" if actual_index == selected_index else "  "
            playing = ">" if current is not None and current.id == ch.id else " "
            star = "*" if ch.id in favorite_ids else " "
            number = str(actual_index + 1) if actual_index < 9 else ""
            name = ch.name if ch.is_playable else f"{ch.name} (no stream)"
            lines.append(
                f"{prefix}{playing}{star}  {number:<3}{name:<32} {ch.category or ''}"
            )
        return "\n".join(lines)

    def _visible_channels(self, channels: List[ChannelEntity]) -> List[ChannelEntity]:
        return channels[
            self.view_start_index : self.view_start_index + self.max_visible_rows
        ]

    def _render_favorites(self) -> str:
        names = [ch.name for ch in self.favorites.get_favorite_channels()]
        return "Favorites: " + (", ".join(names) if names else "none")

    def update_output(self) -> None:
        self.category_bar.text = self._render_categories()
        self.output_field.text = self._render_channels()
        self.favorites_bar.text = self._render_favorites()
        self.status_bar.text = self.status

    def start(self, channel: Optional[ChannelEntity]) -> None:
        if channel is not None:
            self.play_channel(channel.id)

    def run(self, startup_channel: Optional[ChannelEntity] = None) -> None:
        logger.info(
            f"Starting interactive CLI UI. "
            f"{self.catalog.active_count()}/{self.catalog.count()} channels available."
        )
        self.start(startup_channel)
        with patch_stdout():
            self.application.run()
