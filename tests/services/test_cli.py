import os
import tempfile
import unittest
from types import SimpleNamespace
from unittest import mock

from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from pystreamguide.dao.preference_storage.sqlite import PreferenceStorageSQLite
from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.enum.theme import Theme
from pystreamguide.players.base import BasePlayer
from pystreamguide.services.catalog import ChannelCatalog
from pystreamguide.services.cli import STYLES, CLIService
from pystreamguide.services.favorites import FavoritesService
from pystreamguide.services.playback import PlaybackService
from pystreamguide.services.theme import ThemeService


class RecordingPlayer(BasePlayer):
    def __init__(self):
        self.played = []

    def play(self, url: str):
        self.played.append(url)

    def stop(self):
        pass


def key(data: str = "") -> SimpleNamespace:
    return SimpleNamespace(data=data, app=mock.Mock())


class TestCLIService(unittest.TestCase):
    def setUp(self):
        pipe_input = self.enterContext(create_pipe_input())
        self.enterContext(create_app_session(input=pipe_input, output=DummyOutput()))

        temp_db_file = tempfile.NamedTemporaryFile(delete=False)
        temp_db_file.close()
        self.addCleanup(lambda: os.remove(temp_db_file.name))
        storage = PreferenceStorageSQLite(temp_db_file.name)
        self.addCleanup(storage.close)

        self.catalog = ChannelCatalog.from_channels(
            [
                ChannelEntity(id="geo", name="Geo", category="News", stream_url="http://geo"),
                ChannelEntity(id="soon", name="Coming Soon", category="Drama"),
                ChannelEntity(id="ary", name="ARY", category="News", stream_url="http://ary"),
                ChannelEntity(id="emb", name="Embedded", category="Sports", embed_url="http://emb"),
            ]
        )
        self.stream_player = RecordingPlayer()
        self.embed_player = RecordingPlayer()
        self.favorites = FavoritesService(storage, self.catalog)
        self.theme = ThemeService(storage)
        self.cli = CLIService(
            catalog=self.catalog,
            favorites=self.favorites,
            playback=PlaybackService(self.stream_player, self.embed_player),
            theme=self.theme,
            share_base_url="https://tv.test/",
        )

    def test_initial_render(self):
        self.assertEqual(self.cli.categories, ["all", "Drama", "News", "Sports"])
        self.assertIn("[All]", self.cli.category_bar.text)
        self.assertIn("Coming Soon (no stream)", self.cli.output_field.text)
        self.assertEqual(self.cli.favorites_bar.text, "Favorites: none")

    def test_navigate_and_play(self):
        self.cli.move_down(key())
        self.cli.move_down(key())
        self.cli.move_down(key())
        self.cli.play_selected(key())
        self.assertEqual(self.stream_player.played, ["http://ary"])
        self.assertIn("Now playing: ARY", self.cli.status_bar.text)

    def test_up_from_nothing_selects_last(self):
        self.cli.move_up(key())
        self.cli.play_selected(key())
        self.assertEqual(self.embed_player.played, ["http://emb"])

    def test_quick_play(self):
        self.cli.quick_play(key("1"))
        self.assertEqual(self.stream_player.played, ["http://geo"])
        self.cli.quick_play(key("9"))
        self.assertEqual(self.stream_player.played, ["http://geo"])

    def test_placeholder_is_not_played(self):
        self.cli.quick_play(key("2"))
        self.assertEqual(self.stream_player.played, [])
        self.assertIn("does not have a stream", self.cli.status_bar.text)

    def test_category_cycling(self):
        self.cli.next_category(key())
        self.assertEqual(self.cli.current_category, "Drama")
        self.cli.next_category(key())
        self.assertEqual(
            [ch.id for ch in self.cli.navigator.channels], ["geo", "ary"]
        )
        self.cli.previous_category(key())
        self.cli.previous_category(key())
        self.cli.previous_category(key())
        self.assertEqual(self.cli.current_category, "Sports")

    def test_favorite_follows_playing_channel(self):
        self.cli.quick_play(key("3"))
        self.cli.move_down(key())
        self.cli.toggle_current_favorite(key())
        self.assertEqual(self.favorites.get_favorites(), ["ary"])
        self.assertIn("ARY", self.cli.favorites_bar.text)

    def test_favorite_uses_selection_when_nothing_plays(self):
        self.cli.move_down(key())
        self.cli.toggle_current_favorite(key())
        self.assertEqual(self.favorites.get_favorites(), ["geo"])
        self.cli.toggle_current_favorite(key())
        self.assertEqual(self.favorites.get_favorites(), [])

    def test_toggle_theme(self):
        self.cli.toggle_theme(key())
        self.assertEqual(self.theme.current(), Theme.LIGHT)
        self.assertIs(self.cli.application.style, STYLES[Theme.LIGHT])

    def test_share_link(self):
        self.cli.share_channel(key())
        self.assertEqual(self.cli.status_bar.text, "No channel is currently playing")
        self.cli.start(self.catalog.get_by_id("geo"))
        self.cli.share_channel(key())
        self.assertEqual(self.cli.status_bar.text, "Share: https://tv.test/?channel=geo")

    def test_exit(self):
        event = key()
        self.cli.exit_app(event)
        event.app.exit.assert_called_once_with()
