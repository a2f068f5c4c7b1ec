import unittest

from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.services.catalog import ChannelCatalog
from pystreamguide.services.deep_link import (
    build_share_link,
    channel_id_from_link,
    resolve_startup_channel,
)


class TestChannelIdFromLink(unittest.TestCase):
    def test_full_url(self):
        self.assertEqual(
            channel_id_from_link("https://tv.test/index.html?channel=geo-news"),
            "geo-news",
        )

    def test_bare_query(self):
        self.assertEqual(channel_id_from_link("channel=ptv&foo=bar"), "ptv")
        self.assertEqual(channel_id_from_link("?channel=ptv"), "ptv")

    def test_missing_or_empty_parameter(self):
        self.assertIsNone(channel_id_from_link("https://tv.test/?other=1"))
        self.assertIsNone(channel_id_from_link("https://tv.test/?channel="))
        self.assertIsNone(channel_id_from_link(""))

    def test_encoded_value(self):
        self.assertEqual(channel_id_from_link("?channel=a%20b"), "a b")


class TestBuildShareLink(unittest.TestCase):
    def test_share_link(self):
        self.assertEqual(
            build_share_link("https://tv.test/watch", "geo"),
            "https://tv.test/watch?channel=geo",
        )

    def test_existing_query_is_replaced(self):
        self.assertEqual(
            build_share_link("https://tv.test/?channel=old#top", "new"),
            "https://tv.test/?channel=new",
        )

    def test_share_link_round_trips_through_parser(self):
        link = build_share_link("https://tv.test/", "news & more")
        self.assertEqual(channel_id_from_link(link), "news & more")


class TestResolveStartupChannel(unittest.TestCase):
    def setUp(self):
        self.catalog = ChannelCatalog.from_channels(
            [
                ChannelEntity(id="placeholder", name="Soon"),
                ChannelEntity(id="geo", name="Geo", stream_url="http://geo"),
                ChannelEntity(id="dunya-news", name="Dunya", stream_url="http://dunya"),
                ChannelEntity(id="embed", name="Embed", embed_url="http://embed"),
            ]
        )

    def test_deep_link_wins(self):
        channel = resolve_startup_channel(self.catalog, "embed", "dunya-news")
        self.assertEqual(channel.id, "embed")

    def test_unknown_deep_link_uses_default(self):
        channel = resolve_startup_channel(self.catalog, "missing", "dunya-news")
        self.assertEqual(channel.id, "dunya-news")

    def test_placeholder_deep_link_uses_default(self):
        channel = resolve_startup_channel(self.catalog, "placeholder", "dunya-news")
        self.assertEqual(channel.id, "dunya-news")

    def test_falls_back_to_first_active(self):
        channel = resolve_startup_channel(self.catalog, None, "missing")
        self.assertEqual(channel.id, "geo")

    def test_no_default_configured(self):
        channel = resolve_startup_channel(self.catalog, None, None)
        self.assertEqual(channel.id, "geo")

    def test_empty_catalog(self):
        self.assertIsNone(
            resolve_startup_channel(ChannelCatalog.from_channels([]), "geo", "geo")
        )
