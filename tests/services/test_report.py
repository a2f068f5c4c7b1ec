import io
import unittest

from rich.console import Console

from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.services.report import build_channel_table


class TestBuildChannelTable(unittest.TestCase):
    def render(self, table) -> str:
        output = io.StringIO()
        Console(file=output, width=120).print(table)
        return output.getvalue()

    def test_rows_and_markers(self):
        channels = [
            ChannelEntity(id="geo", name="Geo", category="News", stream_url="http://g"),
            ChannelEntity(id="emb", name="Embedded", embed_url="http://e"),
            ChannelEntity(id="soon", name="Coming Soon", category="Drama"),
        ]
        table = build_channel_table(channels, ["geo", "stale"], title="3 channels")
        self.assertEqual(table.row_count, 3)
        self.assertEqual(len(table.columns), 5)

        text = self.render(table)
        self.assertIn("3 channels", text)
        self.assertIn("stream", text)
        self.assertIn("embed", text)
        self.assertIn("no stream", text)
        geo_line = next(line for line in text.splitlines() if "Geo" in line)
        self.assertIn("*", geo_line)

    def test_empty_table(self):
        self.assertEqual(build_channel_table([], []).row_count, 0)
