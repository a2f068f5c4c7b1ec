import argparse
import logging
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()
logging.basicConfig(
    filename="pystreamguide.log",
    filemode="w",
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

from rich.console import Console

from pystreamguide.config import Settings
from pystreamguide.dao.channel_retrieval.factory import playlist_source_for
from pystreamguide.dao.channel_retrieval.seed import load_seed_file
from pystreamguide.dao.preference_storage.sqlite import PreferenceStorageSQLite
from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.exceptions import PlaylistFetchError
from pystreamguide.players.browser import BrowserPlayer
from pystreamguide.players.vlc import VLCPlayer
from pystreamguide.services.catalog import ALL_CATEGORIES, ChannelCatalog
from pystreamguide.services.cli import CLIService
from pystreamguide.services.deep_link import (
    channel_id_from_link,
    resolve_startup_channel,
)
from pystreamguide.services.favorites import FavoritesService
from pystreamguide.services.playback import PlaybackService
from pystreamguide.services.report import build_channel_table
from pystreamguide.services.theme import ThemeService

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pystreamguide", description="Browse and play live channels"
    )
    parser.add_argument(
        "--channel",
        help="channel id or share link (channel=<id>) to play on startup",
    )
    parser.add_argument(
        "--list", action="store_true", help="print the channel list and exit"
    )
    parser.add_argument(
        "--category", default=ALL_CATEGORIES, help="category shown with --list"
    )
    return parser.parse_args(argv)


def deep_link_id(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    return channel_id_from_link(value) if "=" in value else value


def build_catalog(settings: Settings) -> ChannelCatalog:
    seed: List[ChannelEntity] = []
    if settings.seed_file:
        try:
            seed = load_seed_file(settings.seed_file)
        except PlaylistFetchError as e:
            logger.error(f"Ignoring seed file: {e}")

    catalog = ChannelCatalog(
        source=playlist_source_for(
            settings.playlist_source, timeout=settings.http_timeout
        ),
        seed=seed,
        strict=settings.strict_playlist,
    )
    catalog.load()
    return catalog


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    settings = Settings.from_env()
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    catalog = build_catalog(settings)
    storage = PreferenceStorageSQLite(str(settings.preferences_path))
    favorites = FavoritesService(storage=storage, catalog=catalog)

    try:
        if args.list:
            Console().print(
                build_channel_table(
                    catalog.get_by_category(args.category),
                    favorites.get_favorites(),
                    title=f"{catalog.active_count()}/{catalog.count()} channels available",
                )
            )
            return

        playback = PlaybackService(
            stream_player=VLCPlayer(settings.vlc_path), embed_player=BrowserPlayer()
        )
        cli_service = CLIService(
            catalog=catalog,
            favorites=favorites,
            playback=playback,
            theme=ThemeService(storage),
            share_base_url=settings.share_base_url,
        )
        cli_service.run(
            resolve_startup_channel(
                catalog, deep_link_id(args.channel), settings.default_channel_id
            )
        )
    finally:
        storage.close()


if __name__ == "__main__":
    main()
