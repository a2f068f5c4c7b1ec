import logging
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.services.catalog import ChannelCatalog

logger = logging.getLogger(__name__)

CHANNEL_PARAM = "channel"


def channel_id_from_link(link: str) -> Optional[str]:
    """Read the ``channel`` query parameter from a URL or a bare query string."""
    query = urlsplit(link).query if "?" in link or "://" in link else link
    values = parse_qs(query).get(CHANNEL_PARAM)
    return values[0] if values else None


def build_share_link(base_url: str, channel_id: str) -> str:
    scheme, netloc, path, _, _ = urlsplit(base_url)
    query = urlencode({CHANNEL_PARAM: channel_id})
    return urlunsplit((scheme, netloc, path, query, ""))


def _playable(
    catalog: ChannelCatalog, channel_id: Optional[str]
) -> Optional[ChannelEntity]:
    if not channel_id:
        return None
    channel = catalog.get_by_id(channel_id)
    if channel is not None and channel.is_playable:
        return channel
    return None


def resolve_startup_channel(
    catalog: ChannelCatalog,
    deep_link_id: Optional[str],
    default_id: Optional[str],
) -> Optional[ChannelEntity]:
    """Pick the channel to play on startup.

    Order: deep-linked channel, configured default, first playable channel.
    A candidate only counts when it exists and is playable.
    """
    channel = _playable(catalog, deep_link_id)
    if channel is not None:
        logger.info(f"Playing channel from link: {deep_link_id}")
        return channel
    if deep_link_id:
        logger.info(f"Channel not found or has no stream: {deep_link_id}")

    channel = _playable(catalog, default_id)
    if channel is not None:
        logger.info(f"Playing default channel: {default_id}")
        return channel

    active = catalog.get_active()
    if active:
        logger.info(f"Playing first active channel: {active[0].id}")
        return active[0]
    return None
