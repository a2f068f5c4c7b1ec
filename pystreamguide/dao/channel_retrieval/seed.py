import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.exceptions import PlaylistFetchError

logger = logging.getLogger(__name__)

OPTIONAL_KEYS = ("category", "logo", "stream", "embed")


def _text(item: Dict[str, Any], key: str) -> Optional[str]:
    value = item.get(key)
    return value if isinstance(value, str) and value else None


def load_seed_file(path: Union[str, Path]) -> List[ChannelEntity]:
    """Read the static channel list used when the playlist cannot be loaded.

    The file holds a JSON array of objects with ``id``, ``name``,
    ``category``, ``logo``, ``stream`` and ``embed`` keys. Objects without an
    id or a name (non-empty strings) are skipped; optional values that are
    not strings are treated as absent.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise PlaylistFetchError(f"Failed to read seed file {path}: {e}") from e

    if not isinstance(data, list):
        raise PlaylistFetchError(f"Seed file {path} must contain a JSON array")

    channels: List[ChannelEntity] = []
    for item in data:
        if (
            not isinstance(item, dict)
            or not _text(item, "id")
            or not _text(item, "name")
        ):
            logger.debug(f"Skipping seed entry without id or name: {item!r}")
            continue
        cleaned = {key: _text(item, key) for key in ("id", "name") + OPTIONAL_KEYS}
        channels.append(ChannelEntity.from_dict(cleaned))

    logger.info(f"Loaded {len(channels)} seed channels from {path}")
    return channels
