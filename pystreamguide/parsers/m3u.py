import logging
import re
from typing import List, Optional, Tuple

from pystreamguide.dto.channel import ChannelEntity
from pystreamguide.exceptions import PlaylistParseError

logger = logging.getLogger(__name__)

EXTINF_PREFIX = "#EXTINF:"

# Values may not contain a literal double quote; escaped quotes are unsupported.
_ATTRIBUTE_PATTERNS = {
    "id": re.compile(r'tvg-id="([^"]+)"'),
    "name": re.compile(r'tvg-name="([^"]+)"'),
    "logo_url": re.compile(r'tvg-logo="([^"]+)"'),
    "category": re.compile(r'group-title="([^"]+)"'),
}


def _extract_attribute(line: str, field: str) -> Optional[str]:
    match = _ATTRIBUTE_PATTERNS[field].search(line)
    return match.group(1) if match else None


def _fallback_name(line: str) -> Optional[str]:
    """Display name after the last comma of an EXTINF line."""
    comma_index = line.rfind(",")
    if comma_index == -1:
        return None
    return line[comma_index + 1 :].strip() or None


def _missing_fields(entry: dict) -> List[str]:
    return [field for field in ("id", "name", "stream_url") if not entry.get(field)]


def parse_m3u(content: str, strict: bool = False) -> List[ChannelEntity]:
    """Parse extended-M3U text into channels, in document order.

    Incomplete entries (no tvg-id, no name, or no stream line right after the
    EXTINF line) are dropped. With ``strict`` the first such entry raises
    PlaylistParseError instead.
    """
    lines: List[Tuple[int, str]] = [
        (number, raw.strip())
        for number, raw in enumerate(content.split("\n"), start=1)
        if raw.strip()
    ]
    channels: List[ChannelEntity] = []

    i = 0
    while i < len(lines):
        line_number, line = lines[i]
        i += 1
        if not line.startswith(EXTINF_PREFIX):
            continue

        entry = {
            field: _extract_attribute(line, field) for field in _ATTRIBUTE_PATTERNS
        }
        if not entry["name"]:
            entry["name"] = _fallback_name(line)

        if i < len(lines) and not lines[i][1].startswith("#"):
            entry["stream_url"] = lines[i][1]
            i += 1

        missing = _missing_fields(entry)
        if missing:
            reason = f"entry is missing {', '.join(missing)}"
            if strict:
                raise PlaylistParseError(line_number, reason)
            logger.debug(f"Dropping playlist entry at line {line_number}: {reason}")
            continue

        channels.append(ChannelEntity(**entry))

    return channels
