import dataclasses
import os
from pathlib import Path
from typing import Optional

TRUE_VALUES = ("1", "true", "yes", "on")


@dataclasses.dataclass
class Settings:
    playlist_source: str = "playlist.m3u8"
    seed_file: Optional[str] = None
    default_channel_id: Optional[str] = "dunya-news"
    data_dir: Path = Path.home() / ".pystreamguide"
    vlc_path: str = "/usr/bin/cvlc"
    share_base_url: str = "https://streamguide.local/"
    http_timeout: float = 30
    strict_playlist: bool = False

    @property
    def preferences_path(self) -> Path:
        return self.data_dir / "preferences.db"

    @classmethod
    def from_env(cls) -> "Settings":
        timeout = os.getenv("HTTP_TIMEOUT", str(cls.http_timeout))
        try:
            http_timeout = float(timeout)
        except ValueError:
            raise ValueError(f"HTTP_TIMEOUT must be a number of seconds, got {timeout!r}")
        if http_timeout <= 0:
            raise ValueError("HTTP_TIMEOUT must be positive")

        data_dir = os.getenv("DATA_DIR")
        return cls(
            playlist_source=os.getenv("PLAYLIST_SOURCE", cls.playlist_source),
            seed_file=os.getenv("SEED_FILE") or None,
            default_channel_id=os.getenv("DEFAULT_CHANNEL_ID", cls.default_channel_id)
            or None,
            data_dir=Path(data_dir).expanduser() if data_dir else cls.data_dir,
            vlc_path=os.getenv("VLC_PATH", cls.vlc_path),
            share_base_url=os.getenv("SHARE_BASE_URL", cls.share_base_url),
            http_timeout=http_timeout,
            strict_playlist=os.getenv("STRICT_PLAYLIST", "false").lower()
            in TRUE_VALUES,
        )
