import dataclasses
from typing import Any, Dict, Optional


@dataclasses.dataclass
class ChannelEntity:
    id: str
    name: str
    category: Optional[str] = None
    logo_url: Optional[str] = None
    stream_url: Optional[str] = None
    embed_url: Optional[str] = None

    @property
    def is_playable(self) -> bool:
        return bool(self.stream_url) or bool(self.embed_url)

    @property
    def is_placeholder(self) -> bool:
        return not self.is_playable

    @property
    def playable_url(self) -> Optional[str]:
        """Embed page when configured, otherwise the stream address."""
        return self.embed_url or self.stream_url or None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "logo": self.logo_url,
            "stream": self.stream_url,
            "embed": self.embed_url,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChannelEntity":
        return cls(
            id=data["id"],
            name=data["name"],
            category=data.get("category"),
            logo_url=data.get("logo"),
            stream_url=data.get("stream"),
            embed_url=data.get("embed"),
        )
