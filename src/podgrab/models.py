"""
Data models for podcasts and their episodes.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .utils import file_stem

# Batch commands use this name to mean "every managed podcast".
RESERVED_PODCAST_NAME = "all"


class PodcastFiles:
    """Standard podcast directory file names."""

    FEED_ARCHIVE = "feed.zip"


@dataclass
class Episode:
    """Represents a single podcast episode and its download result.

    Episodes are identified by title. ``transferred_bytes`` stays at zero
    until the episode has been downloaded.
    """

    title: str
    media_url: str
    expected_size: int = 0
    transferred_bytes: int = 0

    @property
    def file_stem(self) -> str:
        """Name of the episode's media file without extension."""
        return file_stem(self.title)


@dataclass(frozen=True)
class Podcast:
    """A managed podcast subscription."""

    name: str
    feed_url: str
    local_store: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Podcast":
        """Create Podcast from its registry record."""
        return cls(
            name=data["name"],
            feed_url=data["feed_url"],
            local_store=data["local_store"],
        )

    def to_json(self) -> dict[str, Any]:
        """Convert podcast to JSON-serializable dictionary."""
        return asdict(self)
