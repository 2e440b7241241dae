"""
Per-podcast orchestration of feed refresh, diffing and downloads.
"""

import logging
from typing import List

from .diff import new_episodes
from .episode_downloader import EpisodeDownloader
from .feed_cache import FeedCache
from .local_index import LocalIndex
from .models import Episode, Podcast


class PodcastManager:
    """
    Orchestrates feed refresh, new episode detection and episode
    downloads for a single podcast using dependency injection.
    """

    def __init__(
        self,
        podcast: Podcast,
        feed_cache: FeedCache,
        local_index: LocalIndex,
        downloader: EpisodeDownloader,
    ):
        """Initialize with dependencies."""
        self.logger = logging.getLogger(__name__)
        self.podcast = podcast
        self.feed_cache = feed_cache
        self.local_index = local_index
        self.downloader = downloader

    def get_new_episodes(self) -> List[Episode]:
        """Refresh the feed, then get episodes that aren't stored yet."""
        self.feed_cache.refresh(self.podcast)

        stored = self.local_index.read(self.podcast.local_store)
        feed_document = self.feed_cache.read_snapshot(self.podcast)

        episodes = new_episodes(feed_document, stored)
        self.logger.info(
            "'%s' has %d new episodes", self.podcast.name, len(episodes)
        )
        return episodes

    def download_episodes(self, episodes: List[Episode]) -> int:
        """Download episodes into the podcast's local store."""
        return self.downloader.download_episodes(self.podcast, episodes)
