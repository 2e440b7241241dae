"""
Factory functions for wiring up podgrab components.

This module provides simple factory functions that wire up dependencies
clearly.
"""

import logging
import os
from typing import Callable, Optional

from .batch import BatchUpdater
from .config import Settings
from .episode_downloader import EpisodeDownloader
from .feed_cache import FeedCache
from .local_index import LocalIndex
from .manager import PodcastManager
from .models import Podcast
from .prompts import confirm as ask_confirmation
from .repository import PodcastRepository
from .storage import Storage


def create_repository(settings: Settings) -> PodcastRepository:
    """Create the registry repository."""
    return PodcastRepository(Storage(), settings.registry_path)


def create_feed_cache(settings: Settings) -> FeedCache:
    """Create a feed cache using the configured timeout."""
    return FeedCache(Storage(), timeout=settings.request_timeout)


def create_manager(podcast: Podcast, settings: Settings) -> PodcastManager:
    """Create PodcastManager with its dependencies."""
    storage = Storage()
    return PodcastManager(
        podcast,
        FeedCache(storage, timeout=settings.request_timeout),
        LocalIndex(storage),
        EpisodeDownloader(
            storage,
            timeout=settings.request_timeout,
            show_progress=settings.show_progress,
        ),
    )


def create_batch_updater(
    settings: Settings,
    confirm: Callable[[str], bool] = ask_confirmation,
    echo: Callable[[str], None] = print,
) -> BatchUpdater:
    """Create a BatchUpdater building managers from ``settings``."""
    return BatchUpdater(
        lambda podcast: create_manager(podcast, settings),
        confirm=confirm,
        echo=echo,
    )


def register_podcast(
    settings: Settings,
    name: str,
    feed_url: str,
    local_store: Optional[str] = None,
) -> Podcast:
    """Register a new podcast after fetching its feed once.

    The name is checked before any network access. The record is only
    persisted when the feed snapshot was stored successfully.
    """
    logger = logging.getLogger(__name__)

    repository = create_repository(settings)
    repository.check_available(name)

    storage_dir = local_store or os.path.join(settings.data_dir, name)
    podcast = Podcast(name=name, feed_url=feed_url, local_store=storage_dir)

    create_feed_cache(settings).refresh(podcast)
    repository.register(podcast)

    logger.info("Podcast '%s' stored in %s", name, storage_dir)
    return podcast
