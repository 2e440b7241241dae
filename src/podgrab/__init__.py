"""
podgrab - Keeps local copies of podcast episodes up to date.

Fetches each podcast's feed, compares it against the episodes already in
local storage and downloads the missing ones after a single confirmation.
"""

from .batch import BatchUpdater, UpdateSummary, resolve_podcasts
from .config import Settings
from .factory import create_batch_updater, create_manager, register_podcast
from .manager import PodcastManager
from .models import Episode, Podcast

__all__ = [
    "BatchUpdater",
    "Episode",
    "Podcast",
    "PodcastManager",
    "Settings",
    "UpdateSummary",
    "create_batch_updater",
    "create_manager",
    "register_podcast",
    "resolve_podcasts",
]
