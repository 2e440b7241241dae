"""
Index of the episodes already present in a podcast's local store.
"""

import logging
from typing import Set

from .models import PodcastFiles
from .storage import Storage
from .utils import split_extension


class LocalIndex:
    """Derives stored episode names from a directory listing."""

    def __init__(self, storage: Storage):
        """Initialize with storage instance."""
        self.storage = storage
        self.logger = logging.getLogger(__name__)

    def read(self, storage_dir: str) -> Set[str]:
        """Return the extension-stripped names of all stored episodes.

        The feed snapshot is skipped. Subdirectories are not told apart
        from files and are indexed by name like any other entry.
        """
        stored: Set[str] = set()
        for name in self.storage.list_entries(storage_dir):
            if name == PodcastFiles.FEED_ARCHIVE:
                continue
            stem, _ext = split_extension(name)
            stored.add(stem)

        self.logger.debug(
            "Found %d stored episodes in %s", len(stored), storage_dir
        )
        return stored
