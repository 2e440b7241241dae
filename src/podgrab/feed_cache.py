"""
Cached feed snapshots.

Each podcast keeps exactly one snapshot of its most recently fetched feed
document: a zip archive in the podcast's local store holding a single
entry named after the podcast.
"""

import logging
import zipfile
import zlib
from typing import Optional

from .downloader import copy_stream, open_stream
from .errors import EmptyArchiveError, StorageError
from .models import Podcast, PodcastFiles
from .storage import Storage


class FeedCache:
    """Fetches feed documents and keeps the latest one per podcast."""

    def __init__(
        self,
        storage: Storage,
        timeout: Optional[float] = None,
        show_progress: bool = False,
    ):
        """Initialize with storage instance and transfer options."""
        self.storage = storage
        self.timeout = timeout
        self.show_progress = show_progress
        self.logger = logging.getLogger(__name__)

    def snapshot_path(self, podcast: Podcast) -> str:
        """Get path to the podcast's feed snapshot archive."""
        return self.storage.join_path(
            podcast.local_store, PodcastFiles.FEED_ARCHIVE
        )

    def refresh(self, podcast: Podcast) -> int:
        """Fetch the podcast feed and replace its snapshot.

        Returns the size of the archived feed document in bytes. The
        previous snapshot is only touched once the response is open.
        """
        self.logger.info(
            "Refreshing feed for '%s' from %s", podcast.name, podcast.feed_url
        )

        with open_stream(podcast.feed_url, self.timeout) as response:
            self.storage.ensure_directory(podcast.local_store)
            path = self.snapshot_path(podcast)
            try:
                with zipfile.ZipFile(
                    path, "w", compression=zipfile.ZIP_DEFLATED
                ) as archive, archive.open(podcast.name, "w") as entry:
                    written = copy_stream(
                        response,
                        entry,
                        f"{podcast.name} feed",
                        self.show_progress,
                    )
            except OSError as e:
                raise StorageError(
                    f"cannot write feed snapshot {path}: {e}",
                    path=path,
                    podcast=podcast.name,
                ) from e

        self.logger.info(
            "Stored feed snapshot for '%s' (%d bytes)", podcast.name, written
        )
        return written

    def read_snapshot(self, podcast: Podcast) -> bytes:
        """Return the feed document stored in the podcast's snapshot."""
        path = self.snapshot_path(podcast)
        try:
            with zipfile.ZipFile(path) as archive:
                members = archive.infolist()
                if not members:
                    raise EmptyArchiveError(
                        f"feed snapshot {path} is empty",
                        path=path,
                        podcast=podcast.name,
                    )
                return archive.read(members[0])
        except (OSError, EOFError, zipfile.BadZipFile, zlib.error) as e:
            raise StorageError(
                f"cannot read feed snapshot {path}: {e}",
                path=path,
                podcast=podcast.name,
            ) from e
