"""
Download service for podcast episodes.

Episodes are written to ``<local store>/<title><extension>`` so that the
local index recognizes them on the next diff.
"""

import logging
import posixpath
from typing import List, Optional
from urllib.parse import urlsplit

from .downloader import copy_stream, open_stream
from .errors import InvalidURLError, StorageError
from .models import Episode, Podcast
from .storage import Storage
from .utils import split_extension


def media_extension(media_url: str) -> str:
    """Get the file extension from the path of a media URL."""
    path = urlsplit(media_url).path
    _stem, ext = split_extension(posixpath.basename(path))
    return ext


def validate_media_url(media_url: str) -> str:
    """Check that a media URL can be downloaded, return it unchanged."""
    try:
        parts = urlsplit(media_url)
    except ValueError as e:
        raise InvalidURLError(
            f"malformed media URL {media_url!r}: {e}", url=media_url
        ) from e

    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidURLError(
            f"malformed media URL {media_url!r}", url=media_url
        )
    return media_url


class EpisodeDownloader:
    """Service for downloading podcast episodes."""

    def __init__(
        self,
        storage: Storage,
        timeout: Optional[float] = None,
        show_progress: bool = True,
    ):
        """Initialize with storage instance and transfer options."""
        self.storage = storage
        self.timeout = timeout
        self.show_progress = show_progress
        self.logger = logging.getLogger(__name__)

    def episode_path(self, episode: Episode, storage_dir: str) -> str:
        """Get the destination path of an episode's media file."""
        filename = episode.file_stem + media_extension(episode.media_url)
        return self.storage.join_path(storage_dir, filename)

    def fetch(self, episode: Episode, storage_dir: str) -> int:
        """Download a single episode into ``storage_dir``.

        On success ``episode.transferred_bytes`` is set to the number of
        bytes written and returned. The destination file is only created
        after the server has answered successfully.
        """
        media_url = validate_media_url(episode.media_url)
        target_path = self.episode_path(episode, storage_dir)

        self.logger.info("Downloading %s from %s", episode.title, media_url)
        with open_stream(media_url, self.timeout) as response:
            try:
                with open(target_path, "wb") as output_file:
                    written = copy_stream(
                        response,
                        output_file,
                        episode.title[:30],
                        self.show_progress,
                    )
            except OSError as e:
                raise StorageError(
                    f"cannot write {target_path}: {e}",
                    path=target_path,
                    title=episode.title,
                ) from e

        episode.transferred_bytes = written
        self.logger.info(
            "Download complete: %s (%d bytes)", episode.title, written
        )
        return written

    def download_episodes(
        self, podcast: Podcast, episodes: List[Episode]
    ) -> int:
        """Download episodes of a podcast in order, stopping at the first error.

        Returns the total number of bytes transferred. Episodes downloaded
        before a failure stay on disk.
        """
        if not episodes:
            self.logger.info("No episodes to download for '%s'", podcast.name)
            return 0

        self.logger.info(
            "Starting download of %d episodes for '%s'",
            len(episodes),
            podcast.name,
        )

        total_bytes = 0
        for i, episode in enumerate(episodes, 1):
            self.logger.debug(
                "Downloading episode %d/%d: %s", i, len(episodes), episode.title
            )
            total_bytes += self.fetch(episode, podcast.local_store)

        self.logger.info(
            "Downloaded %d episodes for '%s' (%d bytes)",
            len(episodes),
            podcast.name,
            total_bytes,
        )
        return total_bytes
