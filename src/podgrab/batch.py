"""
Batch update of one or many podcasts under a single approval.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Set, Tuple

from .manager import PodcastManager
from .models import RESERVED_PODCAST_NAME, Episode, Podcast
from .repository import PodcastRepository
from .utils import format_bytes

NOTHING_TO_DO = "No new episodes. Nothing to do."


@dataclass
class UpdateSummary:
    """Result of a batch update."""

    new_episodes: int = 0
    downloaded: int = 0
    transferred_bytes: int = 0
    approved: bool = False


def resolve_podcasts(
    repository: PodcastRepository, names: Sequence[str]
) -> List[Podcast]:
    """Resolve command line names to podcasts.

    The reserved name selects every registered podcast; names before it
    must still be registered. Repeated names are only resolved once.
    """
    podcasts: List[Podcast] = []
    seen: Set[str] = set()
    for name in names:
        if name == RESERVED_PODCAST_NAME:
            return repository.list_all()
        if name in seen:
            continue
        seen.add(name)
        podcasts.append(repository.get_by_name(name))
    return podcasts


class BatchUpdater:
    """Finds and downloads new episodes across several podcasts."""

    def __init__(
        self,
        manager_factory: Callable[[Podcast], PodcastManager],
        confirm: Callable[[str], bool],
        echo: Callable[[str], None] = print,
    ):
        """Initialize with collaborators.

        Args:
            manager_factory: Builds the PodcastManager for a podcast
            confirm: Asks the user a yes/no question
            echo: Writes a line of the human readable report
        """
        self.manager_factory = manager_factory
        self.confirm = confirm
        self.echo = echo
        self.logger = logging.getLogger(__name__)

    def update(self, podcasts: List[Podcast]) -> UpdateSummary:
        """Find new episodes of all podcasts and download them on approval.

        Any error aborts the whole batch. Episodes downloaded before the
        error stay on disk.
        """
        pending: List[Tuple[PodcastManager, List[Episode]]] = []
        for podcast in podcasts:
            manager = self.manager_factory(podcast)
            pending.append((manager, manager.get_new_episodes()))

        summary = UpdateSummary(
            new_episodes=sum(len(episodes) for _, episodes in pending)
        )
        if summary.new_episodes == 0:
            self.echo(NOTHING_TO_DO)
            return summary

        self._report(pending)

        total_size = sum(
            episode.expected_size
            for _, episodes in pending
            for episode in episodes
        )
        message = (
            f"\nDownload {summary.new_episodes} episodes "
            f"for {format_bytes(total_size)}?"
        )
        summary.approved = self.confirm(message)
        if not summary.approved:
            self.logger.info(
                "Download of %d episodes declined", summary.new_episodes
            )
            return summary

        for manager, episodes in pending:
            if not episodes:
                continue
            summary.transferred_bytes += manager.download_episodes(episodes)
            summary.downloaded += len(episodes)

        self.logger.info(
            "Batch complete: %d episodes, %d bytes",
            summary.downloaded,
            summary.transferred_bytes,
        )
        return summary

    def _report(
        self, pending: List[Tuple[PodcastManager, List[Episode]]]
    ) -> None:
        """Print the new episode titles of every podcast."""
        for manager, episodes in pending:
            if not episodes:
                continue
            self.echo(f"{manager.podcast.name}:\n------------------")
            for episode in episodes:
                self.echo(episode.title)
