"""
Computes which feed episodes are missing from local storage.
"""

import logging
from typing import List, Set

from .models import Episode
from .parser import parse_feed


def new_episodes(feed_document: bytes, local_index: Set[str]) -> List[Episode]:
    """Return the feed's episodes that are not stored yet, in feed order.

    The feed is parsed completely before comparing, so a malformed
    document raises ParseError rather than yielding a partial result.
    """
    logger = logging.getLogger(__name__)

    feed_episodes = parse_feed(feed_document)
    missing = [
        episode
        for episode in feed_episodes
        if episode.file_stem not in local_index
    ]

    logger.info(
        "Found %d new episodes out of %d total episodes",
        len(missing),
        len(feed_episodes),
    )
    return missing
