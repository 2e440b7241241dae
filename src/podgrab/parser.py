"""
RSS feed parsing into Episode records using feedparser.
"""

import io
import logging
from typing import List

import feedparser

from .errors import ParseError
from .models import Episode


def _parse_size(length: str) -> int:
    """Parse an enclosure length, 0 when missing or not a number."""
    try:
        return max(int(length), 0)
    except (TypeError, ValueError):
        return 0


def _parse_entry(position: int, entry: "feedparser.FeedParserDict") -> Episode:
    """Build an Episode from a single feed entry."""
    title = (entry.get("title") or "").strip()
    if not title:
        raise ParseError(
            f"feed item {position} has no title", position=position
        )

    enclosures = entry.get("enclosures") or []
    media_url = enclosures[0].get("href", "") if enclosures else ""
    if not media_url:
        raise ParseError(
            f"feed item {title!r} has no enclosure URL",
            position=position,
            title=title,
        )

    return Episode(
        title=title,
        media_url=media_url,
        expected_size=_parse_size(enclosures[0].get("length", "")),
    )


def parse_feed(content: bytes) -> List[Episode]:
    """Parse a feed document into its episodes, in feed order.

    The whole document must parse: a malformed document or a single
    unusable item raises ParseError instead of returning a partial list.
    """
    logger = logging.getLogger(__name__)

    parsed = feedparser.parse(io.BytesIO(content))
    if parsed.bozo and not isinstance(
        parsed.bozo_exception, feedparser.CharacterEncodingOverride
    ):
        raise ParseError(
            f"malformed feed document: {parsed.bozo_exception}"
        )
    if not parsed.version:
        raise ParseError("document is not a recognized feed format")

    episodes = [
        _parse_entry(position, entry)
        for position, entry in enumerate(parsed.entries, 1)
    ]
    logger.debug(
        "Parsed %d episodes from %s feed", len(episodes), parsed.version
    )
    return episodes
