"""
Builders shared by the test suite.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
from unittest.mock import MagicMock
from xml.sax.saxutils import escape, quoteattr

import requests

from podgrab.models import Episode


def create_test_episode(
    title: str = "Test Episode",
    media_url: str = "http://test.com/test.mp3",
    expected_size: int = 1000,
) -> Episode:
    """Create an Episode with test defaults."""
    return Episode(
        title=title, media_url=media_url, expected_size=expected_size
    )


def create_rss_content(
    items: Sequence[Tuple[str, str, int]], title: str = "Test Podcast"
) -> bytes:
    """Build an RSS 2.0 document from (title, media_url, size) items."""
    rendered = "".join(
        "<item>"
        f"<title>{escape(item_title)}</title>"
        f"<enclosure url={quoteattr(url)} length=\"{size}\" "
        "type=\"audio/mpeg\"/>"
        "</item>"
        for item_title, url, size in items
    )
    document = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<rss version="2.0"><channel>'
        f"<title>{escape(title)}</title>"
        "<link>http://test.com</link>"
        "<description>Test feed</description>"
        f"{rendered}"
        "</channel></rss>"
    )
    return document.encode("utf-8")


def feed_items(titles: Iterable[str]) -> List[Tuple[str, str, int]]:
    """Build RSS items with media URLs derived from the titles."""
    return [
        (title, f"http://test.com/media/{title.replace(' ', '_')}.mp3", 1000)
        for title in titles
    ]


def create_mock_response(
    content: bytes = b"",
    status_code: int = 200,
    chunk_size: int = 4,
    error: Optional[Exception] = None,
) -> MagicMock:
    """Create a streamed requests response mock.

    With ``error`` set, iterating the body yields the first chunk and
    then raises it.
    """
    response = MagicMock()
    response.status_code = status_code
    response.headers = {"content-length": str(len(content))}
    chunks = [
        content[i:i + chunk_size] for i in range(0, len(content), chunk_size)
    ]

    if error is None:
        response.iter_content.return_value = chunks
    else:
        def broken_body(chunk_size: int = 1):
            yield chunks[0] if chunks else b""
            raise error

        response.iter_content.side_effect = broken_body

    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error"
        )
    else:
        response.raise_for_status.return_value = None

    response.__enter__.return_value = response
    response.__exit__.return_value = None
    return response
