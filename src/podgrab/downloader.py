"""
HTTP transfer functions for feed documents and episode media.
"""

import logging
from typing import BinaryIO, Optional

import requests
from tqdm import tqdm

from .errors import FetchError

CHUNK_SIZE = 8192


def open_stream(url: str, timeout: Optional[float] = None) -> requests.Response:
    """Start a streamed GET request and return the open response.

    Raises FetchError on transport errors and non-success status codes.
    The caller owns the response and must close it.
    """
    logger = logging.getLogger(__name__)
    logger.debug("Requesting %s", url)
    try:
        response = requests.get(url, stream=True, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise FetchError(f"cannot fetch {url}: {e}", url=url) from e

    try:
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        response.close()
        raise FetchError(
            f"cannot fetch {url}: {e}",
            url=url,
            status_code=response.status_code,
        ) from e

    return response


def copy_stream(
    response: requests.Response,
    output: BinaryIO,
    label: str,
    show_progress: bool = True,
) -> int:
    """Copy a streamed response body into ``output``.

    Returns the number of bytes written. Transport errors while reading
    the body are raised as FetchError; write errors propagate as OSError.
    """
    logger = logging.getLogger(__name__)

    content_length = int(response.headers.get("content-length", 0) or 0)
    logger.debug("Content length: %d bytes", content_length)

    written = 0
    with tqdm(
        total=content_length or None,
        unit="B",
        unit_scale=True,
        desc=label,
        leave=False,
        disable=not show_progress,
    ) as progress_bar:
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:  # Filter out keep-alive chunks
                    output.write(chunk)
                    written += len(chunk)
                    progress_bar.update(len(chunk))
        except requests.exceptions.RequestException as e:
            raise FetchError(
                f"transfer of {label} interrupted: {e}", label=label
            ) from e

    return written
