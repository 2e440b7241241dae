"""
Command-line interface for podgrab.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .batch import resolve_podcasts
from .config import Settings
from .errors import PodgrabError
from .factory import create_batch_updater, create_repository, register_podcast
from .models import RESERVED_PODCAST_NAME
from .utils import format_bytes


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="podgrab",
        description="Keep local copies of podcast episodes up to date",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Register a podcast")
    add_parser.add_argument("name", help="Name to manage the podcast under")
    add_parser.add_argument("feed_url", help="URL of the podcast feed")
    add_parser.add_argument(
        "--dir",
        dest="local_store",
        help="Directory for downloaded episodes "
        "(default: $PODGRAB_DATA_DIRECTORY/<name>)",
    )

    subparsers.add_parser("list", help="List registered podcasts")

    update_parser = subparsers.add_parser(
        "update",
        help="Download episodes that are not stored locally yet",
        description="Download all episodes of the given podcasts that are "
        f"not yet in local storage. '{RESERVED_PODCAST_NAME}' updates "
        "every registered podcast.",
    )
    update_parser.add_argument(
        "names",
        nargs="+",
        metavar="podcast",
        help=f"Podcast name, or '{RESERVED_PODCAST_NAME}'",
    )
    update_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Download without asking for confirmation",
    )

    remove_parser = subparsers.add_parser(
        "remove", help="Stop managing a podcast (keeps downloaded files)"
    )
    remove_parser.add_argument("name", help="Podcast name")

    return parser


def configure_logging(verbose: bool) -> None:
    """Configure root logging from the command line and environment."""
    if verbose:
        level = "DEBUG"
    else:
        level = os.getenv("PODGRAB_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(args: argparse.Namespace, settings: Settings) -> None:
    """Execute the selected command."""
    if args.command == "add":
        podcast = register_podcast(
            settings, args.name, args.feed_url, args.local_store
        )
        print(f"Added '{podcast.name}' storing in {podcast.local_store}")

    elif args.command == "list":
        for podcast in create_repository(settings).list_all():
            print(f"{podcast.name}\t{podcast.feed_url}\t{podcast.local_store}")

    elif args.command == "update":
        podcasts = resolve_podcasts(create_repository(settings), args.names)
        if args.yes:
            updater = create_batch_updater(settings, confirm=lambda _: True)
        else:
            updater = create_batch_updater(settings)
        summary = updater.update(podcasts)
        if summary.downloaded:
            print(
                f"Downloaded {summary.downloaded} episodes "
                f"({format_bytes(summary.transferred_bytes)})"
            )

    elif args.command == "remove":
        podcast = create_repository(settings).remove(args.name)
        print(f"Removed '{podcast.name}', files kept in {podcast.local_store}")


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for podgrab."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        run(args, Settings.from_env())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except (PodgrabError, ValueError) as e:
        logging.getLogger(__name__).debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
