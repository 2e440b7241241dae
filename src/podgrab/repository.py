"""
Domain-specific repository for the podcast registry.

The registry is a JSON file mapping podcast names to their records.
"""

import logging
from typing import Any, Dict, List

from .errors import (
    AlreadyExistsError,
    NotFoundError,
    ReservedNameError,
    StorageError,
)
from .models import RESERVED_PODCAST_NAME, Podcast
from .storage import Storage

RECORD_FIELDS = ("name", "feed_url", "local_store")


class PodcastRepository:
    """Repository for registered podcasts."""

    def __init__(self, storage: Storage, registry_path: str):
        """Initialize with storage instance and registry file path."""
        self.storage = storage
        self.registry_path = registry_path
        self.logger = logging.getLogger(__name__)

    def list_all(self) -> List[Podcast]:
        """Get all registered podcasts in registration order."""
        return [
            Podcast.from_dict(record) for record in self._load().values()
        ]

    def get_by_name(self, name: str) -> Podcast:
        """Get a registered podcast by name."""
        records = self._load()
        if name not in records:
            raise NotFoundError(f"no podcast named '{name}'", name=name)
        return Podcast.from_dict(records[name])

    def exists(self, name: str) -> bool:
        """Check if a podcast name is registered."""
        return name in self._load()

    def check_available(self, name: str) -> None:
        """Ensure ``name`` can be used for a new podcast."""
        if name == RESERVED_PODCAST_NAME:
            raise ReservedNameError(
                f"'{name}' is reserved and cannot name a podcast", name=name
            )
        if self.exists(name):
            raise AlreadyExistsError(
                f"podcast '{name}' is already registered", name=name
            )

    def register(self, podcast: Podcast) -> None:
        """Add a podcast record to the registry."""
        self.check_available(podcast.name)

        records = self._load()
        records[podcast.name] = podcast.to_json()
        self.storage.write_json(self.registry_path, records)
        self.logger.info("Registered podcast '%s'", podcast.name)

    def remove(self, name: str) -> Podcast:
        """Drop a podcast record from the registry and return it.

        Files in the podcast's local store are left alone.
        """
        records = self._load()
        if name not in records:
            raise NotFoundError(f"no podcast named '{name}'", name=name)

        podcast = Podcast.from_dict(records.pop(name))
        self.storage.write_json(self.registry_path, records)
        self.logger.info("Removed podcast '%s'", name)
        return podcast

    def _load(self) -> Dict[str, Dict[str, Any]]:
        """Load registry records keyed by podcast name."""
        data = self.storage.read_json(self.registry_path)
        if data is None:
            return {}

        for name, record in data.items():
            if not isinstance(record, dict) or any(
                not isinstance(record.get(field), str)
                for field in RECORD_FIELDS
            ):
                raise StorageError(
                    f"corrupt registry {self.registry_path}: "
                    f"invalid record for '{name}'",
                    path=self.registry_path,
                    name=name,
                )
        return data
