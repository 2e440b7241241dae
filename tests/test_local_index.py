"""
Tests for the local episode index.
"""

import os

from podgrab.errors import StorageError
from podgrab.local_index import LocalIndex
from podgrab.storage import Storage

from tests.base import PodcastTestBase


class TestLocalIndex(PodcastTestBase):
    """Test reading stored episode names from a directory."""

    def setUp(self) -> None:
        """Set up test fixtures."""
        super().setUp()
        self.index = LocalIndex(Storage())
        self.store = os.path.join(self.test_dir, "store")
        os.makedirs(self.store)

    def test_empty_directory(self) -> None:
        """An empty store has no episodes."""
        self.assertEqual(self.index.read(self.store), set())

    def test_strips_extensions(self) -> None:
        """Stored names are reported without their final extension."""
        self.write_stored_file(self.store, "Ep1.mp3")
        self.write_stored_file(self.store, "Ep. 2.m4a")
        self.write_stored_file(self.store, "Ep3")

        self.assertEqual(
            self.index.read(self.store), {"Ep1", "Ep. 2", "Ep3"}
        )

    def test_skips_feed_snapshot(self) -> None:
        """The feed snapshot is not an episode."""
        self.write_stored_file(self.store, "feed.zip")
        self.write_stored_file(self.store, "Ep1.mp3")

        self.assertEqual(self.index.read(self.store), {"Ep1"})

    def test_other_zip_files_are_indexed(self) -> None:
        """Only the exact snapshot name is skipped."""
        self.write_stored_file(self.store, "feed.zip.mp3")

        self.assertEqual(self.index.read(self.store), {"feed.zip"})

    def test_subdirectories_indexed_by_name(self) -> None:
        """Directories are indexed like files."""
        os.makedirs(os.path.join(self.store, "Extras.d"))

        self.assertEqual(self.index.read(self.store), {"Extras"})

    def test_missing_directory(self) -> None:
        """A store that vanished cannot be listed."""
        missing = os.path.join(self.test_dir, "gone")

        with self.assertRaises(StorageError) as ctx:
            self.index.read(missing)

        self.assertEqual(ctx.exception.context["path"], missing)

    def test_path_is_a_file(self) -> None:
        """A file in place of the store directory is an error."""
        path = self.write_stored_file(self.test_dir, "not_a_dir")

        with self.assertRaises(StorageError):
            self.index.read(path)
