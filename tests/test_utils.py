"""
Tests for the shared helpers.
"""

import unittest

from podgrab.utils import file_stem, format_bytes, split_extension


class TestSplitExtension(unittest.TestCase):
    """Test extension splitting used for file naming and indexing."""

    def test_splits_at_last_dot(self) -> None:
        """Only the final extension is removed."""
        self.assertEqual(split_extension("Ep1.mp3"), ("Ep1", ".mp3"))
        self.assertEqual(
            split_extension("archive.tar.gz"), ("archive.tar", ".gz")
        )

    def test_name_without_dot(self) -> None:
        """A name without a dot has no extension."""
        self.assertEqual(split_extension("Episode 5"), ("Episode 5", ""))

    def test_hidden_file(self) -> None:
        """A leading dot is treated as the extension."""
        self.assertEqual(split_extension(".hidden"), ("", ".hidden"))


class TestFileStem(unittest.TestCase):
    """Test title to file name conversion."""

    def test_plain_title_unchanged(self) -> None:
        """Titles without path separators are used as-is."""
        self.assertEqual(file_stem("Ep. 5: Hello"), "Ep. 5: Hello")

    def test_path_separators_replaced(self) -> None:
        """Slashes cannot end up in a file name."""
        self.assertEqual(file_stem("AC/DC \\ live"), "AC_DC _ live")


class TestFormatBytes(unittest.TestCase):
    """Test human readable byte counts."""

    def test_bytes(self) -> None:
        """Small sizes are shown in bytes."""
        self.assertEqual(format_bytes(0), "0 B")
        self.assertEqual(format_bytes(1023), "1023 B")

    def test_larger_units(self) -> None:
        """Larger sizes are scaled with one decimal."""
        self.assertEqual(format_bytes(1536), "1.5 KB")
        self.assertEqual(format_bytes(5 * 1024 * 1024), "5.0 MB")
        self.assertEqual(format_bytes(3 * 1024 ** 3), "3.0 GB")
        self.assertEqual(format_bytes(2 * 1024 ** 4), "2.0 TB")


if __name__ == "__main__":
    unittest.main()
