"""
Tests for environment configuration.
"""

import os
import unittest

from podgrab.config import Settings


class TestSettings(unittest.TestCase):
    """Test reading settings from the environment."""

    def test_defaults(self) -> None:
        """Without variables, defaults under the home directory apply."""
        settings = Settings.from_env({})

        self.assertEqual(
            settings.registry_path,
            os.path.expanduser(os.path.join("~", ".podgrab", "podcasts.json")),
        )
        self.assertEqual(
            settings.data_dir, os.path.expanduser(os.path.join("~", "Podcasts"))
        )
        self.assertIsNone(settings.request_timeout)
        self.assertTrue(settings.show_progress)

    def test_overrides(self) -> None:
        """PODGRAB_* variables override the defaults."""
        settings = Settings.from_env(
            {
                "PODGRAB_REGISTRY": "/etc/podgrab.json",
                "PODGRAB_DATA_DIRECTORY": "/srv/podcasts",
                "PODGRAB_TIMEOUT": "2.5",
                "PODGRAB_NO_PROGRESS": "1",
            }
        )

        self.assertEqual(settings.registry_path, "/etc/podgrab.json")
        self.assertEqual(settings.data_dir, "/srv/podcasts")
        self.assertEqual(settings.request_timeout, 2.5)
        self.assertFalse(settings.show_progress)

    def test_invalid_timeout(self) -> None:
        """A non-numeric timeout is rejected."""
        with self.assertRaises(ValueError):
            Settings.from_env({"PODGRAB_TIMEOUT": "soon"})


if __name__ == "__main__":
    unittest.main()
