"""
Runtime configuration read from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_REGISTRY_PATH = os.path.join("~", ".podgrab", "podcasts.json")
DEFAULT_DATA_DIRECTORY = os.path.join("~", "Podcasts")


@dataclass
class Settings:
    """podgrab settings.

    Attributes:
        registry_path: JSON file holding the registered podcasts
        data_dir: Parent directory of new podcasts' local stores
        request_timeout: HTTP timeout in seconds, None for no timeout
        show_progress: Whether to show download progress bars
    """

    registry_path: str
    data_dir: str
    request_timeout: Optional[float] = None
    show_progress: bool = True

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "Settings":
        """Build settings from PODGRAB_* environment variables."""
        env = os.environ if environ is None else environ

        timeout = env.get("PODGRAB_TIMEOUT")
        try:
            request_timeout = float(timeout) if timeout else None
        except ValueError as e:
            raise ValueError(
                f"PODGRAB_TIMEOUT must be a number of seconds, got {timeout!r}"
            ) from e

        return cls(
            registry_path=os.path.expanduser(
                env.get("PODGRAB_REGISTRY", DEFAULT_REGISTRY_PATH)
            ),
            data_dir=os.path.expanduser(
                env.get("PODGRAB_DATA_DIRECTORY", DEFAULT_DATA_DIRECTORY)
            ),
            request_timeout=request_timeout,
            show_progress=not env.get("PODGRAB_NO_PROGRESS"),
        )
