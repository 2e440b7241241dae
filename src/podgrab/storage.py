"""
Pure storage layer for file operations.

This module provides low-level file operations without any business logic.
Failures are raised as StorageError.
"""

import json
import os
from typing import Any, Dict, List, Optional

from .errors import StorageError


class Storage:
    """Pure file operations without business logic."""

    def ensure_directory(self, path: str) -> None:
        """Create directory, including parents, if it doesn't exist."""
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"cannot create directory {path}: {e}", path=path
            ) from e

    def list_entries(self, path: str) -> List[str]:
        """List the names of all entries in a directory."""
        try:
            return os.listdir(path)
        except OSError as e:
            raise StorageError(
                f"cannot list directory {path}: {e}", path=path
            ) from e

    def read_json(self, path: str) -> Optional[Dict[str, Any]]:
        """Read a JSON object from file, return None if file doesn't exist."""
        if not os.path.exists(path):
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"cannot read {path}: {e}", path=path) from e

        if not isinstance(data, dict):
            raise StorageError(
                f"cannot read {path}: expected a JSON object", path=path
            )
        return data

    def write_json(self, path: str, data: Dict[str, Any]) -> None:
        """Write data to JSON file."""
        directory = os.path.dirname(path)
        if directory:
            self.ensure_directory(directory)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError) as e:
            raise StorageError(f"cannot write {path}: {e}", path=path) from e

    def join_path(self, *parts: str) -> str:
        """Join path parts."""
        return os.path.join(*parts)
