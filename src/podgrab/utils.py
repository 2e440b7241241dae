"""
Small helpers shared across modules.
"""

from typing import Tuple


def split_extension(name: str) -> Tuple[str, str]:
    """Split ``name`` at its last dot into (stem, extension).

    The extension keeps its leading dot. A name without a dot has an
    empty extension, and ``".hidden"`` splits into ``("", ".hidden")``.
    """
    index = name.rfind(".")
    if index < 0:
        return name, ""
    return name[:index], name[index:]


def file_stem(title: str) -> str:
    """Turn an episode title into a file name stem."""
    return title.replace("/", "_").replace("\\", "_")


def format_bytes(num_bytes: int) -> str:
    """Format a byte count as a human readable string."""
    if num_bytes < 1024:
        return f"{num_bytes} B"

    size = float(num_bytes)
    unit = "B"
    for unit in ("KB", "MB", "GB", "TB"):
        size /= 1024
        if size < 1024:
            break
    return f"{size:.1f} {unit}"
