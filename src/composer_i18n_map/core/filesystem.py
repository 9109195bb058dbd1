"""File helpers for generated artifacts."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_if_modified(path: Path, content: str) -> bool:
    """
    Write content to path only when it differs from what is already there.

    The comparison is byte-for-byte on the UTF-8 encoding, so an identical
    file keeps its modification time. Missing parent directories are
    created.

    Args:
        path: Destination file
        content: Complete new file content

    Returns:
        True if the file was written, False if it was already up to date

    Raises:
        OSError: If the file cannot be read or written
    """
    data = content.encode("utf-8")

    try:
        current = path.read_bytes()
    except FileNotFoundError:
        current = None

    if current == data:
        logger.debug(f"{path} is up to date")
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return True


def unlink_if_exists(path: Path) -> bool:
    """
    Delete a file, ignoring a missing one.

    Returns:
        True if a file was deleted, False if there was nothing to delete

    Raises:
        OSError: For any failure other than the file being absent
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False

    logger.debug(f"Deleted {path}")
    return True
