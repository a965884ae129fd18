"""Filesystem helpers for measuring and removing directory trees."""

import os
import shutil
from pathlib import Path

from clean_deps.utils.logging import get_logger

logger = get_logger(__name__)


def get_directory_size(directory: Path) -> int:
    """Calculates the total size of all files below a directory.

    Entries that cannot be read or vanish while walking count as zero bytes.
    Symbolic links are not followed.

    Args:
        directory (Path): The directory path.

    Returns:
        int: The total size of files in bytes.
    """
    total_size = 0
    pending = [directory]

    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            pending.append(Path(entry.path))
                        elif entry.is_file(follow_symlinks=False):
                            total_size += entry.stat(follow_symlinks=False).st_size
                    except OSError as e:
                        logger.debug(f"Cannot stat {entry.path}: {e}")
        except OSError as e:
            logger.debug(f"Cannot measure {current}: {e}")

    return total_size


def is_empty_directory(directory: Path) -> bool:
    """Checks if a directory has no entries at all."""
    with os.scandir(directory) as entries:
        return next(entries, None) is None


def remove_tree(directory: Path) -> None:
    """Removes a directory and everything below it.

    Args:
        directory (Path): The directory to remove.

    Raises:
        OSError: If any part of the tree cannot be removed.
    """
    shutil.rmtree(directory)


def truncate_path_for_display(path: Path, max_length: int = 60) -> str:
    """Shortens a path for display, keeping its start and end.

    Args:
        path (Path): The path to display.
        max_length (int, optional): Maximum length of the result. Defaults to 60.

    Returns:
        str: The path, with a "[...]" marker replacing its middle if too long.
    """
    text = str(path)
    if len(text) <= max_length:
        return text

    head = max(max_length // 2 - 5, 0)
    tail = max_length // 2
    return f"{text[:head]}[...]{text[-tail:]}"
