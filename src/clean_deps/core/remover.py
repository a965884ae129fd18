"""Handles removing matched directories with per-path error reporting."""

from typing import Optional

from .models import CleanResult, CleanStatus, Match
from clean_deps.utils.filesystem import (
    get_directory_size,
    is_empty_directory,
    remove_tree,
)
from clean_deps.utils.logging import get_logger

logger = get_logger(__name__)


class DirectoryRemover:
    """Lists or removes matched directories, never raising for filesystem errors."""

    def __init__(self, compute_sizes: bool = False) -> None:
        """Initialises the DirectoryRemover.

        Args:
            compute_sizes (bool, optional): Measure each directory before acting. Defaults to False.
        """
        self.compute_sizes = compute_sizes

    def remove(
        self, match: Match, dry_run: bool = True, size: Optional[int] = None
    ) -> CleanResult:
        """Removes a matched directory and all of its contents.

        Args:
            match (Match): The directory to remove.
            dry_run (bool, optional): If True, only reports the match. Defaults to True.
            size (Optional[int], optional): Size already measured for the match.

        Returns:
            CleanResult: The result of the operation.
        """
        path = match.path
        if size is None:
            size = self.measure(match)

        if dry_run:
            return CleanResult(status=CleanStatus.LISTED, path=path, size=size)

        try:
            if not path.exists():
                logger.info(f"Already gone: {path}")
                return CleanResult(status=CleanStatus.SKIPPED, path=path, size=size)

            empty = is_empty_directory(path)
            remove_tree(path)

            if empty:
                logger.info(f"Removed empty: {path}")
            else:
                logger.debug(f"Removed {path}")
            return CleanResult(status=CleanStatus.DELETED, path=path, size=size)

        except PermissionError as e:
            logger.error(f"Permission denied removing {path}: {e}")
            return CleanResult(
                status=CleanStatus.FAILED, path=path, error=e, size=size
            )

        except OSError as e:
            logger.error(f"Error removing {path}: {e}")
            return CleanResult(
                status=CleanStatus.FAILED, path=path, error=e, size=size
            )

    def measure(self, match: Match) -> Optional[int]:
        """Returns the size of a match in bytes, or None if sizes are disabled."""
        if not self.compute_sizes:
            return None
        return get_directory_size(match.path)
