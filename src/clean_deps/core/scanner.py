"""Depth-first discovery of target directories below a root."""

from pathlib import Path
from typing import Callable, Iterator, List, Optional

from .languages import Language, is_marker, targets
from .models import Match
from clean_deps.utils.logging import get_logger

logger = get_logger(__name__)

ErrorCallback = Callable[[Path, OSError], None]


class Scanner:
    """Walks a directory tree and yields the target directories of one language."""

    def __init__(
        self,
        language: Language,
        *,
        strict: bool = False,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        """Initialises the Scanner.

        Args:
            language (Language): The ecosystem whose target directories are matched.
            strict (bool, optional): Only match targets whose parent holds a project manifest. Defaults to False.
            on_error (Optional[ErrorCallback], optional): Called with each directory that cannot be read.
        """
        self.language = language
        self.target_names = targets(language)
        self.strict = strict
        self.on_error = on_error

    def iter_matches(self, root: Path) -> Iterator[Match]:
        """Yields every target directory below root.

        A matched directory is never descended into. Unreadable directories
        are logged, reported to on_error and skipped.

        Args:
            root (Path): The directory to start from. It is never matched itself.

        Yields:
            Iterator[Match]: Matches in depth-first order.
        """
        pending: List[Path] = [root]

        while pending:
            directory = pending.pop()
            entries = self._list_directory(directory)
            if entries is None:
                continue

            has_marker = not self.strict or any(
                is_marker(entry.name, self.language) for entry in entries
            )

            subdirectories = []
            for entry in entries:
                try:
                    if entry.is_symlink():
                        logger.debug(f"Skipping symlink: {entry}")
                        continue

                    if not entry.is_dir():
                        continue
                except OSError as e:
                    self._report_unreadable(entry, e)
                    continue

                if entry.name in self.target_names:
                    if has_marker:
                        logger.debug(f"Matched: {entry}")
                        yield Match(path=entry)
                        continue
                    logger.debug(f"No project manifest beside {entry}, descending")

                subdirectories.append(entry)

            pending.extend(reversed(subdirectories))

    def _list_directory(self, directory: Path) -> Optional[List[Path]]:
        """Lists a directory in name order, or returns None if it cannot be read."""
        try:
            return sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            self._report_unreadable(directory, e)
            return None

    def _report_unreadable(self, path: Path, error: OSError) -> None:
        logger.warning(f"Skipping unreadable directory {path}: {error}")
        if self.on_error:
            self.on_error(path, error)


def find_matches(root: Path, language: Language, strict: bool = False) -> Iterator[Match]:
    """Yields the target directories of a language below root."""
    return Scanner(language, strict=strict).iter_matches(root)
