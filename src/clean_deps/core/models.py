"""Models for scan requests, matches and clean-up results."""

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import List, Optional, Tuple

from .languages import Language


class CleanStatus(Enum):
    """Enumeration for the outcome of handling a match."""

    LISTED = auto()
    DELETED = auto()
    SKIPPED = auto()
    FAILED = auto()


@dataclass
class CleanOptions:
    """Configuration options for a clean-up run."""

    strict: bool = False  # only match beside a project manifest
    compute_sizes: bool = False  # measure each match before acting


@dataclass(frozen=True)
class ScanRequest:
    """Data class to hold the inputs of one scan."""

    root: Path
    language: Language
    delete: bool = False
    options: CleanOptions = field(default_factory=CleanOptions)

    @property
    def dry_run(self) -> bool:
        """Indicates if matches are only listed."""
        return not self.delete


@dataclass(frozen=True)
class Match:
    """A target directory found during traversal."""

    path: Path


@dataclass(frozen=True)
class CleanResult:
    """Data class to hold the result of handling a single match."""

    status: CleanStatus
    path: Path
    error: Optional[Exception] = None
    size: Optional[int] = None

    @property
    def success(self) -> bool:
        """Indicates if the match was listed or removed."""
        return self.status in (CleanStatus.LISTED, CleanStatus.DELETED)

    @property
    def failed(self) -> bool:
        """Indicates if removing the match failed."""
        return self.status == CleanStatus.FAILED


@dataclass
class CleanStats:
    """Data class to track statistics of a clean-up run."""

    matches_found: int = 0
    matches_listed: int = 0
    matches_deleted: int = 0
    matches_skipped: int = 0
    matches_failed: int = 0
    unreadable_dirs: int = 0
    total_bytes: Optional[int] = None
    errors: List[Tuple[Path, Exception]] = field(default_factory=list)

    def record_result(self, result: CleanResult) -> None:
        """Updates statistics based on the clean result."""
        self.matches_found += 1

        if result.size is not None:
            self.total_bytes = (self.total_bytes or 0) + result.size

        if result.status == CleanStatus.LISTED:
            self.matches_listed += 1

        elif result.status == CleanStatus.DELETED:
            self.matches_deleted += 1

        elif result.status == CleanStatus.SKIPPED:
            self.matches_skipped += 1

        elif result.failed:
            self.matches_failed += 1
            if result.error:
                self.errors.append((result.path, result.error))

    def record_unreadable(self, path: Path, error: Exception) -> None:
        """Counts a directory the scanner could not read."""
        self.unreadable_dirs += 1
        self.errors.append((path, error))


@dataclass(frozen=True)
class CleanReport:
    """Data class to encapsulate the overall result of a clean-up run."""

    root: Path
    language: Language
    matches_found: int
    matches_listed: int
    matches_deleted: int
    matches_skipped: int
    matches_failed: int
    unreadable_dirs: int
    total_bytes: Optional[int]
    errors: List[Tuple[Path, Exception]]
    duration_seconds: float
    dry_run: bool = True

    @classmethod
    def from_stats(
        cls, request: ScanRequest, stats: CleanStats, duration_seconds: float
    ) -> "CleanReport":
        """Creates a CleanReport from CleanStats."""
        return cls(
            root=request.root,
            language=request.language,
            matches_found=stats.matches_found,
            matches_listed=stats.matches_listed,
            matches_deleted=stats.matches_deleted,
            matches_skipped=stats.matches_skipped,
            matches_failed=stats.matches_failed,
            unreadable_dirs=stats.unreadable_dirs,
            total_bytes=stats.total_bytes,
            errors=stats.errors.copy(),
            duration_seconds=duration_seconds,
            dry_run=request.dry_run,
        )

    @property
    def success(self) -> bool:
        """Indicates if every match was handled without error."""
        return self.matches_failed == 0
