"""Runs a scan and lists or removes every match it yields."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Optional

from .languages import Language
from .models import CleanReport, CleanResult, CleanStats, Match, ScanRequest
from .remover import DirectoryRemover
from .scanner import Scanner
from .validators import PathValidator
from clean_deps.reporting.base import Reporter
from clean_deps.reporting.reporters import SilentReporter
from clean_deps.utils.logging import OperationLogger, get_logger

logger = get_logger(__name__)


class DepsCleaner:
    """Lists or deletes the dependency directories of one language below a root."""

    def __init__(
        self,
        request: ScanRequest,
        *,
        reporter: Optional[Reporter] = None,
        remover: Optional[DirectoryRemover] = None,
        validate_paths: bool = True,
    ) -> None:
        """Initialises the DepsCleaner with the scan request and collaborators.

        Args:
            request (ScanRequest): What to scan and whether to delete.
            reporter (Optional[Reporter], optional): Receives progress and the final report. Defaults to silent.
            remover (Optional[DirectoryRemover], optional): Handles each match. Defaults to one honouring the request options.
            validate_paths (bool, optional): Whether to validate the root before scanning. Defaults to True.

        Raises:
            FileNotFoundError: If the root does not exist.
            NotADirectoryError: If the root is not a directory.
            ValueError: If deleting from a protected system directory.
        """
        if validate_paths:
            if request.delete:
                root = PathValidator.validate_delete_root(request.root)
            else:
                root = PathValidator.validate_root(request.root)
            if root != request.root:
                request = ScanRequest(
                    root=root,
                    language=request.language,
                    delete=request.delete,
                    options=request.options,
                )
            logger.debug(f"Validated directory: {root}")

        self.request = request
        self.reporter = reporter or SilentReporter()
        self.remover = remover or DirectoryRemover(
            compute_sizes=request.options.compute_sizes
        )
        self._stats = CleanStats()

    @property
    def root(self) -> Path:
        return self.request.root

    def run(self) -> CleanReport:
        """Scans the root and lists or removes every match.

        Returns:
            CleanReport: The overall result of the run.

        Raises:
            KeyboardInterrupt: If the run is interrupted by the user.
        """
        self._stats = CleanStats()
        mode = "dry run" if self.request.dry_run else "delete"
        scanner = Scanner(
            self.request.language,
            strict=self.request.options.strict,
            on_error=self._record_unreadable,
        )

        self.reporter.on_start(self.request)

        with OperationLogger(
            f"{self.request.language} scan of {self.root} ({mode})", logger
        ) as operation:
            try:
                matches = scanner.iter_matches(self.root)

                if self.request.options.compute_sizes:
                    results = self._handle_sorted_by_size(matches)
                else:
                    results = (self._handle(match) for match in matches)

                for result in results:
                    self._stats.record_result(result)
                    self.reporter.on_match(result)

            except KeyboardInterrupt:
                logger.warning("Clean-up interrupted by user.")
                raise

            report = CleanReport.from_stats(
                self.request, self._stats, operation.elapsed
            )

        logger.info(
            f"Clean-up complete: {report.matches_found} matches, "
            f"{report.matches_deleted} removed, {report.matches_failed} failed, "
            f"{report.unreadable_dirs} unreadable directories"
        )
        self.reporter.on_complete(report)
        return report

    def _handle(self, match: Match, size: Optional[int] = None) -> CleanResult:
        return self.remover.remove(match, dry_run=self.request.dry_run, size=size)

    def _handle_sorted_by_size(
        self, matches: Iterable[Match]
    ) -> Iterator[CleanResult]:
        """Measures every match first, then handles them largest first."""
        sized = [(self.remover.measure(match) or 0, match) for match in matches]
        sized.sort(key=lambda item: item[0], reverse=True)
        return (self._handle(match, size) for size, match in sized)

    def _record_unreadable(self, path: Path, error: OSError) -> None:
        self._stats.record_unreadable(path, error)
        self.reporter.on_error(path, error)


def clean(
    root: Path,
    language: Language,
    *,
    delete: bool = False,
    reporter: Optional[Reporter] = None,
) -> CleanReport:
    """Convenience wrapper running a single clean-up with default options."""
    request = ScanRequest(root=Path(root), language=language, delete=delete)
    return DepsCleaner(request, reporter=reporter).run()
