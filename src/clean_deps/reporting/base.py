"""Base class for reporting the progress and outcome of a clean-up run."""

from abc import ABC
from pathlib import Path

from clean_deps.core.models import CleanReport, CleanResult, ScanRequest


class Reporter(ABC):
    """Abstract base class for reporters. Every hook defaults to doing nothing."""

    name: str = "reporter"

    def on_start(self, request: ScanRequest) -> None:
        """Called before the scan starts.

        Args:
            request (ScanRequest): The scan about to run.
        """
        pass

    def on_match(self, result: CleanResult) -> None:
        """Called once a match has been listed, removed or failed.

        Args:
            result (CleanResult): The outcome for the match.
        """
        pass

    def on_error(self, path: Path, error: Exception) -> None:
        """Called when a directory cannot be read during the scan.

        Args:
            path (Path): The unreadable directory.
            error (Exception): The exception that occurred.
        """
        pass

    def on_complete(self, report: CleanReport) -> None:
        """Called when the run is complete.

        Args:
            report (CleanReport): The overall result of the run.
        """
        pass
