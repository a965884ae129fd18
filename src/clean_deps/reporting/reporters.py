"""Builtin reporters."""

import json
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console
from rich.filesize import decimal
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from clean_deps.core.models import CleanReport, CleanResult, CleanStatus, ScanRequest
from clean_deps.utils.filesystem import truncate_path_for_display
from .base import Reporter


class ConsoleReporter(Reporter):
    """Rich console reporter: matches on stdout, summary and errors on stderr."""

    name = "console"

    def __init__(
        self,
        show_summary: bool = True,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        """Initialises the ConsoleReporter.

        Args:
            show_summary (bool, optional): Print the summary panel when done.
            console (Optional[Console], optional): Console for matches. Defaults to stdout.
            error_console (Optional[Console], optional): Console for summary and errors. Defaults to stderr.
        """
        self.show_summary = show_summary
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True)

    def on_match(self, result: CleanResult) -> None:
        """Prints one line per match.

        Args:
            result (CleanResult): The outcome for the match.
        """
        if result.status == CleanStatus.LISTED:
            line = str(result.path)
            if result.size is not None:
                line = f"{decimal(result.size):>9}  {line}"
            self._out(line)

        elif result.status == CleanStatus.DELETED:
            line = f"Removed {result.path}"
            if result.size is not None:
                line = f"{line} ({decimal(result.size)})"
            self._out(line)

        elif result.status == CleanStatus.SKIPPED:
            self.error_console.print(
                f"[dim]Skipped (already gone):[/dim] {escape(str(result.path))}"
            )

        elif result.failed:
            self.error_console.print(
                f"[bold red]Failed to remove {escape(str(result.path))}:[/bold red] "
                f"{escape(str(result.error))}"
            )

    def on_complete(self, report: CleanReport) -> None:
        """Displays the final summary.

        Args:
            report (CleanReport): The overall result of the run.
        """
        if not self.show_summary:
            return

        self._display_summary(report)

        if report.errors:
            self._display_errors(report.errors)

    def _out(self, line: str) -> None:
        # Raw write: paths reach stdout byte-for-byte.
        self.console.file.write(f"{line}\n")
        self.console.file.flush()

    def _display_summary(self, report: CleanReport) -> None:
        """Displays a summary table of the run.

        Args:
            report (CleanReport): The overall result of the run.
        """
        table = Table.grid(padding=(0, 2))
        table.add_column(style="yellow", justify="right")
        table.add_column()

        table.add_row("Root:", truncate_path_for_display(report.root, 50))
        table.add_row("Language:", str(report.language))
        table.add_row("Matches found:", str(report.matches_found))

        if not report.dry_run:
            table.add_row("Removed:", str(report.matches_deleted))

        if report.matches_skipped > 0:
            table.add_row("Skipped:", str(report.matches_skipped))

        if report.matches_failed > 0:
            table.add_row("Failed:", f"[bold red]{report.matches_failed}[/bold red]")

        if report.unreadable_dirs > 0:
            table.add_row(
                "Unreadable directories:", f"[red]{report.unreadable_dirs}[/red]"
            )

        if report.total_bytes is not None:
            label = "Total size:" if report.dry_run else "Space reclaimed:"
            table.add_row(label, decimal(report.total_bytes))

        table.add_row("Duration:", f"{report.duration_seconds:.2f}s")

        title = "Dry Run Complete" if report.dry_run else "Clean-up Complete"
        colour = "yellow" if report.dry_run else "green"
        if not report.success:
            colour = "red"

        panel = Panel.fit(
            table, title=f"[bold {colour}]{title}[/bold {colour}]", border_style=colour
        )

        self.error_console.print(panel)

    def _display_errors(self, errors: List[Tuple[Path, Exception]]) -> None:
        """Display error details.

        Args:
            errors (List[Tuple[Path, Exception]]): Errors encountered during the run.
        """
        self.error_console.print("\n[bold red]Errors encountered:[/bold red]")

        for path, error in errors[:10]:
            self.error_console.print(
                f" [red]•[/red] {escape(truncate_path_for_display(path))}: "
                f"{escape(str(error))}",
                markup=True,
                highlight=False,
            )

        if len(errors) > 10:
            self.error_console.print(
                f"\n[dim]...and {len(errors) - 10} more errors[/dim]"
            )


class SilentReporter(Reporter):
    """Silent reporter - no output."""

    name = "silent"


class JSONReporter(Reporter):
    """JSON reporter - outputs a single document for scripting."""

    name = "json"

    def __init__(self, output_path: Optional[Path] = None) -> None:
        """Initialises the JSONReporter.

        Args:
            output_path (Optional[Path], optional): Path to output JSON file.
                If None, outputs to stdout.
        """
        self.output_path = output_path
        self.console = Console(highlight=False)
        self.matches: List[dict] = []

    def on_start(self, request: ScanRequest) -> None:
        """Resets the collected matches."""
        self.matches = []

    def on_match(self, result: CleanResult) -> None:
        """Collects the outcome of a match."""
        entry = {
            "path": str(result.path),
            "status": result.status.name.lower(),
        }
        if result.size is not None:
            entry["size"] = result.size
        if result.error is not None:
            entry["error"] = str(result.error)
        self.matches.append(entry)

    def on_complete(self, report: CleanReport) -> None:
        """Outputs the JSON summary.

        Args:
            report (CleanReport): The overall result of the run.
        """
        output = {
            "success": report.success,
            "root": str(report.root),
            "language": str(report.language),
            "dry_run": report.dry_run,
            "statistics": {
                "matches_found": report.matches_found,
                "matches_deleted": report.matches_deleted,
                "matches_skipped": report.matches_skipped,
                "matches_failed": report.matches_failed,
                "unreadable_dirs": report.unreadable_dirs,
                "total_bytes": report.total_bytes,
                "duration_seconds": report.duration_seconds,
            },
            "matches": self.matches,
            "errors": [
                {"path": str(path), "error": str(error)}
                for path, error in report.errors
            ],
        }

        json_output = json.dumps(output, indent=4)

        if self.output_path:
            self.output_path.write_text(json_output)
        else:
            self.console.file.write(f"{json_output}\n")
            self.console.file.flush()
