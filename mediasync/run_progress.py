"""
RunProgress - Tracks and displays sync progress.
"""

import logging
from typing import Optional

from .file_result import FileOutcome, FileResult
from .run_stats import RunStats


class RunProgress:
    """
    Tracks and displays sync progress with optional per-file output.
    """

    def __init__(
        self,
        show_files: bool = False,
        log_interval: int = 100,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize progress tracker.

        Args:
            show_files: If True, print each file as it's processed
            log_interval: Log summary progress every N files (when not show_files)
            logger: Optional logger instance
        """
        self.show_files = show_files
        self.log_interval = log_interval
        self.logger = logger or logging.getLogger(__name__)
        self.last_logged = 0

    def on_file_done(self, result: FileResult, dry_run: bool = False) -> None:
        """Called when a file reaches a terminal state."""
        if not self.show_files:
            return

        path = result.source.relative_path
        if result.outcome is FileOutcome.UPLOADED:
            if dry_run:
                print(f"  [DRY RUN] {path} -> would upload as {result.canonical_name}")
            else:
                size_str = self._format_bytes(result.bytes_uploaded)
                print(f"  [OK] {path} -> {result.canonical_name} (ID: {result.entry_id}, {size_str})")
        elif result.outcome is FileOutcome.SKIPPED:
            print(f"  [SKIP] {path} -> {result.reason}")
        else:
            print(f"  [ERROR] {path} -> {result.error or 'failed'}")

    def on_progress_update(self, stats: RunStats) -> None:
        """
        Called after each file to report overall progress.

        Args:
            stats: Current run statistics
        """
        total_done = stats.completed_count

        if not self.show_files and total_done - self.last_logged >= self.log_interval:
            self.last_logged = total_done
            self.logger.info(
                f"Progress: {stats.uploaded} uploaded, {stats.skipped} skipped, "
                f"{stats.errors} errors ({stats.rate_per_minute:.1f}/min, "
                f"{stats.remaining_count} left)"
            )

    @staticmethod
    def _format_bytes(bytes_val: Optional[int]) -> str:
        """Format bytes as human-readable string."""
        if bytes_val is None:
            return "unknown"
        for unit in ['B', 'KB', 'MB', 'GB']:
            if bytes_val < 1024:
                return f"{bytes_val:.1f} {unit}"
            bytes_val /= 1024
        return f"{bytes_val:.1f} TB"

    def __call__(self, stats: RunStats) -> None:
        """Allow use as callback for stats updates."""
        self.on_progress_update(stats)
