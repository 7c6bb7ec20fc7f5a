"""
Reporter - Human-readable summary of a sync run.
"""

import logging
import sys
from typing import Optional, TextIO

from .run_stats import RunStats
from .sync_config import SyncConfig


class Reporter:
    """
    Prints run configuration and end-of-run summaries.
    """

    def __init__(
        self,
        output: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize reporter.

        Args:
            output: Output stream (default: stdout)
            logger: Optional logger instance
        """
        self.output = output or sys.stdout
        self.logger = logger or logging.getLogger(__name__)

    def _print(self, text: str = "") -> None:
        """Print to output stream."""
        print(text, file=self.output)

    def _format_bytes(self, bytes_val: float) -> str:
        """Format bytes as human-readable string."""
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if bytes_val < 1024:
                return f"{bytes_val:.1f} {unit}"
            bytes_val /= 1024
        return f"{bytes_val:.1f} PB"

    def _format_duration(self, seconds: float) -> str:
        """Format duration as human-readable string."""
        if seconds < 60:
            return f"{seconds:.1f} seconds"
        elif seconds < 3600:
            return f"{seconds / 60:.1f} minutes"
        else:
            return f"{seconds / 3600:.1f} hours"

    def report_config(self, config: SyncConfig) -> None:
        """Print the effective configuration."""
        self._print(f"  Strapi URL:     {config.base_url}")
        self._print(f"  Token:          {config.masked_token}")
        self._print(f"  Upload dir:     {config.upload_dir}")
        self._print(f"  Max dimension:  {config.max_dimension}px")
        self._print(f"  JPEG quality:   {config.jpeg_quality}")
        self._print(f"  Workers:        {config.workers}")
        self._print()

    def report_summary(self, stats: RunStats, max_errors: int = 20) -> None:
        """Print the end-of-run summary."""
        self._print("=" * 50)
        title = "MEDIA SYNC SUMMARY"
        if stats.dry_run:
            title += " (DRY RUN)"
        self._print(title)
        self._print("=" * 50)
        self._print(f"  Total files:  {stats.total:,}")
        label = "Would upload" if stats.dry_run else "Uploaded"
        self._print(f"  {label + ':':<13} {stats.uploaded:,}")
        self._print(f"  Skipped:      {stats.skipped:,}")
        self._print(f"  Errors:       {stats.errors:,}")
        if stats.bytes_uploaded:
            self._print(f"  Data sent:    {self._format_bytes(stats.bytes_uploaded)}")
        self._print(f"  Time:         {self._format_duration(stats.elapsed_seconds)}")

        if stats.error_details:
            self._print()
            self._print("Errors:")
            for detail in stats.error_details[:max_errors]:
                self._print(f"  - {detail}")
            hidden = len(stats.error_details) - max_errors
            if hidden > 0:
                self._print(f"  ... and {hidden} more")

        if not stats.is_consistent:
            self.logger.warning(
                f"Counts do not add up: total={stats.total}, "
                f"completed={stats.completed_count}"
            )
        self._print()
