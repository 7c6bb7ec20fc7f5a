"""
RunStats - Statistics for a sync run.
"""

import time
from dataclasses import dataclass, field
from typing import List

from .file_result import FileOutcome, FileResult


@dataclass
class RunStats:
    """
    Statistics for a sync run.

    Attributes:
        total: Total files discovered
        uploaded: Uploaded (or would be uploaded in dry-run mode)
        skipped: Already present remotely or claimed earlier in the run
        errors: Failed to normalize or upload
        bytes_uploaded: Total bytes of uploaded JPEGs
        start_time: Start timestamp
        dry_run: True if nothing was actually uploaded
        error_details: List of error messages
    """
    total: int = 0
    uploaded: int = 0
    skipped: int = 0
    errors: int = 0
    bytes_uploaded: int = 0
    start_time: float = field(default_factory=time.time)
    dry_run: bool = False
    error_details: List[str] = field(default_factory=list)

    def record(self, result: FileResult) -> None:
        """Count a finished file."""
        if result.outcome is FileOutcome.UPLOADED:
            self.uploaded += 1
            self.bytes_uploaded += result.bytes_uploaded
        elif result.outcome is FileOutcome.SKIPPED:
            self.skipped += 1
        else:
            self.errors += 1
            self.error_details.append(f"{result.source.relative_path}: {result.error}")

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time

    @property
    def rate_per_minute(self) -> float:
        """Completed files per minute."""
        elapsed = self.elapsed_seconds
        if elapsed > 0:
            return self.completed_count / elapsed * 60
        return 0.0

    @property
    def completed_count(self) -> int:
        """Total completed (uploaded + skipped + errors)."""
        return self.uploaded + self.skipped + self.errors

    @property
    def remaining_count(self) -> int:
        """Remaining to process."""
        return self.total - self.completed_count

    @property
    def is_consistent(self) -> bool:
        return self.total == self.completed_count

    def to_dict(self) -> dict:
        return {
            'total': self.total,
            'uploaded': self.uploaded,
            'skipped': self.skipped,
            'errors': self.errors,
        }
