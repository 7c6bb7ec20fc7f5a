"""
FileResult - Outcome of processing a single source file.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .source_file import SourceFile


class FileOutcome(Enum):
    UPLOADED = 'uploaded'
    SKIPPED = 'skipped'
    ERRORED = 'errored'


@dataclass
class FileResult:
    """
    Result of one file's pass through the pipeline.

    Attributes:
        source: The scanned source file
        canonical_name: Name used for dedup and upload
        outcome: Terminal state for the file
        entry_id: Remote id when uploaded
        error: Error message when errored
        reason: Skip reason when skipped
        bytes_uploaded: Size of the uploaded JPEG
    """
    source: SourceFile
    canonical_name: str
    outcome: FileOutcome
    entry_id: Any = None
    error: Optional[str] = None
    reason: Optional[str] = None
    bytes_uploaded: int = 0

    @classmethod
    def uploaded(cls, source: SourceFile, name: str, entry_id: Any, size: int = 0) -> 'FileResult':
        return cls(source, name, FileOutcome.UPLOADED, entry_id=entry_id, bytes_uploaded=size)

    @classmethod
    def skipped(cls, source: SourceFile, name: str, reason: str) -> 'FileResult':
        return cls(source, name, FileOutcome.SKIPPED, reason=reason)

    @classmethod
    def errored(cls, source: SourceFile, name: str, error: str) -> 'FileResult':
        return cls(source, name, FileOutcome.ERRORED, error=error)
