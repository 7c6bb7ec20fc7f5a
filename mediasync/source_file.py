"""
SourceFile - A local image discovered under the upload root.
"""

import os
from dataclasses import dataclass
from typing import Optional


HEIF_EXTENSIONS = frozenset({'.heif', '.heic'})


def is_heif_path(path: str) -> bool:
    """Check whether path names a HEIF/HEIC file, ignoring case."""
    return os.path.splitext(path)[1].lower() in HEIF_EXTENSIONS


@dataclass(frozen=True)
class SourceFile:
    """
    A local image discovered by PathScanner.

    Attributes:
        absolute_path: Filesystem path of the image
        relative_path: Path relative to the upload root, '/'-separated
    """
    absolute_path: str
    relative_path: str

    @property
    def file_name(self) -> str:
        """Base filename."""
        return self.relative_path.rsplit('/', 1)[-1]

    @property
    def folder(self) -> Optional[str]:
        """Directory part of relative_path, or None for files at the root."""
        if '/' not in self.relative_path:
            return None
        folder = self.relative_path.rsplit('/', 1)[0]
        if folder in ('', '.'):
            return None
        return folder
