"""
ScratchWorkspace - Private temporary directory for a run's intermediate files.
"""

import logging
import os
import shutil
import tempfile
from typing import List, Optional


class ScratchWorkspace:
    """
    Run-scoped temporary directory.

    The directory is created lazily on first use and removed by cleanup().
    Each scratch file is owned by the caller that requested it and should
    be handed back through release() once it is no longer needed.
    """

    def __init__(
        self,
        parent: Optional[str] = None,
        prefix: str = 'mediasync-',
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize workspace.

        Args:
            parent: Directory to create the workspace in (default: system temp)
            prefix: Prefix for the workspace directory name
            logger: Optional logger instance
        """
        self.parent = parent
        self.prefix = prefix
        self.logger = logger or logging.getLogger(__name__)
        self._path: Optional[str] = None

    @property
    def path(self) -> str:
        """Workspace directory, created on first access."""
        if self._path is None:
            if self.parent:
                os.makedirs(self.parent, exist_ok=True)
            self._path = tempfile.mkdtemp(prefix=self.prefix, dir=self.parent)
            self.logger.debug(f"Created scratch workspace: {self._path}")
        return self._path

    @property
    def exists(self) -> bool:
        return self._path is not None and os.path.isdir(self._path)

    def new_path(self, stem: str = 'scratch', suffix: str = '.jpg') -> str:
        """
        Reserve a unique scratch file path inside the workspace.

        The file is created empty so concurrent callers never collide.
        """
        safe_stem = stem.replace(os.sep, '_').replace('/', '_')
        fd, path = tempfile.mkstemp(prefix=f"{safe_stem}_", suffix=suffix, dir=self.path)
        os.close(fd)
        return path

    def release(self, path: Optional[str]) -> None:
        """Remove a scratch file; missing files are ignored."""
        if not path:
            return
        try:
            os.remove(path)
        except FileNotFoundError:
            pass

    def list_files(self) -> List[str]:
        """Names of files currently in the workspace."""
        if not self.exists:
            return []
        return sorted(os.listdir(self._path))

    def cleanup(self) -> None:
        """Remove the whole workspace. Safe to call more than once."""
        if self._path is None:
            return
        if os.path.isdir(self._path):
            shutil.rmtree(self._path, ignore_errors=True)
            self.logger.debug(f"Removed scratch workspace: {self._path}")
        self._path = None

    def __enter__(self) -> 'ScratchWorkspace':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()
