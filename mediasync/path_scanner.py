"""
PathScanner - Enumerates image files under the upload root.
"""

import logging
import os
from typing import Iterable, List, Optional

from .exceptions import FatalIOError
from .source_file import SourceFile


IMAGE_EXTENSIONS = frozenset({
    '.jpg', '.jpeg', '.png', '.webp', '.heif', '.heic', '.gif', '.tiff', '.tif',
})


class PathScanner:
    """
    Recursively lists recognized image files below a root directory.

    Results are sorted by relative path so a run is reproducible.
    """

    def __init__(
        self,
        extensions: Iterable[str] = IMAGE_EXTENSIONS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize scanner.

        Args:
            extensions: Recognized extensions, with leading dot
            logger: Optional logger instance
        """
        self.extensions = frozenset(ext.lower() for ext in extensions)
        self.logger = logger or logging.getLogger(__name__)

    def scan(self, root: str, limit: Optional[int] = None) -> List[SourceFile]:
        """
        Scan a directory tree.

        Args:
            root: Upload root directory
            limit: Optional limit on number of files returned (for testing)

        Returns:
            Sorted list of SourceFile

        Raises:
            FatalIOError: If root does not exist or is not a directory
        """
        if not os.path.exists(root):
            raise FatalIOError(f"Upload directory does not exist: {root}")
        if not os.path.isdir(root):
            raise FatalIOError(f"Upload path is not a directory: {root}")

        files: List[SourceFile] = []

        def on_walk_error(error: OSError) -> None:
            self.logger.warning(f"Cannot read directory {error.filename}: {error.strerror}")

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_walk_error):
            dirnames.sort()
            for name in filenames:
                if not self.is_recognized(name):
                    continue
                full_path = os.path.join(dirpath, name)
                if not os.path.isfile(full_path):
                    continue
                relative_path = os.path.relpath(full_path, root).replace(os.sep, '/')
                files.append(SourceFile(absolute_path=full_path, relative_path=relative_path))

        files.sort(key=lambda f: f.relative_path)

        if limit:
            self.logger.info(f"Limit: {limit} files (testing mode)")
            files = files[:limit]

        self.logger.debug(f"Scanned {root}: {len(files)} image files")
        return files

    def is_recognized(self, file_name: str) -> bool:
        """Check whether a filename has a recognized image extension."""
        return os.path.splitext(file_name)[1].lower() in self.extensions
