"""
NameResolver - Canonical remote names for local images.

The same name is used for the dedup check and for the upload itself,
so both must go through resolve().
"""

import re
from typing import Optional

from .source_file import SourceFile


class NameResolver:
    """
    Derives the filename an image is stored under in the remote store.

    Examples:
        beach.heic, folder=None        -> beach.jpg
        beach.heic, folder='Mallorca'  -> Mallorca-beach.jpg
        x.png, folder='Spain/Mallorca' -> Spain-Mallorca-x.png
    """

    HEIF_SUFFIX = re.compile(r'\.(heif|heic)$', re.IGNORECASE)
    ROOT_FOLDER = '.'
    SEPARATOR = '-'

    @classmethod
    def resolve(cls, file_name: str, folder: Optional[str] = None) -> str:
        """
        Resolve the canonical name for a file.

        Args:
            file_name: Base filename of the source
            folder: Folder relative to the upload root, or None / '.' for the root

        Returns:
            Canonical remote filename
        """
        name = cls.HEIF_SUFFIX.sub('.jpg', file_name)

        if folder and folder != cls.ROOT_FOLDER:
            prefix = folder.replace('\\', '/').replace('/', cls.SEPARATOR)
            name = f"{prefix}{cls.SEPARATOR}{name}"

        return name

    @classmethod
    def resolve_source(cls, source: SourceFile) -> str:
        """Resolve the canonical name for a scanned SourceFile."""
        return cls.resolve(source.file_name, source.folder)
