"""
HeifBridge - Converts HEIF/HEIC containers to baseline JPEG.
"""

import logging
from typing import Optional

from PIL import Image
from pillow_heif import register_heif_opener

from .exceptions import ConversionError

register_heif_opener()


class HeifBridge:
    """
    Decodes HEIF/HEIC files with pillow-heif and writes them as JPEG.
    """

    def __init__(self, quality: int = 90, logger: Optional[logging.Logger] = None):
        """
        Initialize bridge.

        Args:
            quality: JPEG quality for the converted file (default: 90)
            logger: Optional logger instance
        """
        self.quality = quality
        self.logger = logger or logging.getLogger(__name__)

    def convert(self, source_path: str, output_path: str) -> str:
        """
        Convert a HEIF/HEIC file to JPEG.

        Args:
            source_path: HEIF/HEIC source file
            output_path: Destination JPEG path

        Returns:
            output_path

        Raises:
            ConversionError: If the container cannot be decoded or written
        """
        self.logger.debug(f"Converting HEIF/HEIC to JPEG: {source_path}")
        try:
            with Image.open(source_path) as img:
                img.convert('RGB').save(output_path, format='JPEG', quality=self.quality)
        except Exception as e:
            raise ConversionError(
                f"Cannot convert {source_path} to JPEG: {e}",
                path=source_path,
                cause=e,
            ) from e
        return output_path
