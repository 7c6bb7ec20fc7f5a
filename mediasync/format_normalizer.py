"""
FormatNormalizer - Produces size-bounded JPEG files from source images.
"""

import logging
import os
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from .exceptions import DimensionError, NormalizeError
from .heif_bridge import HeifBridge
from .scratch_workspace import ScratchWorkspace
from .source_file import is_heif_path


class FormatNormalizer:
    """
    Resizes images to a maximum dimension and re-encodes them as JPEG
    using Pillow. HEIF/HEIC sources go through HeifBridge first.
    """

    def __init__(
        self,
        workspace: ScratchWorkspace,
        max_dimension: int = 1920,
        quality: int = 90,
        heif_bridge: Optional[HeifBridge] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize normalizer.

        Args:
            workspace: Scratch workspace for intermediate and output files
            max_dimension: Longest side of the output (default: 1920)
            quality: JPEG quality for output (default: 90)
            heif_bridge: Optional HEIF converter (default: HeifBridge(quality))
            logger: Optional logger instance
        """
        self.workspace = workspace
        self.max_dimension = max_dimension
        self.quality = quality
        self.logger = logger or logging.getLogger(__name__)
        self.heif_bridge = heif_bridge or HeifBridge(quality=quality, logger=self.logger)

    def normalize(self, source_path: str) -> str:
        """
        Produce a resized JPEG scratch file for a source image.

        Args:
            source_path: Path of the source image

        Returns:
            Path of the scratch JPEG (owned by the caller)

        Raises:
            ConversionError: HEIF/HEIC payload could not be converted
            DimensionError: Image dimensions could not be read
            NormalizeError: Resize or JPEG encoding failed
        """
        stem = os.path.splitext(os.path.basename(source_path))[0]
        heif_scratch = None
        working_path = source_path

        try:
            if is_heif_path(source_path):
                heif_scratch = self.workspace.new_path(stem=f"heif_{stem}")
                self.heif_bridge.convert(source_path, heif_scratch)
                working_path = heif_scratch

            return self._resize(working_path, source_path, stem)
        finally:
            self.workspace.release(heif_scratch)

    def _resize(self, working_path: str, source_path: str, stem: str) -> str:
        """Resize working_path into a new scratch JPEG."""
        try:
            img = Image.open(working_path)
        except (UnidentifiedImageError, OSError) as e:
            raise DimensionError(
                f"Unable to get image dimensions for {source_path}: {e}",
                path=source_path,
                cause=e,
            ) from e

        output_path = self.workspace.new_path(stem=f"resized_{stem}")
        try:
            with img:
                width, height = img.size
                if not width or not height:
                    raise DimensionError(
                        f"Unable to get image dimensions for {source_path}",
                        path=source_path,
                    )

                target = self.target_size(width, height)
                if target != (width, height):
                    self.logger.info(
                        f"  Resizing from {width}x{height} to fit {self.max_dimension}px"
                    )
                else:
                    self.logger.info(f"  Image already within size limits ({width}x{height})")

                self._encode(img, target, output_path)
        except DimensionError:
            self.workspace.release(output_path)
            raise
        except Exception as e:
            self.workspace.release(output_path)
            raise NormalizeError(
                f"Cannot normalize {source_path}: {e}",
                path=source_path,
                cause=e,
            ) from e

        return output_path

    def _encode(self, img: Image.Image, target: Tuple[int, int], output_path: str) -> None:
        """Convert, resize if needed and save as JPEG."""
        img = self._convert_color_mode(img)
        if target != img.size:
            img = img.resize(target, Image.Resampling.LANCZOS)
        img.save(output_path, format='JPEG', quality=self.quality)

    def target_size(self, width: int, height: int) -> Tuple[int, int]:
        """
        Compute output dimensions for an image.

        The longest side is capped at max_dimension, aspect ratio is kept,
        and images are never enlarged.
        """
        longest = max(width, height)
        if longest <= self.max_dimension:
            return width, height

        scale = self.max_dimension / longest
        if width >= height:
            return self.max_dimension, max(1, round(height * scale))
        return max(1, round(width * scale)), self.max_dimension

    def _convert_color_mode(self, img: Image.Image) -> Image.Image:
        """
        Convert image to a mode JPEG can store.

        JPEG has no alpha channel. Transparent PNG, GIF and WebP sources are
        flattened onto white so they read like the originals on the light
        pages the media library serves them on.
        """
        if img.mode in ('RGBA', 'LA'):
            background = Image.new('RGB', img.size, (255, 255, 255))
            if img.mode == 'LA':
                img = img.convert('RGBA')
            background.paste(img, mask=img.split()[-1])
            return background
        elif img.mode == 'P':
            img = img.convert('RGBA')
            background = Image.new('RGB', img.size, (255, 255, 255))
            background.paste(img, mask=img.split()[-1])
            return background
        elif img.mode != 'RGB':
            return img.convert('RGB')
        return img
