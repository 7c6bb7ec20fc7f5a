"""
Media sync for a Strapi media library.

Single batch run:
    1. Scan: enumerate local images under the upload root
    2. Catalog: fetch the current remote file list once
    3. Sync: resolve each file's remote name, skip known names,
       normalize to a size-bounded JPEG and upload the rest
"""

__version__ = "1.0.0"

from .exceptions import (
    MediaSyncError,
    FatalPreconditionError,
    ConfigError,
    FatalIOError,
    RemoteError,
    AuthError,
    PerFileError,
    ConversionError,
    DimensionError,
    NormalizeError,
)
from .sync_config import SyncConfig
from .source_file import SourceFile
from .path_scanner import PathScanner, IMAGE_EXTENSIONS
from .name_resolver import NameResolver
from .scratch_workspace import ScratchWorkspace
from .heif_bridge import HeifBridge
from .format_normalizer import FormatNormalizer
from .remote_catalog import RemoteCatalog, RemoteEntry
from .strapi_client import StrapiClient
from .file_result import FileOutcome, FileResult
from .run_stats import RunStats
from .run_progress import RunProgress
from .run_coordinator import RunCoordinator
from .reporter import Reporter

__all__ = [
    "MediaSyncError",
    "FatalPreconditionError",
    "ConfigError",
    "FatalIOError",
    "RemoteError",
    "AuthError",
    "PerFileError",
    "ConversionError",
    "DimensionError",
    "NormalizeError",
    "SyncConfig",
    "SourceFile",
    "PathScanner",
    "IMAGE_EXTENSIONS",
    "NameResolver",
    "ScratchWorkspace",
    "HeifBridge",
    "FormatNormalizer",
    "RemoteCatalog",
    "RemoteEntry",
    "StrapiClient",
    "FileOutcome",
    "FileResult",
    "RunStats",
    "RunProgress",
    "RunCoordinator",
    "Reporter",
]
