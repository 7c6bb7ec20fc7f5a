"""
Exception hierarchy for mediasync.

Fatal errors abort the run before or while taking the remote snapshot;
per-file errors are counted by the coordinator and the run continues.
"""

from typing import Optional


class MediaSyncError(Exception):
    """Base exception for all mediasync errors."""
    pass


class FatalPreconditionError(MediaSyncError):
    """Raised when the run cannot start at all."""
    pass


class ConfigError(FatalPreconditionError):
    """Raised when configuration is missing or invalid."""
    pass


class FatalIOError(FatalPreconditionError):
    """Raised when the upload root cannot be read."""
    pass


class RemoteError(MediaSyncError):
    """
    Raised when the remote store answers with a non-success status.

    Attributes:
        status: HTTP status code, or None for transport failures
        body: Response body text (may be empty)
    """

    def __init__(self, message: str, status: Optional[int] = None, body: str = ''):
        super().__init__(message)
        self.status = status
        self.body = body

    def __str__(self) -> str:
        text = super().__str__()
        if self.status is not None:
            text = f"{text} (HTTP {self.status})"
        if self.body:
            text = f"{text} - {self.body}"
        return text


class AuthError(RemoteError):
    """Raised when the bearer token is absent or rejected."""
    pass


class PerFileError(MediaSyncError):
    """
    Raised when a single source file cannot be processed.

    Attributes:
        path: Source file path
        cause: Underlying exception, if any
    """

    def __init__(self, message: str, path: str = '', cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class ConversionError(PerFileError):
    """Raised when a HEIF/HEIC container cannot be converted to JPEG."""
    pass


class DimensionError(PerFileError):
    """Raised when image dimensions cannot be determined."""
    pass


class NormalizeError(PerFileError):
    """Raised when resizing or JPEG re-encoding fails."""
    pass
