"""
SyncConfig - Configuration for a media sync run.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_STRAPI_URL = 'http://127.0.0.1:1337'
DEFAULT_UPLOAD_DIR = 'upload'
DEFAULT_MAX_DIMENSION = 1920
DEFAULT_JPEG_QUALITY = 90
DEFAULT_PAGE_SIZE = 1000
DEFAULT_TIMEOUT = 60.0


@dataclass
class SyncConfig:
    """
    Configuration for a sync run.

    Attributes:
        base_url: Strapi base URL (no trailing slash)
        token: Bearer token for the Strapi API
        upload_dir: Local root directory to ingest
        temp_parent: Parent directory for the scratch workspace (None = system temp)
        max_dimension: Longest side of the uploaded JPEG
        jpeg_quality: JPEG quality (1-100)
        page_size: Page size for the catalog listing request
        timeout: HTTP timeout in seconds
        workers: Number of files processed concurrently
    """
    base_url: str = DEFAULT_STRAPI_URL
    token: Optional[str] = None
    upload_dir: str = DEFAULT_UPLOAD_DIR
    temp_parent: Optional[str] = None
    max_dimension: int = DEFAULT_MAX_DIMENSION
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    workers: int = 1
    env_errors: List[str] = field(default_factory=list, repr=False)

    def __post_init__(self):
        self.base_url = (self.base_url or '').rstrip('/')

    @classmethod
    def from_env(cls) -> 'SyncConfig':
        """Load configuration from environment variables."""
        errors: List[str] = []

        def env_number(name: str, default, cast):
            raw = os.getenv(name)
            if raw is None or raw == '':
                return default
            try:
                return cast(raw)
            except ValueError:
                errors.append(f"{name} must be a number, got {raw!r}")
                return default

        config = cls(
            base_url=os.getenv('STRAPI_URL', DEFAULT_STRAPI_URL),
            token=os.getenv('STRAPI_TOKEN') or None,
            upload_dir=os.getenv('MEDIASYNC_UPLOAD_DIR', DEFAULT_UPLOAD_DIR),
            temp_parent=os.getenv('MEDIASYNC_TEMP_DIR') or None,
            max_dimension=env_number('MEDIASYNC_MAX_DIMENSION', DEFAULT_MAX_DIMENSION, int),
            jpeg_quality=env_number('MEDIASYNC_JPEG_QUALITY', DEFAULT_JPEG_QUALITY, int),
            page_size=env_number('MEDIASYNC_PAGE_SIZE', DEFAULT_PAGE_SIZE, int),
            timeout=env_number('MEDIASYNC_TIMEOUT', DEFAULT_TIMEOUT, float),
            workers=env_number('MEDIASYNC_WORKERS', 1, int),
        )
        config.env_errors = errors
        return config

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = list(self.env_errors)

        if not self.token:
            errors.append("STRAPI_TOKEN environment variable is required")
        if not self.base_url:
            errors.append("STRAPI_URL must not be empty")
        elif not self.base_url.startswith(('http://', 'https://')):
            errors.append(f"STRAPI_URL must be an http(s) URL, got {self.base_url!r}")
        if not self.upload_dir:
            errors.append("Upload directory must not be empty")
        if self.max_dimension <= 0:
            errors.append(f"max_dimension must be > 0, got {self.max_dimension}")
        if not 1 <= self.jpeg_quality <= 100:
            errors.append(f"jpeg_quality must be between 1 and 100, got {self.jpeg_quality}")
        if self.page_size <= 0:
            errors.append(f"page_size must be > 0, got {self.page_size}")
        if self.timeout <= 0:
            errors.append(f"timeout must be > 0, got {self.timeout}")
        if self.workers < 1:
            errors.append(f"workers must be >= 1, got {self.workers}")

        return errors

    @property
    def masked_token(self) -> str:
        """Token suitable for log output."""
        if not self.token:
            return '<missing>'
        if len(self.token) <= 8:
            return '****'
        return f"{self.token[:4]}...{self.token[-4:]}"
