"""
StrapiClient - HTTP operations against the Strapi upload API.
"""

import json
import logging
import os
from typing import Any, List, Optional

import urllib3

from .exceptions import AuthError, RemoteError
from .remote_catalog import RemoteEntry
from .sync_config import SyncConfig


class StrapiClient:
    """
    Wrapper for the two Strapi upload endpoints the sync uses.

    Provides a bulk listing of existing files and a single-file upload.
    """

    LIST_PATH = '/api/upload/files'
    UPLOAD_PATH = '/api/upload'
    UPLOAD_FIELD = 'files'
    CONTENT_TYPE = 'image/jpeg'

    def __init__(
        self,
        config: SyncConfig,
        logger: Optional[logging.Logger] = None,
        http: Optional[urllib3.PoolManager] = None
    ):
        """
        Initialize client.

        Args:
            config: Sync configuration (base_url, token, timeout, page_size)
            logger: Optional logger instance
            http: Optional urllib3 pool manager
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self._http = http or urllib3.PoolManager(
            timeout=urllib3.Timeout(total=config.timeout),
            retries=False,
        )

    @property
    def http(self) -> urllib3.PoolManager:
        """Return the underlying urllib3 pool manager."""
        return self._http

    def _headers(self) -> dict:
        if not self.config.token:
            raise AuthError("STRAPI_TOKEN environment variable is required")
        return {'Authorization': f"Bearer {self.config.token}"}

    def _url(self, path: str) -> str:
        return f"{self.config.base_url}{path}"

    def _request(self, method: str, path: str, action: str, **kwargs) -> Any:
        """Issue a request and decode the JSON response."""
        headers = self._headers()
        url = self._url(path)

        try:
            response = self._http.request(method, url, headers=headers, **kwargs)
        except urllib3.exceptions.HTTPError as e:
            raise RemoteError(f"Failed to {action}: {e}") from e

        body = response.data.decode('utf-8', errors='replace') if response.data else ''

        if response.status in (401, 403):
            raise AuthError(f"Failed to {action}: token rejected", status=response.status, body=body)
        if not 200 <= response.status < 300:
            raise RemoteError(f"Failed to {action}", status=response.status, body=body)

        try:
            return json.loads(body) if body else None
        except ValueError as e:
            raise RemoteError(
                f"Failed to {action}: invalid JSON response", status=response.status, body=body
            ) from e

    def fetch_all(self) -> List[RemoteEntry]:
        """
        List all files in the media library.

        Returns:
            List of RemoteEntry

        Raises:
            AuthError: Token missing or rejected
            RemoteError: Non-success status or unexpected payload
        """
        self.logger.debug(f"Fetching existing files from {self._url(self.LIST_PATH)}")
        data = self._request(
            'GET',
            self.LIST_PATH,
            'fetch existing files',
            fields={'pagination[pageSize]': str(self.config.page_size)},
        )

        if not isinstance(data, list):
            raise RemoteError(
                "Failed to fetch existing files: expected a JSON array",
                body=str(data)[:200],
            )

        return [RemoteEntry.from_dict(item) for item in data if isinstance(item, dict)]

    def upload(self, file_path: str, name: str) -> Any:
        """
        Upload a JPEG file under the given name.

        Args:
            file_path: Local file to upload
            name: Filename to store it as

        Returns:
            Identifier of the new remote entry

        Raises:
            AuthError: Token missing or rejected
            RemoteError: Non-success status or unexpected payload
        """
        with open(file_path, 'rb') as f:
            data = f.read()

        self.logger.debug(f"Uploading {os.path.basename(file_path)} as {name} ({len(data)} bytes)")
        result = self._request(
            'POST',
            self.UPLOAD_PATH,
            'upload file',
            fields={self.UPLOAD_FIELD: (name, data, self.CONTENT_TYPE)},
        )

        if not isinstance(result, list) or not result or not isinstance(result[0], dict):
            raise RemoteError(
                "Failed to upload file: expected a non-empty JSON array",
                body=str(result)[:200],
            )

        return result[0].get('id')
