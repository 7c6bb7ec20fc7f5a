"""
Pytest fixtures for mediasync tests.
"""

import io
import logging
import os

import pytest
from PIL import Image


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    return logging.getLogger('test')


@pytest.fixture
def upload_root(tmp_path):
    """Fixture providing an empty upload root directory."""
    root = tmp_path / "upload"
    root.mkdir()
    return root


@pytest.fixture
def scratch_parent(tmp_path):
    """Fixture providing a parent directory for scratch workspaces."""
    parent = tmp_path / "scratch"
    parent.mkdir()
    return parent


@pytest.fixture
def sync_config(upload_root, scratch_parent):
    """Fixture providing a valid sync configuration."""
    from mediasync.sync_config import SyncConfig

    return SyncConfig(
        base_url='http://strapi.example.com:1337',
        token='test-token-123456',
        upload_dir=str(upload_root),
        temp_parent=str(scratch_parent),
    )


@pytest.fixture
def workspace(scratch_parent, logger):
    """Fixture providing a scratch workspace that is cleaned up after the test."""
    from mediasync.scratch_workspace import ScratchWorkspace

    ws = ScratchWorkspace(parent=str(scratch_parent), logger=logger)
    yield ws
    ws.cleanup()


@pytest.fixture
def make_image():
    """
    Fixture providing a factory that writes an image file.

    Usage: make_image(path, size=(w, h), mode='RGB', format='JPEG')
    """
    def _make(path, size=(100, 100), mode='RGB', format='JPEG', color='red'):
        path = str(path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        if mode == 'RGBA':
            color = (255, 0, 0, 128)
        img = Image.new(mode, size, color=color)
        img.save(path, format=format)
        return path
    return _make


@pytest.fixture
def make_heic():
    """
    Fixture providing a factory that writes a real HEIC file with pillow-heif.

    Usage: make_heic(path, size=(w, h))
    """
    from pillow_heif import register_heif_opener
    register_heif_opener()

    def _make(path, size=(3000, 4000), color='blue'):
        path = str(path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        Image.new('RGB', size, color=color).save(path, format='HEIF')
        return path
    return _make


@pytest.fixture
def sample_image_bytes():
    """Fixture providing sample JPEG image bytes."""
    img = Image.new('RGB', (100, 100), color='red')
    buffer = io.BytesIO()
    img.save(buffer, format='JPEG')
    return buffer.getvalue()


class StubHeifBridge:
    """
    Stands in for HeifBridge: 'decodes' any file by writing a fresh JPEG
    of a fixed size, or fails like a corrupt container.
    """

    def __init__(self, size=(3000, 4000), fail=False):
        self.size = size
        self.fail = fail
        self.calls = []

    def convert(self, source_path, output_path):
        from mediasync.exceptions import ConversionError

        self.calls.append((source_path, output_path))
        if self.fail:
            raise ConversionError(f"Cannot convert {source_path}", path=source_path)
        Image.new('RGB', self.size, color='blue').save(output_path, format='JPEG', quality=90)
        return output_path


@pytest.fixture
def stub_heif_bridge():
    """Fixture providing a HEIF bridge that writes a 3000x4000 JPEG."""
    return StubHeifBridge()


@pytest.fixture
def failing_heif_bridge():
    """Fixture providing a HEIF bridge that always fails."""
    return StubHeifBridge(fail=True)


@pytest.fixture
def mock_client(mocker):
    """
    Fixture providing a mock Strapi client.

    Uploads record (name, image size, byte count) in mock_client.uploads,
    read while the scratch file still exists.
    """
    client = mocker.MagicMock()
    client.fetch_all.return_value = []
    client.uploads = []

    def _upload(path, name):
        with Image.open(path) as img:
            client.uploads.append((name, img.size, img.format, os.path.getsize(path)))
        return len(client.uploads)

    client.upload.side_effect = _upload
    return client


@pytest.fixture
def remote_entries():
    """Factory for RemoteEntry lists from names."""
    from mediasync.remote_catalog import RemoteEntry

    def _entries(*names):
        return [RemoteEntry(id=i + 1, name=name) for i, name in enumerate(names)]
    return _entries
