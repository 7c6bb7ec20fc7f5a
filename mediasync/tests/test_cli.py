"""Tests for CLI module."""

import pytest

from mediasync.cli import create_parser, get_config, main
from mediasync.exceptions import RemoteError


@pytest.fixture
def cli_env(monkeypatch, upload_root, scratch_parent):
    """Fixture setting a valid environment for the CLI."""
    monkeypatch.setenv('STRAPI_TOKEN', 'cli-token-123456')
    monkeypatch.setenv('STRAPI_URL', 'http://strapi.example.com:1337')
    monkeypatch.setenv('MEDIASYNC_UPLOAD_DIR', str(upload_root))
    monkeypatch.setenv('MEDIASYNC_TEMP_DIR', str(scratch_parent))
    for name in ('MEDIASYNC_MAX_DIMENSION', 'MEDIASYNC_JPEG_QUALITY', 'MEDIASYNC_WORKERS',
                 'MEDIASYNC_PAGE_SIZE', 'MEDIASYNC_TIMEOUT'):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def patched_client(mocker, mock_client):
    """Fixture replacing StrapiClient in the CLI with the mock client."""
    mocker.patch('mediasync.cli.StrapiClient', return_value=mock_client)
    return mock_client


class TestCreateParser:
    """Tests for argument parser creation."""

    def test_defaults(self):
        """Test parsing with no arguments."""
        args = create_parser().parse_args([])

        assert args.dry_run is False
        assert args.root is None
        assert args.limit is None

    def test_options(self):
        """Test parsing all options."""
        args = create_parser().parse_args([
            '--root', '/photos', '--strapi-url', 'http://cms', '--max-dimension', '1024',
            '--quality', '80', '-w', '3', '--limit', '5', '-n', '--show-files', '-v',
        ])

        assert args.root == '/photos'
        assert args.strapi_url == 'http://cms'
        assert args.max_dimension == 1024
        assert args.quality == 80
        assert args.workers == 3
        assert args.limit == 5
        assert args.dry_run is True
        assert args.show_files is True
        assert args.verbose is True

    def test_overrides_applied(self, cli_env):
        """Test CLI values override the environment."""
        args = create_parser().parse_args(['--root', '/photos', '--quality', '75'])

        config = get_config(args)

        assert config.upload_dir == '/photos'
        assert config.jpeg_quality == 75
        assert config.token == 'cli-token-123456'


class TestMain:
    """Tests for main entry point."""

    def test_missing_token_exits_nonzero(self, cli_env, mocker):
        """Test that a missing credential aborts before anything runs."""
        cli_env.delenv('STRAPI_TOKEN')
        coordinator = mocker.patch('mediasync.cli.RunCoordinator')

        result = main(['-q'])

        assert result == 1
        coordinator.assert_not_called()

    def test_missing_root_exits_nonzero(self, cli_env, patched_client, tmp_path):
        """Test that a missing upload root is fatal."""
        result = main(['-q', '--root', str(tmp_path / 'missing')])

        assert result == 1
        patched_client.fetch_all.assert_not_called()

    def test_catalog_failure_exits_nonzero(self, cli_env, patched_client):
        """Test that a failed catalog fetch is fatal."""
        patched_client.fetch_all.side_effect = RemoteError("Failed to fetch existing files", status=500)

        assert main(['-q']) == 1

    def test_successful_run(self, cli_env, patched_client, make_image, upload_root, capsys):
        """Test a full run prints the summary and exits 0."""
        make_image(upload_root / 'Mallorca' / 'photo.jpg')

        result = main([])

        assert result == 0
        assert [u[0] for u in patched_client.uploads] == ['Mallorca-photo.jpg']
        out = capsys.readouterr().out
        assert 'SUMMARY' in out

    def test_per_file_errors_still_exit_zero(self, cli_env, patched_client, upload_root):
        """Test that per-file errors do not change the exit code."""
        (upload_root / 'bad.jpg').write_bytes(b'junk')

        assert main(['-q']) == 0

    def test_invalid_quality(self, cli_env, patched_client):
        """Test that an out-of-range quality is rejected."""
        assert main(['-q', '--quality', '0']) == 1
        patched_client.fetch_all.assert_not_called()

    def test_keyboard_interrupt(self, cli_env, patched_client, make_image, upload_root):
        """Test that an interrupt exits with 130."""
        make_image(upload_root / 'a.jpg')
        patched_client.fetch_all.side_effect = KeyboardInterrupt

        assert main(['-q']) == 130
