"""Tests for RunProgress class."""

from mediasync.file_result import FileResult
from mediasync.run_progress import RunProgress
from mediasync.run_stats import RunStats
from mediasync.source_file import SourceFile


SOURCE = SourceFile('/u/Mallorca/beach.heic', 'Mallorca/beach.heic')


class TestRunProgress:
    """Tests for RunProgress class."""

    def test_init_defaults(self, logger):
        """Test default initialization."""
        progress = RunProgress(logger=logger)

        assert progress.show_files is False
        assert progress.log_interval == 100

    def test_uploaded_show_files(self, logger, capsys):
        """Test show_files output for an upload."""
        progress = RunProgress(show_files=True, logger=logger)

        progress.on_file_done(FileResult.uploaded(SOURCE, 'Mallorca-beach.jpg', 12, size=2048))

        out = capsys.readouterr().out
        assert '[OK]' in out
        assert 'Mallorca-beach.jpg' in out
        assert '2.0 KB' in out

    def test_skipped_show_files(self, logger, capsys):
        """Test show_files output for a skip."""
        progress = RunProgress(show_files=True, logger=logger)

        progress.on_file_done(FileResult.skipped(SOURCE, 'Mallorca-beach.jpg', 'already exists in Strapi'))

        out = capsys.readouterr().out
        assert '[SKIP]' in out
        assert 'already exists' in out

    def test_error_show_files(self, logger, capsys):
        """Test show_files output for a failure."""
        progress = RunProgress(show_files=True, logger=logger)

        progress.on_file_done(FileResult.errored(SOURCE, 'Mallorca-beach.jpg', 'test error'))

        out = capsys.readouterr().out
        assert '[ERROR]' in out
        assert 'test error' in out

    def test_dry_run_show_files(self, logger, capsys):
        """Test show_files output in dry-run mode."""
        progress = RunProgress(show_files=True, logger=logger)

        progress.on_file_done(FileResult.uploaded(SOURCE, 'Mallorca-beach.jpg', None), dry_run=True)

        assert 'DRY RUN' in capsys.readouterr().out

    def test_quiet_without_show_files(self, logger, capsys):
        """Test that nothing is printed per file by default."""
        progress = RunProgress(logger=logger)

        progress.on_file_done(FileResult.errored(SOURCE, 'x.jpg', 'boom'))

        assert capsys.readouterr().out == ''

    def test_callable_interface(self, logger):
        """Test using progress as callback."""
        progress = RunProgress(logger=logger)
        stats = RunStats(total=100, uploaded=100)

        progress(stats)

        assert progress.last_logged == 100

    def test_interval_not_reached(self, logger):
        """Test that progress is not logged before the interval."""
        progress = RunProgress(log_interval=10, logger=logger)

        progress.on_progress_update(RunStats(total=20, uploaded=5))

        assert progress.last_logged == 0
