"""
RunCoordinator - Drives a full sync run from scan to summary.
"""

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterator, List, Optional, Union

from .exceptions import ConfigError
from .file_result import FileResult
from .format_normalizer import FormatNormalizer
from .name_resolver import NameResolver
from .path_scanner import PathScanner
from .remote_catalog import RemoteCatalog
from .run_progress import RunProgress
from .run_stats import RunStats
from .scratch_workspace import ScratchWorkspace
from .source_file import SourceFile
from .strapi_client import StrapiClient
from .sync_config import SyncConfig


class RunCoordinator:
    """
    Scans the upload root, dedups against one remote snapshot, then
    normalizes and uploads each new file.

    Per-file failures are counted and never abort the run. A missing
    token, a missing upload root or a failed catalog fetch do.
    """

    def __init__(
        self,
        config: SyncConfig,
        client: StrapiClient,
        scanner: Optional[PathScanner] = None,
        normalizer: Optional[FormatNormalizer] = None,
        workspace: Optional[ScratchWorkspace] = None,
        dry_run: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize coordinator.

        Args:
            config: Sync configuration
            client: Strapi client (catalog fetch and upload)
            scanner: Optional path scanner
            normalizer: Optional format normalizer
            workspace: Optional scratch workspace (removed at run end)
            dry_run: If True, resolve and dedup only
            logger: Optional logger instance
        """
        self.config = config
        self.client = client
        self.logger = logger or logging.getLogger(__name__)
        self.scanner = scanner or PathScanner(logger=self.logger)
        self.workspace = workspace or ScratchWorkspace(parent=config.temp_parent, logger=self.logger)
        self.normalizer = normalizer or FormatNormalizer(
            self.workspace,
            max_dimension=config.max_dimension,
            quality=config.jpeg_quality,
            logger=self.logger,
        )
        self.dry_run = dry_run
        self.workers = max(1, config.workers)
        self.stats = RunStats(dry_run=dry_run)

    def run(
        self,
        progress: Optional[RunProgress] = None,
        limit: Optional[int] = None
    ) -> RunStats:
        """
        Run the sync.

        Args:
            progress: Optional progress tracker
            limit: Optional limit on number of files (for testing)

        Returns:
            RunStats with results

        Raises:
            ConfigError: Token missing
            FatalIOError: Upload root missing
            RemoteError: Catalog fetch failed
        """
        if not self.config.token:
            raise ConfigError("STRAPI_TOKEN environment variable is required")

        self.stats = RunStats(dry_run=self.dry_run)

        try:
            self.logger.info(f"Scanning upload directory: {self.config.upload_dir}")
            files = self.scanner.scan(self.config.upload_dir, limit=limit)
            self.logger.info(f"Found {len(files)} image files")

            self.logger.info("Fetching existing files from Strapi...")
            catalog = RemoteCatalog.fetch(self.client)
            self.logger.info(f"Found {len(catalog)} existing files in Strapi")

            self.stats.total = len(files)

            mode_str = " [DRY RUN]" if self.dry_run else ""
            workers_str = f" with {self.workers} workers" if self.workers > 1 else ""
            self.logger.info(f"Starting sync: {len(files)} files{workers_str}{mode_str}")

            for result in self._process_all(files, catalog):
                self.stats.record(result)
                if progress:
                    progress.on_file_done(result, dry_run=self.dry_run)
                    progress.on_progress_update(self.stats)
        finally:
            leftovers = self.workspace.list_files()
            if leftovers:
                self.logger.warning(f"Removing {len(leftovers)} leftover scratch files")
            self.workspace.cleanup()

        self.logger.info(
            f"Sync complete: {self.stats.uploaded} uploaded, "
            f"{self.stats.skipped} skipped, {self.stats.errors} errors "
            f"({self.stats.elapsed_seconds:.1f}s)"
        )

        return self.stats

    def _process_all(
        self,
        files: List[SourceFile],
        catalog: RemoteCatalog
    ) -> Iterator[FileResult]:
        """Yield one result per file, in scan order."""
        if self.workers == 1:
            for source in files:
                yield self.process_file(source, catalog)
            return

        # Names are resolved and claimed here, on one thread, so a collision
        # inside the batch always skips the later file in scan order.
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            pending: List[Union[FileResult, Future]] = []
            for source in files:
                name = NameResolver.resolve_source(source)
                skipped = self._check_duplicate(source, name, catalog)
                if skipped:
                    pending.append(skipped)
                elif self.dry_run:
                    pending.append(self._dry_run_result(source, name))
                else:
                    pending.append(executor.submit(self._transfer, source, name))

            for item in pending:
                yield item.result() if isinstance(item, Future) else item

    def process_file(self, source: SourceFile, catalog: RemoteCatalog) -> FileResult:
        """
        Take one file through resolve, dedup, normalize and upload.

        Args:
            source: Scanned source file
            catalog: Remote snapshot for this run

        Returns:
            FileResult describing the terminal state
        """
        self.logger.debug(f"Processing: {source.relative_path}")
        name = NameResolver.resolve_source(source)

        skipped = self._check_duplicate(source, name, catalog)
        if skipped:
            return skipped

        if self.dry_run:
            return self._dry_run_result(source, name)

        return self._transfer(source, name)

    def _check_duplicate(
        self,
        source: SourceFile,
        name: str,
        catalog: RemoteCatalog
    ) -> Optional[FileResult]:
        """Return a skipped result if name is taken, otherwise claim it."""
        if catalog.contains(name):
            entry = catalog.find(name)
            self.logger.info(
                f"Skipped {source.relative_path} (already exists in Strapi as {name}, ID: {entry.id})"
            )
            return FileResult.skipped(source, name, "already exists in Strapi")

        if not catalog.claim(name):
            self.logger.warning(
                f"Skipped {source.relative_path} ({name} already claimed by another file in this run)"
            )
            return FileResult.skipped(source, name, "duplicate name in this run")

        return None

    def _dry_run_result(self, source: SourceFile, name: str) -> FileResult:
        self.logger.info(f"[DRY RUN] Would upload: {source.relative_path} as {name}")
        return FileResult.uploaded(source, name, entry_id=None)

    def _transfer(self, source: SourceFile, name: str) -> FileResult:
        """Normalize and upload; the scratch file is always released."""
        scratch_path = None
        try:
            scratch_path = self.normalizer.normalize(source.absolute_path)
            size = os.path.getsize(scratch_path)

            self.logger.debug(f"Uploading: {name}")
            entry_id = self.client.upload(scratch_path, name)

            self.logger.info(f"Uploaded: {source.relative_path} as {name} (ID: {entry_id})")
            return FileResult.uploaded(source, name, entry_id=entry_id, size=size)

        except Exception as e:
            self.logger.error(f"Error processing {source.relative_path}: {e}")
            return FileResult.errored(source, name, str(e))

        finally:
            self.workspace.release(scratch_path)

