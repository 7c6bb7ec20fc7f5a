"""
Command Line Interface for the media sync.
"""

import argparse
import logging
from typing import List, Optional

from .exceptions import FatalPreconditionError, RemoteError
from .reporter import Reporter
from .run_coordinator import RunCoordinator
from .run_progress import RunProgress
from .strapi_client import StrapiClient
from .sync_config import SyncConfig


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)

    return logging.getLogger('mediasync')


def get_config(args: argparse.Namespace) -> SyncConfig:
    """Get configuration from environment and CLI overrides."""
    config = SyncConfig.from_env()

    if getattr(args, 'root', None):
        config.upload_dir = args.root
    if getattr(args, 'strapi_url', None):
        config.base_url = args.strapi_url.rstrip('/')
    if getattr(args, 'temp_dir', None):
        config.temp_parent = args.temp_dir
    if getattr(args, 'max_dimension', None) is not None:
        config.max_dimension = args.max_dimension
    if getattr(args, 'quality', None) is not None:
        config.jpeg_quality = args.quality
    if getattr(args, 'workers', None) is not None:
        config.workers = args.workers

    return config


def cmd_sync(args: argparse.Namespace) -> int:
    """Execute a sync run."""
    logger = setup_logging(args.verbose)

    config = get_config(args)
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    logger.info("Starting media upload process...")
    if not args.quiet:
        Reporter(logger=logger).report_config(config)

    if args.limit:
        logger.info(f"Test mode: limiting to {args.limit} files")
    if args.dry_run:
        logger.info("Dry-run mode: nothing will be uploaded")

    try:
        client = StrapiClient(config, logger)
        coordinator = RunCoordinator(
            config=config,
            client=client,
            dry_run=args.dry_run,
            logger=logger,
        )

        progress = None
        if not args.quiet:
            progress = RunProgress(show_files=args.show_files, logger=logger)

        stats = coordinator.run(progress=progress, limit=args.limit)

        if not args.quiet:
            print()
            Reporter(logger=logger).report_summary(stats)

        return 0

    except FatalPreconditionError as e:
        logger.error(str(e))
        return 1
    except RemoteError as e:
        logger.error(f"Error fetching existing files: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Sync failed: {e}")
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='mediasync',
        description='Resize local images and upload new ones to a Strapi media library',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  STRAPI_TOKEN            API token (required)
  STRAPI_URL              Strapi base URL (default: http://127.0.0.1:1337)
  MEDIASYNC_UPLOAD_DIR    Upload root (default: ./upload)

Files in sub-folders are uploaded as <folder>-<name>, e.g.
  upload/Mallorca/beach.heic -> Mallorca-beach.jpg

Testing:
  Use --limit 3 --dry-run to check naming without uploading
"""
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    parser.add_argument('-r', '--root', metavar='PATH', help='Override MEDIASYNC_UPLOAD_DIR')
    parser.add_argument('--strapi-url', metavar='URL', help='Override STRAPI_URL')
    parser.add_argument('--temp-dir', metavar='PATH',
                        help='Parent directory for scratch files (default: system temp)')
    parser.add_argument('--max-dimension', type=int, metavar='N',
                        help='Longest side of uploaded images (default: 1920)')
    parser.add_argument('--quality', type=int, metavar='N', help='JPEG quality 1-100 (default: 90)')
    parser.add_argument('-w', '--workers', type=int, metavar='N',
                        help='Files processed concurrently (default: 1)')
    parser.add_argument('--limit', type=int, metavar='N', help='Limit to N files (for testing)')
    parser.add_argument('-n', '--dry-run', action='store_true', help='Show what would be uploaded')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress progress output')
    parser.add_argument('--show-files', action='store_true',
                        help='Print each file as processed with result')

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    return cmd_sync(parsed_args)
