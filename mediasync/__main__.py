"""
Main entry point for running the package as a module.

Usage:
    python -m mediasync
    python -m mediasync --root ./upload --dry-run
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
