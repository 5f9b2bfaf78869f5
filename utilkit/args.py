"""Command-line argument parsing for the utilkit demo."""

import argparse
from typing import List, Optional

from utilkit.__version__ import __version__
from utilkit.constants import DEFAULT_CHUNK_SIZE, DEFAULT_DATE_PATTERN, DEMO_SECTIONS


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Show utilkit functions applied to sample inputs",
        epilog="Date patterns support YYYY, YY, MM, M, DD, D, HH, H, mm, m, ss and s.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"utilkit {__version__}")
    parser.add_argument(
        "--section",
        dest="sections",
        action="append",
        choices=DEMO_SECTIONS,
        help="Section to show (repeatable, default: all)",
    )
    parser.add_argument(
        "--pattern",
        default=DEFAULT_DATE_PATTERN,
        help=f"Date pattern for the formatting samples (default: {DEFAULT_DATE_PATTERN})",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Page size for the chunk samples (default: {DEFAULT_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--reference-time",
        default=None,
        help="Reference instant for relative times, e.g. 2024-03-15T14:30:45 (default: now)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    return parser.parse_args(argv)
