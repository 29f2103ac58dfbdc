"""
File utilities for Tidy Tools.

Size formatting for reports and logging setup for the command line tools.
"""

import logging

BYTES_PER_MB = 1024 * 1024


def format_megabytes(size_bytes: int) -> str:
    """
    Format a byte count in megabytes with one decimal place.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "2.5 MB")
    """
    return f"{size_bytes / BYTES_PER_MB:.1f} MB"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure diagnostic logging for the application.

    The run log written by organize runs is separate and unaffected.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to ERROR
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
