"""
Shared utilities for Tidy Tools.
"""

from .file_utils import BYTES_PER_MB, format_megabytes, setup_logging

__all__ = [
    "BYTES_PER_MB",
    "format_megabytes",
    "setup_logging",
]
