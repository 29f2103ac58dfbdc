"""
Organization module for sorting files into category folders.

This module classifies files by extension, moves them into category
subdirectories of their source directory with collision-safe renaming,
and aggregates per-category statistics for each run.
"""

from .errors import DirectoryReadError, LogFileError, MoveError, OrganizerError
from .file_organizer import FileOrganizer
from .mover import FileMover
from .rules import DEFAULT_RULES, ExtensionRules, file_extension, split_extension
from .run_log import RunLog, open_run_log
from .stats import CategoryStats, MoveRecord, RunSummary

__all__ = [
    "DEFAULT_RULES",
    "ExtensionRules",
    "file_extension",
    "split_extension",
    "FileMover",
    "FileOrganizer",
    "CategoryStats",
    "MoveRecord",
    "RunSummary",
    "RunLog",
    "open_run_log",
    "OrganizerError",
    "DirectoryReadError",
    "MoveError",
    "LogFileError",
]
