"""
Exceptions raised by the organization package.

Only DirectoryReadError and LogFileError escape a run. MoveError is raised
per file by the mover and absorbed by the organizer loop.
"""

from pathlib import Path
from typing import Optional


class OrganizerError(Exception):
    """Base class for organizer failures."""


class DirectoryReadError(OrganizerError):
    """The source directory could not be listed."""

    def __init__(self, directory: Path, cause: OSError):
        self.directory = Path(directory)
        self.cause = cause
        super().__init__(f"error reading source directory {self.directory}: {cause}")


class MoveError(OrganizerError):
    """A single file could not be moved into its category folder."""

    def __init__(
        self, source_path: Path, category: str, cause: Optional[Exception] = None
    ):
        self.source_path = Path(source_path)
        self.category = category
        self.cause = cause
        super().__init__(str(cause) if cause else "move failed")


class LogFileError(OrganizerError):
    """The run log file could not be opened."""

    def __init__(self, log_path: Path, cause: OSError):
        self.log_path = Path(log_path)
        self.cause = cause
        super().__init__(f"cannot open run log {self.log_path}: {cause}")
