"""
File mover for category folders.

Moves a file into <source>/<category>/, creating the folder when needed and
renaming the incoming file when its name is already taken.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable

from .errors import MoveError
from .rules import split_extension

logger = logging.getLogger(__name__)

# Sortable, second precision
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
MAX_CONFLICT_ATTEMPTS = 9999


class FileMover:
    """Move files into category subdirectories of a source directory."""

    def __init__(
        self,
        source_directory: Path,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize file mover.

        Args:
            source_directory: Directory the category folders live under
            clock: Source of the timestamp used to disambiguate names
        """
        self.source_directory = Path(source_directory)
        self.clock = clock

    def target_directory(self, category: str) -> Path:
        """Get the folder a category's files are moved into."""
        return self.source_directory / category

    def resolve_naming_conflict(self, target_path: Path) -> Path:
        """
        Pick a free name for a file whose target path is taken.

        Inserts a timestamp between the stem and the suffix
        (report.txt -> report_20240115_093000.txt). If that name is also
        taken, a counter is appended after the timestamp. Dangling symlinks
        count as taken.

        Args:
            target_path: Path that already exists

        Returns:
            Path that does not exist yet

        Raises:
            MoveError: If no free name is found
        """
        stem, suffix = split_extension(target_path)
        parent = target_path.parent
        stamp = self.clock().strftime(TIMESTAMP_FORMAT)

        new_path = parent / f"{stem}_{stamp}{suffix}"
        counter = 1
        while os.path.lexists(new_path):
            if counter > MAX_CONFLICT_ATTEMPTS:
                raise MoveError(
                    target_path,
                    parent.name,
                    FileExistsError(f"Too many naming conflicts for {target_path}"),
                )
            new_path = parent / f"{stem}_{stamp}_{counter}{suffix}"
            counter += 1

        return new_path

    def move(self, source_path: Path, category: str) -> Path:
        """
        Move a file into its category folder.

        Args:
            source_path: File to move
            category: Category folder name

        Returns:
            Final path of the moved file

        Raises:
            MoveError: If the folder cannot be created or the rename fails
        """
        source_path = Path(source_path)
        target_dir = self.target_directory(category)

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MoveError(source_path, category, e) from e

        target_path = target_dir / source_path.name
        if os.path.lexists(target_path):
            target_path = self.resolve_naming_conflict(target_path)
            logger.debug(f"Name taken, using {target_path.name}")

        try:
            source_path.rename(target_path)
        except OSError as e:
            raise MoveError(source_path, category, e) from e

        logger.debug(f"Moved {source_path} → {target_path}")
        return target_path
