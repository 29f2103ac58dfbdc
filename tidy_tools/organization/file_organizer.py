"""
File organizer for sorting a directory by file extension.

Walks the top level of a source directory, moves each recognized file into
a category folder beside it and keeps per-category statistics.
"""

import logging
import os
import stat
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, TextIO

from .errors import DirectoryReadError, MoveError
from .mover import FileMover
from .rules import ExtensionRules, file_extension
from .run_log import RunLog
from .stats import RunSummary

logger = logging.getLogger(__name__)


class FileOrganizer:
    """Organize the files of one source directory into category folders."""

    def __init__(
        self,
        source_directory: Path,
        sink: TextIO,
        rules: Optional[ExtensionRules] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize file organizer.

        Args:
            source_directory: Directory whose files are organized
            sink: Writable stream for the run log, owned by the caller
            rules: Extension table (defaults to the standard table)
            clock: Timestamp source used when renaming conflicting files
        """
        self.source_directory = Path(source_directory)
        self.rules = rules if rules is not None else ExtensionRules.default()
        self.mover = FileMover(self.source_directory, clock=clock)
        self.run_log = RunLog(sink)
        self.summary = RunSummary(source_directory=self.source_directory)

    def __enter__(self) -> "FileOrganizer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Flush and detach the run log."""
        self.run_log.close()

    def organize(self) -> RunSummary:
        """
        Organize the source directory.

        Returns:
            Summary of the run

        Raises:
            DirectoryReadError: If the source directory cannot be listed
        """
        logger.info(f"Organizing {self.source_directory}")
        self.summary = RunSummary(source_directory=self.source_directory)

        try:
            entries = sorted(self.source_directory.iterdir())
        except OSError as e:
            self.run_log.error(f"error reading source directory: {e}")
            raise DirectoryReadError(self.source_directory, e) from e

        log_stat = self._run_log_stat()

        for entry in entries:
            try:
                info = entry.lstat()
            except OSError as e:
                self._fail(f"error reading file: {e}")
                continue

            # Symlinks are not followed
            if not stat.S_ISREG(info.st_mode):
                logger.debug(f"Skipping {entry}: not a regular file")
                continue
            if log_stat is not None and os.path.samestat(info, log_stat):
                logger.debug(f"Skipping {entry}: run log")
                continue

            self._process_file(entry, info.st_size)

        logger.info(
            f"Processed {self.summary.processed_files} files "
            f"({self.summary.unsupported} unsupported, {self.summary.failed} failed)"
        )
        return self.summary

    def _process_file(self, path: Path, size_bytes: int) -> None:
        category = self.rules.classify(path)
        if category is None:
            message = f"{path}: extension {file_extension(path)} not supported"
            self.run_log.error(message)
            self.summary.unsupported += 1
            return

        try:
            target_path = self.mover.move(path, category)
        except MoveError as e:
            self._fail(f"move error {path} -> {category}: {e}")
            return

        self.summary.record(category, size_bytes, path, target_path)
        self.run_log.success(f"moved: {path} -> {category}")

    def _fail(self, message: str) -> None:
        logger.warning(message)
        self.run_log.error(message)
        self.summary.failed += 1
        self.summary.errors.append(message)

    def _run_log_stat(self) -> Optional[os.stat_result]:
        path = self.run_log.path
        if path is None:
            return None
        try:
            return os.stat(path)
        except OSError:
            return None
