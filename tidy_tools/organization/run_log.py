"""
Run log for organization operations.

Every organize run appends one line per event to a plain-text log:

    2024/01/15 09:30:00 [SUCCESS] moved: /data/inbox/a.jpg -> Images
    2024/01/15 09:30:00 [ERROR] /data/inbox/c.xyz: extension .xyz not supported
"""

import logging
from pathlib import Path
from typing import Optional, TextIO

from .errors import LogFileError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(outcome)s] %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

SUCCESS = "SUCCESS"
ERROR = "ERROR"


def open_run_log(log_path: Path) -> TextIO:
    """
    Open the run log for appending.

    The returned handle is a context manager; close it when the run ends.

    Args:
        log_path: Path of the log file

    Returns:
        Writable text handle

    Raises:
        LogFileError: If the file cannot be opened
    """
    log_path = Path(log_path)
    try:
        handle = open(log_path, "a", encoding="utf-8")
    except OSError as e:
        raise LogFileError(log_path, e) from e

    logger.debug(f"Opened run log {log_path}")
    return handle


class RunLog:
    """Event log bound to a single writable sink."""

    def __init__(self, sink: TextIO, name: str = "tidy_tools.run"):
        """
        Initialize run log.

        Args:
            sink: Writable text stream, owned by the caller
            name: Logger name shown in diagnostics
        """
        self.sink = sink
        # Unregistered logger: private to this instance, never propagates.
        self._logger = logging.Logger(name, level=logging.INFO)
        self._logger.propagate = False
        self._handler = logging.StreamHandler(sink)
        self._handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        )
        self._logger.addHandler(self._handler)
        self._closed = False

    @property
    def path(self) -> Optional[Path]:
        """Filesystem path of the sink, when it is a regular file."""
        name = getattr(self.sink, "name", None)
        if isinstance(name, str):
            return Path(name)
        return None

    def success(self, message: str) -> None:
        self._logger.info(message, extra={"outcome": SUCCESS})

    def error(self, message: str) -> None:
        self._logger.error(message, extra={"outcome": ERROR})

    def close(self) -> None:
        """Flush and detach from the sink. The sink itself stays open."""
        if self._closed:
            return
        self._handler.flush()
        self._logger.removeHandler(self._handler)
        self._closed = True
