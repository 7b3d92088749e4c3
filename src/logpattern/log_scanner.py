"""Incremental scanning of a single log file.

The scanner reads the log's first line to decide whether the file is still
the log seen at the previous run. If it is, counting resumes at the stored
byte offset; otherwise counting starts right after the first line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from .models import ENCODING, ERRORS, Checkpoint, ScanResult

logger = logging.getLogger(__name__)


class LogfileUnavailableError(OSError):
    """Raised when the monitored log file cannot be opened."""

    def __init__(self, path: str | Path, reason: OSError | None = None):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"File not found: {self.path}")


class LogScanner:
    """Counts pattern matches in a log file from a resumable byte offset.

    The file is opened in binary mode so that offsets are exact byte
    positions. Use it as a context manager to guarantee the handle is
    released:

        with LogScanner("/var/log/app.log") as scanner:
            result = scanner.scan("ERROR", checkpoint)

    Attributes:
        path: Path of the monitored log file.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._fh: BinaryIO | None = None

    def __enter__(self) -> LogScanner:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def handle(self) -> BinaryIO:
        if self._fh is None:
            raise ValueError(f"Log file {self.path} is not open")
        return self._fh

    def open(self) -> LogScanner:
        """Open the log file for reading.

        Raises:
            LogfileUnavailableError: If the file cannot be opened.
        """
        try:
            self._fh = self.path.open("rb")
        except OSError as e:
            logger.debug(f"Failed to open log file {self.path}: {e}")
            raise LogfileUnavailableError(self.path, e) from e
        return self

    def first_line(self) -> str:
        """Read the first line, leaving the cursor at the start of line two.

        Returns:
            The first line including its newline if present, or an empty
            string for an empty file.
        """
        fh = self.handle
        fh.seek(0)
        return fh.readline().decode(ENCODING, ERRORS)

    def seek(self, offset: int) -> None:
        """Move the cursor to an absolute byte offset.

        Offsets past end-of-file are accepted and simply yield no lines.
        """
        self.handle.seek(offset)

    def count_matches(self, pattern: str) -> tuple[int, int]:
        """Count lines from the cursor to end-of-file containing ``pattern``.

        Matching is a case-sensitive literal substring test.

        Returns:
            Tuple of (match_count, end_offset).
        """
        fh = self.handle
        needle = pattern.encode(ENCODING, ERRORS)
        count = 0
        for line in fh:
            if needle in line:
                count += 1
        return count, fh.tell()

    def scan(self, pattern: str, checkpoint: Checkpoint) -> ScanResult:
        """Count new matches, resuming from ``checkpoint`` when it still applies.

        The checkpoint applies only if its stored first line equals the
        current first line exactly. When it does not (first run, rotation,
        truncation) the cursor stays after line one, so line one is not
        counted.
        """
        first_line = self.first_line()

        if first_line == checkpoint.matched_first_line:
            logger.debug(f"Resuming {self.path} at offset {checkpoint.byte_offset}")
            self.seek(checkpoint.byte_offset)
        else:
            logger.info(f"First line of {self.path} changed, scanning from line two")

        match_count, end_offset = self.count_matches(pattern)
        logger.debug(
            f"Scanned {self.path}: {match_count} matching lines, end offset {end_offset}"
        )
        return ScanResult(first_line=first_line, end_offset=end_offset, match_count=match_count)

    def close(self) -> None:
        """Release the file handle. Safe to call more than once."""
        if self._fh is not None:
            self._fh.close()
            self._fh = None
