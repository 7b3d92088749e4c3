"""Checkpoint storage for incremental log scanning.

A checkpoint is persisted as a two-line seek file: the first line of the log
as seen at the previous run, followed by the byte offset where that run
stopped reading. The file is rewritten wholesale after every run.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from pathlib import Path

from .config import PluginConfig
from .models import ENCODING, ERRORS, Checkpoint, ScanResult

logger = logging.getLogger(__name__)

SEEK_FILE_SUFFIX = "_log.seek"


class CheckpointStore:
    """Loads and saves checkpoints in the configured working directory.

    Loading never fails the run: a missing, unreadable or malformed seek file
    simply means there is no prior state. Saving failures are logged and
    reported to the caller, who carries on with the monitoring result.

    Attributes:
        working_dir: Directory holding the seek files.
    """

    def __init__(self, config: PluginConfig):
        """Initialize checkpoint store.

        Args:
            config: Plugin configuration providing the working directory.
        """
        self.working_dir = Path(config.working_dir)

    def seek_file_path(self, logfile: str | Path) -> Path:
        """Return the seek file used for ``logfile``.

        The name is the log's base name without its last extension, suffixed
        with ``_log.seek``, so ``/var/log/app.log`` maps to ``app_log.seek``.
        """
        return self.working_dir / f"{Path(logfile).stem}{SEEK_FILE_SUFFIX}"

    def load(self, path: str | Path) -> Checkpoint:
        """Load a checkpoint from ``path``.

        Args:
            path: Seek file to read.

        Returns:
            The stored Checkpoint, or an empty one if there is no usable state.
        """
        seek_file = Path(path)
        if not seek_file.exists():
            logger.info(f"No seek file at {seek_file}, starting fresh")
            return Checkpoint()

        try:
            data = seek_file.read_bytes()
        except OSError as e:
            logger.warning(f"Could not read seek file {seek_file}: {e}, starting fresh")
            return Checkpoint()

        first, sep, rest = data.partition(b"\n")
        first_line = (first + sep).decode(ENCODING, ERRORS)
        offset_field = rest.partition(b"\n")[0]

        try:
            offset = int(offset_field.strip())
        except ValueError:
            logger.warning(f"Malformed offset {offset_field!r} in {seek_file}, using 0")
            offset = 0
        if offset < 0:
            logger.warning(f"Negative offset {offset} in {seek_file}, using 0")
            offset = 0
        if offset > sys.maxsize:
            logger.warning(f"Offset {offset} in {seek_file} is out of range, using 0")
            offset = 0

        logger.debug(f"Loaded checkpoint from {seek_file}: offset {offset}")
        return Checkpoint(matched_first_line=first_line, byte_offset=offset)

    @staticmethod
    def advance(checkpoint: Checkpoint, scan: ScanResult) -> Checkpoint:
        """Return the checkpoint that follows ``checkpoint`` after ``scan``."""
        return Checkpoint(matched_first_line=scan.first_line, byte_offset=scan.end_offset)

    def save(self, path: str | Path, checkpoint: Checkpoint) -> bool:
        """Overwrite the seek file at ``path`` with ``checkpoint``.

        The first line keeps its own newline; one is appended only when it is
        missing. Writes go to a temporary file that is then renamed over the
        seek file.

        Args:
            path: Seek file to write.
            checkpoint: Checkpoint to persist.

        Returns:
            True if the checkpoint was written, False otherwise.
        """
        seek_file = Path(path)
        first_line = checkpoint.matched_first_line
        if not first_line.endswith("\n"):
            first_line += "\n"
        payload = first_line.encode(ENCODING, ERRORS) + f"{checkpoint.byte_offset}\n".encode()

        temp_file = seek_file.with_name(seek_file.name + ".tmp")
        try:
            with temp_file.open("wb") as f:
                f.write(payload)
                f.flush()
            temp_file.replace(seek_file)
        except OSError as e:
            logger.warning(f"Trouble: Unable to save to {seek_file}: {e}")
            with contextlib.suppress(OSError):
                temp_file.unlink(missing_ok=True)
            return False

        logger.debug(f"Saved checkpoint to {seek_file}: offset {checkpoint.byte_offset}")
        return True
