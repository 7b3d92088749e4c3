"""Data models for the log pattern check.

This module defines the value types passed between the checkpoint store,
the log scanner and the threshold evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Shared by the log reader and the seek file so first lines compare byte for byte.
ENCODING = "utf-8"
ERRORS = "surrogateescape"


class Severity(Enum):
    """Plugin status as understood by the monitoring scheduler.

    The value of each member is the process exit code reported for it.

    Attributes:
        OK: Match count below the warning threshold.
        WARNING: Match count reached the warning threshold.
        CRITICAL: Match count reached the critical threshold, or the log
            file could not be opened.
        UNKNOWN: The plugin was invoked incorrectly.
    """

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def exit_code(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class Checkpoint:
    """Scan progress carried from one invocation to the next.

    Attributes:
        matched_first_line: First line of the log at the previous run, verbatim
            including its trailing newline. Empty when there is no prior state.
        byte_offset: Byte position where the previous run stopped reading.
    """

    matched_first_line: str = ""
    byte_offset: int = 0


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning one log file.

    Attributes:
        first_line: Current first line of the log (with terminator if present).
        end_offset: Cursor position after reading to end-of-file.
        match_count: Number of lines containing the pattern.
    """

    first_line: str
    end_offset: int
    match_count: int


@dataclass(frozen=True)
class PluginResult:
    """Single status line plus the severity that decides the exit code."""

    severity: Severity
    message: str

    @property
    def exit_code(self) -> int:
        return self.severity.exit_code
