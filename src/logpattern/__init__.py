"""Incremental log pattern check for Nagios-compatible schedulers.

Each run counts new lines containing a literal text pattern in one log file,
resuming from the byte offset saved by the previous run, and reports
OK/WARNING/CRITICAL against two thresholds.

Key Components:
    - models: Checkpoint, ScanResult, Severity and PluginResult
    - config: Configuration dataclass and YAML/environment loading
    - checkpoint_store: Seek file persistence
    - log_scanner: Resumable pattern counting with first-line identity check
    - thresholds: Match count classification
    - cli: Argument parsing and exit codes

Example:
    >>> from logpattern import CheckpointStore, LogScanner, PluginConfig, evaluate
    >>> store = CheckpointStore(PluginConfig(working_dir="/tmp"))
    >>> seek_file = store.seek_file_path("/var/log/app.log")
    >>> with LogScanner("/var/log/app.log") as scanner:
    ...     scan = scanner.scan("ERROR", store.load(seek_file))
    >>> evaluate(scan.match_count, warn_level=5, crit_level=10).message
"""

from __future__ import annotations

__version__ = "0.1.0"

from .checkpoint_store import CheckpointStore
from .config import PluginConfig, load_config
from .log_scanner import LogfileUnavailableError, LogScanner
from .models import Checkpoint, PluginResult, ScanResult, Severity
from .thresholds import evaluate

__all__ = [
    "Checkpoint",
    "CheckpointStore",
    "LogScanner",
    "LogfileUnavailableError",
    "PluginConfig",
    "PluginResult",
    "ScanResult",
    "Severity",
    "evaluate",
    "load_config",
]
