"""Command-line entry point for the log pattern check.

Prints exactly one status line to stdout and returns the plugin exit code:
0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from . import __version__
from .checkpoint_store import CheckpointStore
from .config import PluginConfig, load_config
from .log_scanner import LogfileUnavailableError, LogScanner
from .logging_manager import setup_logging
from .models import PluginResult
from .thresholds import evaluate, file_not_found, unknown

logger = logging.getLogger(__name__)

PROG = "check_logpattern"
REQUIRED_OPTIONS = ("logfile", "text_to_match", "warn_level", "crit_level")


class PluginArgumentError(Exception):
    """Raised instead of argparse's exit(2), which would read as CRITICAL."""


class PluginArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise PluginArgumentError(message)


def build_parser() -> PluginArgumentParser:
    parser = PluginArgumentParser(
        prog=PROG,
        description=(
            "Count new lines matching a text pattern in a log file, resuming "
            "where the previous run stopped."
        ),
    )
    parser.add_argument("-l", "--logfile", metavar="LOGFILE", help="Supply the LOGFILE to monitor")
    parser.add_argument(
        "-t", "--text-to-match", metavar="PATTERN", help="Enter a text PATTERN to search for"
    )
    parser.add_argument(
        "-w", "--warn-level", metavar="WARNLEVEL", type=int,
        help="Warn on WARNLEVEL number of matches",
    )
    parser.add_argument(
        "-c", "--crit-level", metavar="CRITLEVEL", type=int,
        help="Crit on CRITLEVEL number of matches",
    )
    parser.add_argument("--state-dir", metavar="DIR", help="Directory for the seek file")
    parser.add_argument("--config", metavar="PATH", help="YAML configuration file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Write debug diagnostics to stderr"
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(
    logfile: str,
    pattern: str,
    warn_level: int,
    crit_level: int,
    config: PluginConfig,
) -> PluginResult:
    """Scan ``logfile`` once and classify the number of new matches.

    The checkpoint is only read and written once the log file has been
    opened. A failure to save the checkpoint does not change the result.
    """
    store = CheckpointStore(config)
    seek_file = store.seek_file_path(logfile)

    try:
        with LogScanner(logfile) as scanner:
            checkpoint = store.load(seek_file)
            scan = scanner.scan(pattern, checkpoint)
            store.save(seek_file, store.advance(checkpoint, scan))
    except LogfileUnavailableError as e:
        logger.debug(f"Log file unavailable: {e.reason}")
        return file_not_found(logfile)
    except OSError as e:
        logger.error(f"Error reading {logfile}: {e}")
        return unknown(f"Error reading {logfile}: {e}")

    return evaluate(scan.match_count, warn_level, crit_level)


def _emit(result: PluginResult) -> int:
    print(result.message)
    return result.exit_code


def main(argv: list[str] | None = None) -> int:
    """Run the plugin and return its exit code."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except PluginArgumentError as e:
        return _emit(unknown(str(e)))

    provided = sum(1 for name in REQUIRED_OPTIONS if getattr(args, name) is not None)
    if provided != len(REQUIRED_OPTIONS):
        return _emit(
            unknown(
                f"Incorrect number of arguments ({provided}), should be "
                f"{len(REQUIRED_OPTIONS)}. Run with -h for help."
            )
        )

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        return _emit(unknown(f"Configuration error: {e}"))

    if args.state_dir:
        config = replace(config, working_dir=args.state_dir)
    if args.verbose:
        config = replace(config, log_level="DEBUG")

    try:
        setup_logging(config.log_level, config.log_file)
    except (ValueError, OSError) as e:
        return _emit(unknown(f"Configuration error: {e}"))

    result = run(args.logfile, args.text_to_match, args.warn_level, args.crit_level, config)
    return _emit(result)


def cli_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
