"""Map match counts to plugin results."""

from __future__ import annotations

from .models import PluginResult, Severity


def _result(severity: Severity, text: str) -> PluginResult:
    return PluginResult(severity, f"{severity.label}: {text}")


def evaluate(match_count: int, warn_level: int, crit_level: int) -> PluginResult:
    """Classify ``match_count`` against the two thresholds.

    The critical threshold is checked first, so it wins when
    ``crit_level < warn_level``. The thresholds are not validated against
    each other.
    """
    if match_count >= crit_level:
        return _result(Severity.CRITICAL, f"{match_count} lines matching")
    if match_count >= warn_level:
        return _result(Severity.WARNING, f"{match_count} lines matching")
    return _result(Severity.OK, "No matches found")


def file_not_found(path: str) -> PluginResult:
    return _result(Severity.CRITICAL, f"File not found: {path}")


def unknown(message: str) -> PluginResult:
    return _result(Severity.UNKNOWN, message)
