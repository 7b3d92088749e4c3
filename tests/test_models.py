"""Tests for data models."""

import dataclasses

import pytest

from logpattern.models import ENCODING, ERRORS, Checkpoint, PluginResult, ScanResult, Severity
from logpattern.thresholds import evaluate, unknown


class TestSeverity:
    """Tests for the Severity enum."""

    @pytest.mark.parametrize(
        ("severity", "code"),
        [
            (Severity.OK, 0),
            (Severity.WARNING, 1),
            (Severity.CRITICAL, 2),
            (Severity.UNKNOWN, 3),
        ],
    )
    def test_exit_codes(self, severity: Severity, code: int) -> None:
        assert severity.exit_code == code

    def test_label(self) -> None:
        assert Severity.WARNING.label == "WARNING"

    @pytest.mark.parametrize("severity", list(Severity))
    def test_label_prefixes_message(self, severity: Severity) -> None:
        """Test that every status line starts with the severity label."""
        results = {
            Severity.OK: evaluate(0, warn_level=1, crit_level=2),
            Severity.WARNING: evaluate(1, warn_level=1, crit_level=2),
            Severity.CRITICAL: evaluate(2, warn_level=1, crit_level=2),
            Severity.UNKNOWN: unknown("bad arguments"),
        }
        assert results[severity].message.startswith(f"{severity.label}: ")


class TestCheckpoint:
    """Tests for the Checkpoint value type."""

    def test_defaults(self) -> None:
        """Test that the default checkpoint means no prior state."""
        checkpoint = Checkpoint()
        assert checkpoint.matched_first_line == ""
        assert checkpoint.byte_offset == 0

    def test_is_immutable(self, sample_checkpoint: Checkpoint) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_checkpoint.byte_offset = 0  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Checkpoint("a\n", 2) == Checkpoint("a\n", 2)
        assert Checkpoint("a\n", 2) != Checkpoint("a", 2)


class TestResults:
    """Tests for ScanResult and PluginResult."""

    def test_scan_result_is_immutable(self) -> None:
        result = ScanResult(first_line="HEAD\n", end_offset=26, match_count=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.match_count = 0  # type: ignore[misc]

    def test_plugin_result_exit_code(self) -> None:
        result = PluginResult(Severity.CRITICAL, "CRITICAL: 3 lines matching")
        assert result.exit_code == 2


class TestSharedEncoding:
    """Tests for the encoding shared by the scanner and the seek file."""

    def test_scanner_and_store_use_same_encoding(self) -> None:
        from logpattern import checkpoint_store, log_scanner

        assert checkpoint_store.ENCODING is log_scanner.ENCODING is ENCODING
        assert checkpoint_store.ERRORS is log_scanner.ERRORS is ERRORS
