"""Shared fixtures for log pattern check tests."""

import logging
from pathlib import Path

import pytest

from logpattern.checkpoint_store import CheckpointStore
from logpattern.config import PluginConfig
from logpattern.logging_manager import LOGGER_NAME
from logpattern.models import Checkpoint


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration environment variables from leaking into tests."""
    for name in (
        "CHECK_LOGPATTERN_CONFIG",
        "CHECK_LOGPATTERN_WORKING_DIR",
        "CHECK_LOGPATTERN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_state_dir(tmp_path: Path) -> Path:
    """Create temporary working directory for seek files."""
    state_dir = tmp_path / "state"
    state_dir.mkdir()
    return state_dir


@pytest.fixture
def plugin_config(temp_state_dir: Path) -> PluginConfig:
    """Create PluginConfig pointing at the temporary working directory."""
    return PluginConfig(working_dir=str(temp_state_dir))


@pytest.fixture
def checkpoint_store(plugin_config: PluginConfig) -> CheckpointStore:
    """Create CheckpointStore with temporary directory."""
    return CheckpointStore(plugin_config)


@pytest.fixture
def temp_log_file(tmp_path: Path) -> Path:
    """Create log file whose first line is a header and three later lines match ERR."""
    log_file = tmp_path / "app.log"
    log_file.write_text("HEAD\nERR a\nok\nERR b\nERR c\n")
    return log_file


@pytest.fixture
def empty_log_file(tmp_path: Path) -> Path:
    """Create empty log file."""
    log_file = tmp_path / "empty.log"
    log_file.write_text("")
    return log_file


@pytest.fixture
def sample_checkpoint() -> Checkpoint:
    """Create sample Checkpoint for testing."""
    return Checkpoint(matched_first_line="2025-01-15 10:30:00 service started\n", byte_offset=1024)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed on the package logger by a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
