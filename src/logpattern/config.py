"""Configuration for the log pattern check.

Defaults can be overridden from an optional YAML file and from environment
variables. The working directory holds the seek files and is passed to the
checkpoint store explicitly.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CHECK_LOGPATTERN_CONFIG"
WORKING_DIR_ENV_VAR = "CHECK_LOGPATTERN_WORKING_DIR"
LOG_LEVEL_ENV_VAR = "CHECK_LOGPATTERN_LOG_LEVEL"


@dataclass(frozen=True)
class PluginConfig:
    """Configuration for a plugin run.

    Attributes:
        working_dir: Directory where seek files live (default: system temp dir).
        log_level: Level for diagnostics written to stderr (default: WARNING).
        log_file: Optional path of a rotating diagnostic log file.
    """

    working_dir: str = field(default_factory=tempfile.gettempdir)
    log_level: str = "WARNING"
    log_file: str | None = None


def _read_config_file(config_path: Path) -> dict:
    """Read a YAML config file into a mapping.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid YAML or not a mapping
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse configuration YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")

    logger.debug(f"Loaded configuration from {config_path}")
    return data


def load_config(path: str | Path | None = None) -> PluginConfig:
    """Build the plugin configuration.

    Precedence, lowest to highest: built-in defaults, the YAML file named by
    ``path`` (or the CHECK_LOGPATTERN_CONFIG environment variable), then the
    CHECK_LOGPATTERN_WORKING_DIR and CHECK_LOGPATTERN_LOG_LEVEL variables.

    Args:
        path: Optional YAML config file.

    Returns:
        The resolved PluginConfig.
    """
    config = PluginConfig()

    config_path = path or os.getenv(CONFIG_ENV_VAR)
    if config_path:
        data = _read_config_file(Path(config_path))
        known = {f.name for f in fields(PluginConfig)}
        overrides = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown configuration key: {key}")
                continue
            overrides[key] = None if value is None else str(value)
        if overrides.get("working_dir") is None:
            overrides.pop("working_dir", None)
        if overrides.get("log_level") is None:
            overrides.pop("log_level", None)
        config = replace(config, **overrides)

    env_working_dir = os.getenv(WORKING_DIR_ENV_VAR)
    if env_working_dir:
        config = replace(config, working_dir=env_working_dir)

    env_log_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if env_log_level:
        config = replace(config, log_level=env_log_level)

    return config
