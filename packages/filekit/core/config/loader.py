"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from filekit.core.config.models import FileKitConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FILEKIT_CONFIG"
LOG_LEVEL_ENV_VAR = "FILEKIT_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("filekit.json")
        'json'
        >>> detect_format("filekit.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    with path.open("r", encoding="utf-8") as f:
        if fmt == "json":
            try:
                content = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
        else:
            try:
                content = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_filekit_config(path: str | Path | None = None) -> FileKitConfig:
    """Load and validate FileKit configuration.

    When path is None, the FILEKIT_CONFIG environment variable is used; with
    neither set, defaults are returned. FILEKIT_LOG_LEVEL overrides the
    configured log level.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Validated FileKitConfig

    Raises:
        FileNotFoundError: If the config file does not exist
        ValueError: If the file cannot be parsed
        ValidationError: If config is invalid
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None

    raw: dict[str, Any] = {}
    if path is not None:
        raw = load_config(path)
        logger.debug(f"Loaded FileKit config from {path}")

    level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if level:
        raw = {**raw, "logging": {**(raw.get("logging") or {}), "level": level}}

    return FileKitConfig.model_validate(raw)
