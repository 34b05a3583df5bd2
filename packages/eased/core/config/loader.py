"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from eased.core.config.models import EasedConfig
from eased.core.curves.registry import CurveRegistry, build_default_registry
from eased.core.utils.logging import configure_logging

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path("eased.yaml")


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
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

    Format is auto-detected from the file extension.

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

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config in {path} must be a mapping, got {type(content).__name__}")
    return content


def load_eased_config(path: str | Path | None = None) -> EasedConfig:
    """Load and validate configuration.

    Args:
        path: Path to config file (.json, .yaml, or .yml). Defaults to
              eased.yaml in the working directory.

    Returns:
        Validated EasedConfig; all defaults when the file does not exist.

    Raises:
        ValidationError: If config is invalid
    """
    if path is None:
        path = _DEFAULT_CONFIG_PATH

    if not Path(path).exists():
        logger.debug("No config file at %s, using defaults", path)
        return EasedConfig()

    config = EasedConfig.model_validate(load_config(path))
    logger.info("Loaded config from %s", path)
    return config


def configure_logging_from_config(config: EasedConfig | None = None) -> None:
    """Configure Python logging from config.

    Args:
        config: EasedConfig instance (loads default if None)
    """
    if config is None:
        config = load_eased_config()

    configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def build_registry_from_config(config: EasedConfig | None = None) -> CurveRegistry:
    """Build the built-in curve registry with the configured sampling defaults."""
    if config is None:
        config = load_eased_config()

    return build_default_registry(
        default_samples=config.sampling.default_samples,
        include_end=config.sampling.include_end,
    )
