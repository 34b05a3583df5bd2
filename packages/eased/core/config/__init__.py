"""Configuration management for eased."""

from eased.core.config.loader import (
    build_registry_from_config,
    configure_logging_from_config,
    detect_format,
    load_config,
    load_eased_config,
)
from eased.core.config.models import EasedConfig, LoggingConfig, SamplingConfig

__all__ = [
    # Loaders
    "build_registry_from_config",
    "configure_logging_from_config",
    "detect_format",
    "load_config",
    "load_eased_config",
    # Models
    "EasedConfig",
    "LoggingConfig",
    "SamplingConfig",
]
