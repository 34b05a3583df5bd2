"""Shared utilities for eased."""

from eased.core.utils.logging import configure_logging, get_logger
from eased.core.utils.math import cos, exp2, sin, sqrt

__all__ = [
    "configure_logging",
    "cos",
    "exp2",
    "get_logger",
    "sin",
    "sqrt",
]
