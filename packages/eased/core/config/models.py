"""Configuration models for eased."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from eased.core.utils.logging import DEFAULT_FORMAT


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = DEFAULT_FORMAT
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")


class SamplingConfig(BaseModel):
    """Defaults used when sampling curves through a registry."""

    model_config = ConfigDict(extra="forbid")

    default_samples: int = Field(default=64, ge=2, description="Samples per curve")
    include_end: bool = Field(default=True, description="Include t = 1.0 in sample grids")
    tolerance: float = Field(
        default=1e-9, gt=0.0, description="Tolerance for curve property checks"
    )


class EasedConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid")

    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
