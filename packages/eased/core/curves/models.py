"""Curve sample model and easing callable protocol.

CurvePoint is the single primitive produced when an easing curve is sampled:
a normalized time ``t`` in [0, 1] and the curve's value ``v`` at that time.
"""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class EasingFunction(Protocol):
    """Any callable mapping normalized progress to an eased value."""

    def __call__(self, t: float, /) -> float: ...


class CurvePoint(BaseModel):
    """A single sampled point on an easing curve.

    ``t`` is normalized to [0, 1]. ``v`` is not range-checked: back and
    elastic curves leave [0, 1] on purpose. This model is immutable
    (frozen=True).

    Attributes:
        t: Normalized time in range [0, 1].
        v: Curve value at t.

    Example:
        >>> point = CurvePoint(t=0.5, v=1.08)
        >>> point.v
        1.08
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized time [0,1]")
    v: float = Field(..., description="Eased value at t")
