"""
Pydantic models for histogram bins and chart geometry.
"""

from pydantic import BaseModel, Field


class HistogramBin(BaseModel):
    """One bin: [x0, x1), closed on the right for the last bin."""
    x0: float
    x1: float
    count: int


class AxisTick(BaseModel):
    value: float
    label: str
    position: float  # px along the bounded width


class HistogramOutput(BaseModel):
    """Everything needed to draw one metric's histogram."""
    metric: str
    x_domain: list[float] = Field(..., description="Niced [min, max] of the metric")
    x_range: list[float]
    y_domain: list[float] = Field(..., description="Niced [0, max count]")
    y_range: list[float]
    bins: list[HistogramBin]
    thresholds: list[float]
    mean: float
    mean_position: float  # px, x scale applied to the mean
    ticks: list[AxisTick]
    total_count: int
    skipped_count: int = 0
