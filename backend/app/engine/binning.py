"""
Equal-width histogram binning for one weather metric.

The x scale spans the metric's extent, widened to round values; nice ticks
inside that domain become the bin thresholds. Bins are half-open [x0, x1)
except the last, which also takes values equal to the domain's upper end.
"""

import logging
from typing import Sequence, Union

import numpy as np

from app.config import CHART_DIMENSIONS, DEFAULT_THRESHOLD_COUNT, bounded_dimensions
from app.engine.dataset_loader import metric_values
from app.engine.scales import LinearScale, ticks
from app.models.histogram import AxisTick, HistogramBin, HistogramOutput
from app.models.weather import WeatherRecord

logger = logging.getLogger(__name__)

Thresholds = Union[int, Sequence[float]]


def thresholds_for(domain: Sequence[float], count: Thresholds) -> list[float]:
    """
    Interior bin boundaries for a domain.

    An int asks for about that many nice ticks; a sequence is used as-is
    (sorted). Boundaries on or outside the domain ends are dropped.
    """
    x0, x1 = float(domain[0]), float(domain[1])
    if isinstance(count, (int, float)):
        candidates = ticks(x0, x1, count)
    else:
        candidates = sorted(float(t) for t in count)
    return [t for t in candidates if x0 < t < x1]


def bin_values(
    values: Sequence[float],
    domain: Sequence[float],
    thresholds: Thresholds = DEFAULT_THRESHOLD_COUNT,
) -> list[HistogramBin]:
    """
    Count values into len(thresholds) + 1 contiguous bins over `domain`.

    A value equal to a threshold lands in the bin above it. Values outside
    the domain and non-finite values are not counted.
    """
    x0, x1 = float(domain[0]), float(domain[1])
    if x1 < x0:
        x0, x1 = x1, x0
    tz = thresholds_for((x0, x1), thresholds)

    arr = np.asarray(values, dtype=float)
    arr = arr[np.isfinite(arr)]
    arr = arr[(arr >= x0) & (arr <= x1)]

    idx = np.searchsorted(np.asarray(tz, dtype=float), arr, side="right")
    counts = np.bincount(idx, minlength=len(tz) + 1)

    edges = [x0] + tz + [x1]
    return [
        HistogramBin(x0=edges[i], x1=edges[i + 1], count=int(counts[i]))
        for i in range(len(tz) + 1)
    ]


def compute_histogram(
    dataset: list[WeatherRecord],
    metric: str,
    thresholds: Thresholds = DEFAULT_THRESHOLD_COUNT,
    dimensions: dict = CHART_DIMENSIONS,
) -> HistogramOutput:
    """
    Bin one metric across the dataset and lay out its scales.

    Args:
        dataset: Parsed weather records.
        metric: Record field to histogram (e.g. "humidity").
        thresholds: Approximate threshold count, or explicit boundaries.
        dimensions: Chart size and margins.

    Returns:
        HistogramOutput with bins, niced scale domains, mean and axis ticks.

    Raises:
        ValueError: if no record has a finite value for `metric`.
    """
    values = metric_values(dataset, metric)
    if values.size == 0:
        raise ValueError(f"No numeric values found for metric '{metric}'.")

    bounded_width, bounded_height = bounded_dimensions(dimensions)

    x_scale = LinearScale(
        (float(values.min()), float(values.max())),
        (0.0, bounded_width),
    ).nice()

    bins = bin_values(values, x_scale.domain, thresholds)

    y_scale = LinearScale(
        (0.0, float(max(b.count for b in bins))),
        (bounded_height, 0.0),
    ).nice()

    mean = float(np.mean(values))

    fmt = x_scale.tick_format()
    axis_ticks = [
        AxisTick(value=t, label=fmt(t), position=x_scale(t))
        for t in x_scale.ticks()
    ]

    logger.debug(
        "Binned %d values of %s into %d bins over [%s, %s]",
        values.size, metric, len(bins), x_scale.domain[0], x_scale.domain[1],
    )

    return HistogramOutput(
        metric=metric,
        x_domain=x_scale.domain,
        x_range=x_scale.range,
        y_domain=y_scale.domain,
        y_range=y_scale.range,
        bins=bins,
        thresholds=[b.x0 for b in bins[1:]],
        mean=mean,
        mean_position=x_scale(mean),
        ticks=axis_ticks,
        total_count=int(values.size),
        skipped_count=len(dataset) - int(values.size),
    )
