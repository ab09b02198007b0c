"""
HTML page holding one histogram per metric.
"""

import html
import logging
import xml.etree.ElementTree as ET
from typing import Optional, Sequence

from app.config import CHART_DIMENSIONS, DEFAULT_METRICS, DEFAULT_THRESHOLD_COUNT
from app.engine.binning import Thresholds
from app.engine.svg_renderer import draw_histogram
from app.models.weather import WeatherRecord

logger = logging.getLogger(__name__)

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; }}
#wrapper {{ display: flex; flex-wrap: wrap; }}
</style>
</head>
<body>
<div id="wrapper">
{charts}
</div>
</body>
</html>
"""


def draw_bars(
    dataset: list[WeatherRecord],
    metrics: Optional[Sequence[str]] = None,
    thresholds: Thresholds = DEFAULT_THRESHOLD_COUNT,
    dimensions: dict = CHART_DIMENSIONS,
    title: str = "Weather Histograms",
) -> str:
    """
    Render a histogram for each metric into a single HTML document.

    Charts appear inside the #wrapper container in `metrics` order
    (DEFAULT_METRICS when not given). Any metric that cannot be drawn
    raises ValueError; nothing is partially rendered.
    """
    if metrics is None:
        metrics = DEFAULT_METRICS

    charts = []
    for metric in metrics:
        svg = draw_histogram(dataset, metric, thresholds, dimensions)
        charts.append(ET.tostring(svg, encoding="unicode"))
        logger.debug("Drew histogram for %s", metric)

    logger.info("Rendered %d histograms from %d records", len(charts), len(dataset))
    return _PAGE_TEMPLATE.format(title=html.escape(title), charts="\n".join(charts))
