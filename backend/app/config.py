"""
Weather histogram configuration and constants.
"""

import os
from enum import Enum


class Metric(str, Enum):
    WIND_SPEED = "windSpeed"
    MOON_PHASE = "moonPhase"
    DEW_POINT = "dewPoint"
    HUMIDITY = "humidity"
    UV_INDEX = "uvIndex"
    WIND_BEARING = "windBearing"
    TEMPERATURE_MIN = "temperatureMin"
    TEMPERATURE_MAX = "temperatureMax"


# Order in which the page draws one histogram per metric.
DEFAULT_METRICS: list[str] = [m.value for m in Metric]

# Dataset location for the command line renderer
DATA_PATH = os.environ.get(
    "WEATHER_DATA_PATH", "data/seattle_wa_weather_data.json"
)

# Number of thresholds handed to the bin generator (13 bins)
DEFAULT_THRESHOLD_COUNT = 12

# Histograms read better wider than tall; the top margin leaves room
# for the count labels drawn above each bar.
CHART_WIDTH = 600
CHART_DIMENSIONS = {
    "width": CHART_WIDTH,
    "height": CHART_WIDTH * 0.9,
    "margin": {
        "top": 30,
        "right": 10,
        "bottom": 50,
        "left": 50,
    },
}

BAR_PADDING = 1.0  # px between neighbouring bars
LABEL_OFFSET = 5.0  # px gap between a bar and its count label

# Mean marker placement, in bounds coordinates
MEAN_LINE_TOP = 25.0
MEAN_LABEL_Y = 15.0

# Bottom axis geometry (px)
AXIS_TICK_SIZE_INNER = 6
AXIS_TICK_SIZE_OUTER = 6
AXIS_TICK_PADDING = 3

STYLE = {
    "bar_fill": "cornflowerblue",
    "label_fill": "darkgrey",
    "label_font_size": "12px",
    "font_family": "sans-serif",
    "mean_stroke": "maroon",
    "mean_dasharray": "2px 4px",
    "axis_title_fill": "black",
    "axis_title_font_size": "1.4em",
}


def bounded_dimensions(dimensions: dict = CHART_DIMENSIONS) -> tuple[float, float]:
    """Return (bounded_width, bounded_height): the chart size minus its margins."""
    margin = dimensions["margin"]
    bounded_width = dimensions["width"] - margin["left"] - margin["right"]
    bounded_height = dimensions["height"] - margin["top"] - margin["bottom"]
    return bounded_width, bounded_height
