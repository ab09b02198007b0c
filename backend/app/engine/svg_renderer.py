"""
SVG histogram renderer.

Draws one metric's histogram as an <svg> element tree:
- one bar per bin, width from the bin bounds, height from its count
- a count label above every non-empty bar
- a dashed vertical line and "mean" label at the metric's mean
- a bottom axis with tick marks and the metric name as title

No y axis is drawn; the count labels carry that information.
"""

import xml.etree.ElementTree as ET

from app.config import (
    AXIS_TICK_PADDING,
    AXIS_TICK_SIZE_INNER,
    AXIS_TICK_SIZE_OUTER,
    BAR_PADDING,
    CHART_DIMENSIONS,
    DEFAULT_THRESHOLD_COUNT,
    LABEL_OFFSET,
    MEAN_LABEL_Y,
    MEAN_LINE_TOP,
    STYLE,
    bounded_dimensions,
)
from app.engine.binning import Thresholds, compute_histogram
from app.engine.scales import LinearScale
from app.models.histogram import HistogramOutput
from app.models.weather import WeatherRecord

SVG_NS = "http://www.w3.org/2000/svg"

# Half-pixel shift keeps 1px axis strokes crisp
_AXIS_OFFSET = 0.5


def _n(value: float) -> str:
    """Format a coordinate for an SVG attribute."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _style(**props: str) -> str:
    return "; ".join(f"{k.replace('_', '-')}: {v}" for k, v in props.items())


def draw_histogram(
    dataset: list[WeatherRecord],
    metric: str,
    thresholds: Thresholds = DEFAULT_THRESHOLD_COUNT,
    dimensions: dict = CHART_DIMENSIONS,
) -> ET.Element:
    """Bin `metric` across the dataset and draw it. Returns the <svg> element."""
    histogram = compute_histogram(dataset, metric, thresholds, dimensions)
    return histogram_to_svg(histogram, dimensions)


def render_histogram_svg(
    dataset: list[WeatherRecord],
    metric: str,
    thresholds: Thresholds = DEFAULT_THRESHOLD_COUNT,
    dimensions: dict = CHART_DIMENSIONS,
) -> str:
    """Same as draw_histogram, serialized to SVG markup."""
    svg = draw_histogram(dataset, metric, thresholds, dimensions)
    return ET.tostring(svg, encoding="unicode")


def histogram_to_svg(histogram: HistogramOutput, dimensions: dict = CHART_DIMENSIONS) -> ET.Element:
    """Lay out an already-computed histogram as an <svg> element."""
    margin = dimensions["margin"]
    bounded_width, bounded_height = bounded_dimensions(dimensions)

    x_scale = LinearScale(histogram.x_domain, histogram.x_range)
    y_scale = LinearScale(histogram.y_domain, histogram.y_range)

    svg = ET.Element("svg", {
        "xmlns": SVG_NS,
        "width": _n(dimensions["width"]),
        "height": _n(dimensions["height"]),
        "data-metric": histogram.metric,
    })
    bounds = ET.SubElement(svg, "g", {
        "class": "bounds",
        "transform": f"translate({_n(margin['left'])}, {_n(margin['top'])})",
    })

    _draw_bins(bounds, histogram, x_scale, y_scale, bounded_height)
    _draw_mean(bounds, histogram, x_scale, bounded_height)
    _draw_x_axis(bounds, histogram, x_scale, bounded_width, bounded_height, margin["bottom"])

    return svg


def _draw_bins(
    bounds: ET.Element,
    histogram: HistogramOutput,
    x_scale: LinearScale,
    y_scale: LinearScale,
    bounded_height: float,
) -> None:
    bins_group = ET.SubElement(bounds, "g", {"class": "bins"})

    for b in histogram.bins:
        bin_group = ET.SubElement(bins_group, "g", {"class": "bin"})
        left = x_scale(b.x0)
        right = x_scale(b.x1)
        top = y_scale(b.count)

        ET.SubElement(bin_group, "rect", {
            "x": _n(left + BAR_PADDING / 2),
            "y": _n(top),
            "width": _n(max(0.0, right - left - BAR_PADDING)),
            "height": _n(bounded_height - top),
            "fill": STYLE["bar_fill"],
        })

        # Empty bins stay unlabeled
        if b.count == 0:
            continue
        label = ET.SubElement(bin_group, "text", {
            "x": _n(left + (right - left) / 2),
            "y": _n(top - LABEL_OFFSET),
            "fill": STYLE["label_fill"],
            "style": _style(
                text_anchor="middle",
                font_size=STYLE["label_font_size"],
                font_family=STYLE["font_family"],
            ),
        })
        label.text = str(b.count)


def _draw_mean(
    bounds: ET.Element,
    histogram: HistogramOutput,
    x_scale: LinearScale,
    bounded_height: float,
) -> None:
    mean_x = _n(x_scale(histogram.mean))

    ET.SubElement(bounds, "line", {
        "class": "mean",
        "x1": mean_x,
        "x2": mean_x,
        "y1": _n(MEAN_LINE_TOP),
        "y2": _n(bounded_height),
        "stroke": STYLE["mean_stroke"],
        "stroke-dasharray": STYLE["mean_dasharray"],
    })
    label = ET.SubElement(bounds, "text", {
        "class": "mean-label",
        "x": mean_x,
        "y": _n(MEAN_LABEL_Y),
        "fill": STYLE["mean_stroke"],
        "style": _style(font_size=STYLE["label_font_size"], text_anchor="middle"),
    })
    label.text = "mean"


def _draw_x_axis(
    bounds: ET.Element,
    histogram: HistogramOutput,
    x_scale: LinearScale,
    bounded_width: float,
    bounded_height: float,
    margin_bottom: float,
) -> None:
    axis = ET.SubElement(bounds, "g", {
        "class": "x-axis",
        "transform": f"translate(0, {_n(bounded_height)})",
        "fill": "none",
        "font-size": "10",
        "font-family": STYLE["font_family"],
        "text-anchor": "middle",
    })

    r0, r1 = x_scale.range
    ET.SubElement(axis, "path", {
        "class": "domain",
        "stroke": "currentColor",
        "d": (
            f"M{_n(r0 + _AXIS_OFFSET)},{AXIS_TICK_SIZE_OUTER}"
            f"V{_n(_AXIS_OFFSET)}H{_n(r1 + _AXIS_OFFSET)}V{AXIS_TICK_SIZE_OUTER}"
        ),
    })

    for tick in histogram.ticks:
        tick_group = ET.SubElement(axis, "g", {
            "class": "tick",
            "opacity": "1",
            "transform": f"translate({_n(tick.position + _AXIS_OFFSET)}, 0)",
        })
        ET.SubElement(tick_group, "line", {
            "stroke": "currentColor",
            "y2": str(AXIS_TICK_SIZE_INNER),
        })
        tick_label = ET.SubElement(tick_group, "text", {
            "fill": "currentColor",
            "y": str(max(AXIS_TICK_SIZE_INNER, 0) + AXIS_TICK_PADDING),
            "dy": "0.71em",
        })
        tick_label.text = tick.label

    title = ET.SubElement(axis, "text", {
        "class": "x-axis-label",
        "x": _n(bounded_width / 2),
        "y": _n(margin_bottom - 10),
        "fill": STYLE["axis_title_fill"],
        "style": _style(
            font_size=STYLE["axis_title_font_size"],
            text_transform="capitalize",
        ),
    })
    title.text = histogram.metric
