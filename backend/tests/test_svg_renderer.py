"""
Tests for the SVG histogram renderer.
"""

import xml.etree.ElementTree as ET

import pytest

from app.config import BAR_PADDING, CHART_DIMENSIONS, bounded_dimensions
from app.engine.binning import compute_histogram
from app.engine.scales import LinearScale
from app.engine.svg_renderer import SVG_NS, draw_histogram, render_histogram_svg


def _bin_groups(svg: ET.Element) -> list[ET.Element]:
    return svg.findall("./g[@class='bounds']/g[@class='bins']/g")


class TestDrawHistogram:
    def test_svg_size(self, sample_records):
        svg = draw_histogram(sample_records, "humidity")
        assert svg.tag == "svg"
        assert svg.get("width") == "600"
        assert svg.get("height") == "540"
        assert svg.get("data-metric") == "humidity"

    def test_bounds_translated_by_margins(self, sample_records):
        svg = draw_histogram(sample_records, "humidity")
        bounds = svg.find("./g[@class='bounds']")
        margin = CHART_DIMENSIONS["margin"]
        assert bounds.get("transform") == f"translate({margin['left']}, {margin['top']})"

    def test_one_bar_per_bin(self, sample_records):
        svg = draw_histogram(sample_records, "humidity")
        groups = _bin_groups(svg)
        assert len(groups) == 10
        assert all(g.find("rect") is not None for g in groups)

    def test_empty_bins_have_no_label(self, sample_records):
        histogram = compute_histogram(sample_records, "humidity")
        groups = _bin_groups(draw_histogram(sample_records, "humidity"))
        for b, g in zip(histogram.bins, groups):
            label = g.find("text")
            if b.count == 0:
                assert label is None
            else:
                assert label is not None
                assert label.text == str(b.count)

    def test_labels_sum_to_record_count(self, sample_records):
        groups = _bin_groups(draw_histogram(sample_records, "windBearing"))
        labels = [g.find("text") for g in groups]
        assert sum(int(t.text) for t in labels if t is not None) == 10

    def test_bar_geometry(self, sample_records):
        histogram = compute_histogram(sample_records, "humidity")
        x_scale = LinearScale(histogram.x_domain, histogram.x_range)
        y_scale = LinearScale(histogram.y_domain, histogram.y_range)
        _, bounded_height = bounded_dimensions()

        groups = _bin_groups(draw_histogram(sample_records, "humidity"))
        for b, g in zip(histogram.bins, groups):
            rect = g.find("rect")
            assert float(rect.get("x")) == pytest.approx(x_scale(b.x0) + BAR_PADDING / 2, abs=1e-3)
            assert float(rect.get("y")) == pytest.approx(y_scale(b.count), abs=1e-3)
            assert float(rect.get("width")) >= 0
            assert float(rect.get("height")) == pytest.approx(
                bounded_height - y_scale(b.count), abs=1e-3
            )
            assert rect.get("fill") == "cornflowerblue"

    def test_tallest_bar_reaches_top(self, sample_records):
        groups = _bin_groups(draw_histogram(sample_records, "humidity"))
        heights = [float(g.find("rect").get("height")) for g in groups]
        assert max(heights) == pytest.approx(460.0)

    def test_mean_line_at_scaled_mean(self, sample_records):
        histogram = compute_histogram(sample_records, "humidity")
        x_scale = LinearScale(histogram.x_domain, histogram.x_range)
        svg = draw_histogram(sample_records, "humidity")

        line = svg.find("./g[@class='bounds']/line[@class='mean']")
        assert float(line.get("x1")) == pytest.approx(x_scale(histogram.mean), abs=1e-3)
        assert line.get("x1") == line.get("x2")
        assert line.get("stroke") == "maroon"
        assert line.get("stroke-dasharray") == "2px 4px"
        assert float(line.get("y2")) == pytest.approx(460.0)

        label = svg.find("./g[@class='bounds']/text[@class='mean-label']")
        assert label.text == "mean"
        assert label.get("x") == line.get("x1")

    def test_axis_ticks_and_title(self, sample_records):
        svg = draw_histogram(sample_records, "humidity")
        axis = svg.find("./g[@class='bounds']/g[@class='x-axis']")
        assert axis.get("transform") == "translate(0, 460)"

        tick_labels = [t.find("text").text for t in axis.findall("g[@class='tick']")]
        assert tick_labels[0] == "0.50"
        assert tick_labels[-1] == "1.00"

        title = axis.find("text[@class='x-axis-label']")
        assert title.text == "humidity"
        assert "text-transform: capitalize" in title.get("style")
        assert float(title.get("x")) == pytest.approx(270.0)
        assert float(title.get("y")) == pytest.approx(40.0)

    def test_unknown_metric_raises(self, sample_records):
        with pytest.raises(ValueError):
            draw_histogram(sample_records, "visibility")


class TestRenderHistogramSvg:
    def test_markup_parses_as_svg(self, sample_records):
        markup = render_histogram_svg(sample_records, "dewPoint")
        root = ET.fromstring(markup)
        assert root.tag == f"{{{SVG_NS}}}svg"
        rects = list(root.iter(f"{{{SVG_NS}}}rect"))
        assert len(rects) > 0

    def test_negative_tick_labels(self, sample_records):
        markup = render_histogram_svg(sample_records, "dewPoint")
        assert "−10" in markup
