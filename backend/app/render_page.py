"""
Render the weather histogram page from a dataset file.

    python -m app.render_page data/seattle_wa_weather_data.json -o histograms.html
"""

import argparse
import logging
import sys

from app.config import DATA_PATH, DEFAULT_METRICS, DEFAULT_THRESHOLD_COUNT
from app.engine.dataset_loader import load_dataset
from app.engine.page_builder import draw_bars
from app.log import config_logger

logger = logging.getLogger(__name__)


def get_args(argv=None):
    """
    Parse command line arguments for the histogram renderer.
        :return: Parsed arguments.
        :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(description="Weather Histogram Renderer")
    parser.add_argument(
        "dataset",
        nargs="?",
        default=DATA_PATH,
        help="JSON weather dataset (default: $WEATHER_DATA_PATH or %(default)s)",
    )
    parser.add_argument(
        "-o", "--output", default="histograms.html", help="HTML file to write"
    )
    parser.add_argument(
        "--metric",
        action="append",
        dest="metrics",
        help="Metric to draw; repeat for several (default: all)",
    )
    parser.add_argument(
        "--thresholds",
        type=int,
        default=DEFAULT_THRESHOLD_COUNT,
        help="Approximate number of bin thresholds",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    if args.thresholds < 0:
        parser.error("--thresholds must be zero or positive")

    return args


def main(argv=None) -> int:
    args = get_args(argv)
    config_logger(logging.DEBUG if args.verbose else logging.INFO)

    metrics = args.metrics or DEFAULT_METRICS
    try:
        dataset = load_dataset(args.dataset)
        page = draw_bars(dataset, metrics, args.thresholds)
    except (OSError, ValueError) as e:
        logger.error("Could not render histograms from %s: %s", args.dataset, e)
        return 1

    try:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(page)
    except OSError as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1
    logger.info("Wrote %d histograms to %s", len(metrics), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
