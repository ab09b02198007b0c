"""
Weather dataset loader.

Reads a JSON array of daily weather observations (Dark Sky style objects:
humidity, dewPoint, windSpeed, ...) into WeatherRecord models, and pulls
a single metric out of them as a numeric array for binning.
"""

import json
import logging
import math
import os

import numpy as np
from pydantic import ValidationError

from app.models.weather import WeatherRecord

logger = logging.getLogger(__name__)


def load_dataset(path: str | os.PathLike) -> list[WeatherRecord]:
    """Read and parse a weather dataset file. Missing files raise FileNotFoundError."""
    with open(path, encoding="utf-8") as fh:
        text = fh.read()
    records = parse_dataset(text)
    logger.info("Loaded %d weather records from %s", len(records), path)
    return records


def parse_dataset(text: str) -> list[WeatherRecord]:
    """
    Parse dataset JSON text into weather records.

    Entries that are not objects, or whose known fields fail validation,
    are skipped with a warning.

    Raises:
        ValueError: malformed JSON, a non-array top level, or no usable records.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not parse dataset JSON: {e}") from e

    if not isinstance(raw, list):
        raise ValueError("Dataset must be a JSON array of weather records.")
    if len(raw) == 0:
        raise ValueError("Dataset contains no records.")

    records: list[WeatherRecord] = []
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            logger.warning("Skipping record %d: expected an object, got %s", idx, type(item).__name__)
            continue
        try:
            records.append(WeatherRecord.model_validate(item))
        except ValidationError as e:
            logger.warning(
                "Skipping record %d (date=%s): %s",
                idx,
                item.get("date"),
                e.errors()[0]["msg"] if e.errors() else e,
            )
            continue

    if len(records) == 0:
        raise ValueError("No valid weather records found in dataset.")

    return records


def metric_values(dataset: list[WeatherRecord], metric: str) -> np.ndarray:
    """Finite values of `metric` across the dataset, in record order."""
    values = []
    missing = 0
    for rec in dataset:
        value = getattr(rec, metric, None)
        try:
            value = float(value)
        except (TypeError, ValueError):
            missing += 1
            continue
        if not math.isfinite(value):
            missing += 1
            continue
        values.append(value)

    if missing:
        logger.warning(
            "%d of %d records have no numeric %s; they are left out of the histogram",
            missing, len(dataset), metric,
        )
    return np.array(values, dtype=float)
