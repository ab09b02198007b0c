"""
Shared weather dataset fixtures (10 days, every metric present).
"""

import json

import pytest

from app.models.weather import WeatherRecord

_HUMIDITY = [0.5, 0.52, 0.55, 0.6, 0.61, 0.62, 0.9, 0.91, 0.95, 0.97]
_DEW_POINT = [-5.2, 10.1, 25.3, 30.0, 33.6, 40.2, 45.8, 50.1, 55.5, 60.4]
_WIND_SPEED = [1.2, 3.4, 2.2, 5.6, 7.8, 4.1, 3.3, 2.9, 6.0, 0.8]
_UV_INDEX = [0, 1, 1, 2, 3, 3, 4, 5, 6, 7]
_WIND_BEARING = [10, 45, 90, 120, 180, 200, 250, 300, 330, 355]
_MOON_PHASE = [0.03, 0.07, 0.1, 0.14, 0.17, 0.21, 0.25, 0.28, 0.32, 0.35]
_TEMPERATURE_MIN = [20.5, 28.1, 30.2, 35.0, 38.4, 40.0, 42.2, 45.5, 48.9, 52.3]
_TEMPERATURE_MAX = [35.1, 40.2, 44.4, 50.5, 55.0, 60.3, 65.7, 70.1, 75.8, 80.9]

SAMPLE_RECORDS = [
    {
        "date": f"2018-01-{i + 1:02d}",
        "summary": "Mostly cloudy throughout the day.",
        "icon": "partly-cloudy-day",
        "humidity": _HUMIDITY[i],
        "dewPoint": _DEW_POINT[i],
        "windSpeed": _WIND_SPEED[i],
        "uvIndex": _UV_INDEX[i],
        "windBearing": _WIND_BEARING[i],
        "moonPhase": _MOON_PHASE[i],
        "temperatureMin": _TEMPERATURE_MIN[i],
        "temperatureMax": _TEMPERATURE_MAX[i],
    }
    for i in range(10)
]


@pytest.fixture
def sample_json() -> str:
    return json.dumps(SAMPLE_RECORDS)


@pytest.fixture
def sample_records() -> list[WeatherRecord]:
    return [WeatherRecord.model_validate(r) for r in SAMPLE_RECORDS]
