"""
Pydantic model for a single daily weather observation.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class WeatherRecord(BaseModel):
    """One day of weather. Unknown fields (summary, icon, times...) are kept."""
    model_config = ConfigDict(extra="allow")

    date: Optional[str] = None
    humidity: Optional[float] = None
    dewPoint: Optional[float] = None
    windSpeed: Optional[float] = None
    uvIndex: Optional[float] = None
    windBearing: Optional[float] = None
    moonPhase: Optional[float] = None
    temperatureMin: Optional[float] = None
    temperatureMax: Optional[float] = None

    @field_validator(
        "humidity", "dewPoint", "windSpeed", "uvIndex", "windBearing",
        "moonPhase", "temperatureMin", "temperatureMax",
        mode="wrap",
    )
    @classmethod
    def _non_numeric_to_none(cls, value, handler):
        # A bad reading only blanks that metric; the rest of the day still counts
        try:
            return handler(value)
        except ValidationError:
            return None
