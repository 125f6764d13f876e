from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import LookupFailure


class WeatherCategory(str, Enum):
    """Weather groups reported by the provider in ``weather[0].main``."""

    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"
    THUNDERSTORM = "Thunderstorm"
    SNOW = "Snow"
    MIST = "Mist"
    HAZE = "Haze"
    FOG = "Fog"
    DRIZZLE = "Drizzle"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "WeatherCategory":
        try:
            return cls(label)
        except ValueError:
            return cls.UNKNOWN


WEATHER_ICONS: Dict[WeatherCategory, str] = {
    WeatherCategory.CLEAR: "weather-sunny",
    WeatherCategory.CLOUDS: "weather-cloudy",
    WeatherCategory.RAIN: "weather-rainy",
    WeatherCategory.THUNDERSTORM: "weather-lightning",
    WeatherCategory.SNOW: "weather-snowy",
    WeatherCategory.MIST: "weather-fog",
    WeatherCategory.HAZE: "weather-fog",
    WeatherCategory.FOG: "weather-fog",
    WeatherCategory.DRIZZLE: "weather-rainy",
    WeatherCategory.UNKNOWN: "weather-sunny",
}


def icon_for(category: WeatherCategory) -> str:
    return WEATHER_ICONS[category]


def _flatten(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Pull the fields shared by current and forecast payloads out of their nested blocks."""
    main = payload["main"]
    weather = (payload.get("weather") or [{}])[0]
    wind = payload.get("wind") or {}
    return {
        "dt": payload["dt"],
        "temp": main["temp"],
        "feels_like": main["feels_like"],
        "humidity": main["humidity"],
        "pressure": main["pressure"],
        "category": weather.get("main"),
        "description": weather.get("description") or "",
        "icon": weather.get("icon"),
        "wind_speed": wind.get("speed", 0.0),
    }


class _Reading(BaseModel):
    model_config = ConfigDict(frozen=True)

    dt: int
    temp: float
    feels_like: float
    humidity: int
    pressure: int
    category: WeatherCategory = WeatherCategory.UNKNOWN
    description: str = ""
    icon: Optional[str] = None
    wind_speed: float = 0.0  # m/s

    @field_validator("category", mode="before")
    @classmethod
    def _map_category(cls, v):
        if isinstance(v, WeatherCategory):
            return v
        return WeatherCategory.from_label(v)

    @property
    def icon_name(self) -> str:
        return icon_for(self.category)


class CurrentConditions(_Reading):
    name: str

    @classmethod
    def from_provider(cls, payload: Dict[str, Any]) -> "CurrentConditions":
        try:
            return cls(name=payload["name"], **_flatten(payload))
        except (KeyError, TypeError, IndexError, ValidationError) as e:
            raise LookupFailure(f"Malformed current conditions payload: {e}")


class ForecastSample(_Reading):
    dt_txt: str  # "YYYY-MM-DD HH:MM:SS"

    @field_validator("dt_txt")
    @classmethod
    def _check_dt_txt(cls, v):
        datetime.strptime(v, "%Y-%m-%d %H:%M:%S")
        return v

    @property
    def date_key(self) -> str:
        """Calendar date as written by the provider, no timezone arithmetic."""
        return self.dt_txt.split(" ")[0]

    @classmethod
    def from_provider(cls, item: Dict[str, Any]) -> "ForecastSample":
        try:
            return cls(dt_txt=item["dt_txt"], **_flatten(item))
        except (KeyError, TypeError, IndexError, ValidationError) as e:
            raise LookupFailure(f"Malformed forecast sample: {e}")


class ForecastResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str
    country: str = ""
    samples: List[ForecastSample]

    @classmethod
    def from_provider(cls, payload: Dict[str, Any]) -> "ForecastResult":
        try:
            city = payload["city"]
            items = payload["list"]
            samples = [ForecastSample.from_provider(item) for item in items]
            return cls(city=city["name"], country=city.get("country") or "", samples=samples)
        except (KeyError, TypeError, ValidationError) as e:
            raise LookupFailure(f"Malformed forecast payload: {e}")
