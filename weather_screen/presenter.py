"""
View model for the weather screen.
Turns a ScreenState into plain dicts for the template and the JSON API.
Labels use the fixed fr-FR locale of the screen.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence

from .grouping import daily_summary, hourly_detail, min_max_temp, round_half_up
from .models import CurrentConditions, ForecastSample
from .state import ScreenState


WEEKDAYS_FR = ["lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"]
MONTHS_FR = [
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
]


def format_day(date_key: str) -> str:
    """'2024-01-01' -> 'lundi 1 janvier'"""
    d = date.fromisoformat(date_key)
    return f"{WEEKDAYS_FR[d.weekday()]} {d.day} {MONTHS_FR[d.month - 1]}"


def format_hour(dt_txt: str) -> str:
    """'2024-01-01 03:00:00' -> '03 h'"""
    return datetime.strptime(dt_txt, "%Y-%m-%d %H:%M:%S").strftime("%H h")


def wind_kmh(speed_ms: float) -> int:
    return round_half_up(speed_ms * 3.6)


def present_current(current: CurrentConditions) -> Dict[str, Any]:
    return {
        "location": current.name,
        "icon": current.icon_name,
        "temp": round_half_up(current.temp),
        "description": current.description,
        "feels_like": round_half_up(current.feels_like),
        "humidity": current.humidity,
        "wind_kmh": wind_kmh(current.wind_speed),
    }


def present_day(index: int, bucket: Sequence[ForecastSample]) -> Dict[str, Any]:
    first = bucket[0]
    low, high = min_max_temp(bucket)
    return {
        "index": index,
        "date": first.date_key,
        "label": format_day(first.date_key),
        "icon": first.icon_name,
        "min": low,
        "max": high,
        "description": first.description,
    }


def present_detail(bucket: Sequence[ForecastSample]) -> Dict[str, Any]:
    first = bucket[0]
    return {
        "title": format_day(first.date_key),
        "icon": first.icon_name,
        "temp": round_half_up(first.temp),
        "description": first.description,
        "hourly": [
            {
                "hour": format_hour(s.dt_txt),
                "icon": s.icon_name,
                "temp": round_half_up(s.temp),
            }
            for s in hourly_detail(bucket)
        ],
        "feels_like": round_half_up(first.feels_like),
        "humidity": first.humidity,
        "pressure": first.pressure,
        "wind_kmh": wind_kmh(first.wind_speed),
    }


def present(state: ScreenState) -> Dict[str, Any]:
    current: Optional[Dict[str, Any]] = None
    days: List[Dict[str, Any]] = []
    # the screen only shows results when both retrievals are in
    if state.current is not None and state.forecast is not None:
        current = present_current(state.current)
        days = [present_day(i, b) for i, b in enumerate(daily_summary(state.days))]

    bucket = state.selected_bucket
    return {
        "city": state.city,
        "loading": state.loading,
        "refreshing": state.refreshing,
        "error": state.error or None,
        "current": current,
        "days": days,
        "selected_day": state.selected_day,
        "detail": present_detail(bucket) if bucket else None,
    }
