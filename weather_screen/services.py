import asyncio
import logging
from typing import Any, Dict, Tuple

import httpx

from . import config
from .errors import LookupFailure
from .models import CurrentConditions, ForecastResult

logger = logging.getLogger(__name__)


USER_AGENT = {"User-Agent": "WeatherScreen/1.0"}


def _base_params(city: str) -> Dict[str, Any]:
    return {
        "q": city,
        "units": config.WEATHER_UNITS,
        "appid": config.OPENWEATHER_API_KEY,
        "lang": config.WEATHER_LANG,
    }


async def _get_json(path: str, params: Dict[str, Any]) -> Dict[str, Any]:
    url = f"{config.OPENWEATHER_BASE_URL.rstrip('/')}/{path}"
    try:
        async with httpx.AsyncClient(timeout=config.REQUEST_TIMEOUT) as client:
            r = await client.get(url, params=params, headers=USER_AGENT)
            r.raise_for_status()
            data = r.json()
    except httpx.HTTPStatusError as e:
        logger.warning(f"Weather provider HTTP error {e.response.status_code} on /{path}")
        raise LookupFailure(f"Weather provider error: {e}")
    except httpx.HTTPError as e:
        logger.warning(f"Weather provider unreachable on /{path}: {e}")
        raise LookupFailure(f"Weather provider error: {e}")
    except ValueError as e:
        logger.warning(f"Weather provider sent non-JSON body on /{path}")
        raise LookupFailure(f"Invalid provider response: {e}")

    if not isinstance(data, dict):
        raise LookupFailure("Invalid provider response: expected a JSON object")
    return data


async def fetch_current_conditions(city: str) -> CurrentConditions:
    """Current conditions for a city name."""
    data = await _get_json("weather", _base_params(city))
    return CurrentConditions.from_provider(data)


async def fetch_forecast(city: str) -> ForecastResult:
    """
    5-day forecast in 3-hour steps for a city name.
    The provider returns FORECAST_COUNT samples, oldest first.
    """
    params = _base_params(city)
    params["cnt"] = config.FORECAST_COUNT
    data = await _get_json("forecast", params)
    return ForecastResult.from_provider(data)


async def lookup(city: str) -> Tuple[CurrentConditions, ForecastResult]:
    """
    Retrieve current conditions and forecast together.

    Both requests run concurrently. If either one fails the whole lookup
    raises LookupFailure; a half result is never returned.
    """
    logger.info(f"Looking up weather for {city!r}")
    current, forecast = await asyncio.gather(
        fetch_current_conditions(city),
        fetch_forecast(city),
        return_exceptions=True,
    )
    for outcome in (current, forecast):
        if isinstance(outcome, LookupFailure):
            raise outcome
        if isinstance(outcome, Exception):
            raise LookupFailure(f"Lookup failed: {outcome}") from outcome
        if isinstance(outcome, BaseException):
            raise outcome
    return current, forecast
