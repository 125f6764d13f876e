import pytest

from weather_screen.models import ForecastSample


@pytest.fixture
def anyio_backend():
    return "asyncio"


def make_sample(dt_txt, temp=10.0, category="Clear", **extra):
    fields = dict(
        dt=0,
        dt_txt=dt_txt,
        temp=temp,
        feels_like=temp - 1,
        humidity=70,
        pressure=1013,
        category=category,
        description="ciel dégagé",
        icon="01d",
        wind_speed=5.0,
    )
    fields.update(extra)
    return ForecastSample(**fields)


def provider_item(dt_txt, temp=10.0, main="Clear", description="ciel dégagé"):
    return {
        "dt": 1704067200,
        "main": {"temp": temp, "feels_like": temp - 1, "humidity": 70, "pressure": 1013},
        "weather": [{"main": main, "description": description, "icon": "01d"}],
        "wind": {"speed": 5.0},
        "dt_txt": dt_txt,
    }


@pytest.fixture
def current_payload():
    return {
        "name": "Paris",
        "dt": 1704067200,
        "main": {"temp": 7.6, "feels_like": 5.2, "humidity": 81, "pressure": 1019},
        "weather": [{"main": "Clouds", "description": "couvert", "icon": "04d"}],
        "wind": {"speed": 4.1},
    }


@pytest.fixture
def forecast_payload():
    items = []
    for day in range(1, 8):
        for hour in (0, 3, 6, 9, 12, 15, 18, 21):
            items.append(provider_item(f"2024-01-0{day} {hour:02d}:00:00", temp=day + hour / 10))
    return {"list": items[:40], "city": {"name": "Paris", "country": "FR"}}
