from conftest import make_sample
from weather_screen.models import CurrentConditions, ForecastResult
from weather_screen.presenter import format_day, format_hour, present, present_detail, wind_kmh
from weather_screen.state import DaySelected, LookupStarted, LookupSucceeded, ScreenState, reduce


def test_format_day_in_french():
    assert format_day("2024-01-01") == "lundi 1 janvier"
    assert format_day("2024-08-15") == "jeudi 15 août"


def test_format_hour():
    assert format_hour("2024-01-01 03:00:00") == "03 h"
    assert format_hour("2024-01-01 21:00:00") == "21 h"


def test_wind_is_shown_in_kmh():
    assert wind_kmh(4.1) == 15
    assert wind_kmh(0) == 0


def test_detail_uses_first_sample_and_eight_hours():
    day = [make_sample(f"2024-01-01 {h:02d}:00:00", temp=h + 0.4, category="Rain")
           for h in range(12)]

    detail = present_detail(day)

    assert detail["title"] == "lundi 1 janvier"
    assert detail["icon"] == "weather-rainy"
    assert detail["temp"] == 0
    assert len(detail["hourly"]) == 8
    assert detail["hourly"][7] == {"hour": "07 h", "icon": "weather-rainy", "temp": 7}
    assert detail["pressure"] == 1013
    assert detail["wind_kmh"] == 18


def test_present_empty_state():
    view = present(ScreenState(city="Paris"))

    assert view["current"] is None
    assert view["days"] == []
    assert view["detail"] is None
    assert view["error"] is None


def test_present_loaded_state(current_payload, forecast_payload):
    state = reduce(ScreenState(), LookupStarted())
    state = reduce(state, LookupSucceeded(
        generation=state.generation,
        current=CurrentConditions.from_provider(current_payload),
        forecast=ForecastResult.from_provider(forecast_payload),
    ))
    state = reduce(state, DaySelected(index=0))

    view = present(state)

    assert view["current"] == {
        "location": "Paris",
        "icon": "weather-cloudy",
        "temp": 8,
        "description": "couvert",
        "feels_like": 5,
        "humidity": 81,
        "wind_kmh": 15,
    }
    assert len(view["days"]) == 5
    first = view["days"][0]
    assert first["label"] == "lundi 1 janvier"
    assert (first["min"], first["max"]) == (1, 3)
    assert view["detail"]["title"] == "lundi 1 janvier"
    assert len(view["detail"]["hourly"]) == 8
