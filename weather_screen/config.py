"""
Settings for the weather screen.
Every value can be overridden through an environment variable of the same name.
"""

import os

OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY", "")
OPENWEATHER_BASE_URL = os.getenv("OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5")
WEATHER_UNITS = os.getenv("WEATHER_UNITS", "metric")
WEATHER_LANG = os.getenv("WEATHER_LANG", "fr")
FORECAST_COUNT = int(os.getenv("FORECAST_COUNT", "40"))  # 5 days of 3-hour samples
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

DEFAULT_CITY = os.getenv("DEFAULT_CITY", "Paris")
LOOKUP_FAILED_MESSAGE = "Ville non trouvée. Essayez une autre localisation."

# Display slicing
DAILY_SUMMARY_DAYS = 5
HOURLY_DETAIL_SAMPLES = 8
