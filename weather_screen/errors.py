class WeatherScreenError(Exception):
    """Base error for the weather screen."""


class ValidationError(WeatherScreenError):
    pass


class LookupFailure(WeatherScreenError):
    """Either retrieval of a lookup failed (unknown city, network, bad payload)."""
