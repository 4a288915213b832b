from typing import Any, Dict, Optional

from qweather_bot.exceptions.weather.weather_service_error import WeatherServiceError


class UpstreamCodeError(WeatherServiceError):
    """Exception for QWeather answers carrying a non-success application code."""

    def __init__(self, message: str, code: Optional[str] = None, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.payload = payload
