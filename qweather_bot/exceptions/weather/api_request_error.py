from typing import Optional

from qweather_bot.exceptions.weather.weather_service_error import WeatherServiceError


class APIRequestError(WeatherServiceError):
    """Exception for HTTP responses other than 200."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
