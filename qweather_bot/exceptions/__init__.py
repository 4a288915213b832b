from qweather_bot.exceptions.base import WeatherBotError
from qweather_bot.exceptions.weather import (
    APIRequestError,
    CityNotFoundError,
    InvalidResponseError,
    RequestTimeoutError,
    TransportError,
    UpstreamCodeError,
    WeatherServiceError,
)

__all__ = [
    "WeatherBotError",
    "WeatherServiceError",
    "APIRequestError",
    "CityNotFoundError",
    "InvalidResponseError",
    "RequestTimeoutError",
    "TransportError",
    "UpstreamCodeError",
]
