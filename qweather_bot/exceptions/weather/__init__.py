from qweather_bot.exceptions.weather.api_request_error import APIRequestError
from qweather_bot.exceptions.weather.city_not_found_error import CityNotFoundError
from qweather_bot.exceptions.weather.invalid_response_error import InvalidResponseError
from qweather_bot.exceptions.weather.request_timeout_error import RequestTimeoutError
from qweather_bot.exceptions.weather.transport_error import TransportError
from qweather_bot.exceptions.weather.upstream_code_error import UpstreamCodeError
from qweather_bot.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = [
    "APIRequestError",
    "CityNotFoundError",
    "InvalidResponseError",
    "RequestTimeoutError",
    "TransportError",
    "UpstreamCodeError",
    "WeatherServiceError",
]
