from qweather_bot.exceptions.weather.weather_service_error import WeatherServiceError


class InvalidResponseError(WeatherServiceError):
    """Exception for response bodies that cannot be decoded or validated."""

    pass
