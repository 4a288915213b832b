from qweather_bot.exceptions.weather.weather_service_error import WeatherServiceError


class RequestTimeoutError(WeatherServiceError):
    """Exception for requests that exceeded the configured timeout."""

    pass
