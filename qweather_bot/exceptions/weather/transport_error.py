from qweather_bot.exceptions.weather.weather_service_error import WeatherServiceError


class TransportError(WeatherServiceError):
    """Exception for network level failures (DNS, refused or reset connections)."""

    pass
