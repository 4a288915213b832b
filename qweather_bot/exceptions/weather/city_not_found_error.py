from qweather_bot.exceptions.weather.weather_service_error import WeatherServiceError


class CityNotFoundError(WeatherServiceError):
    """Exception for city names the geocoding lookup cannot match."""

    pass
