from qweather_bot.exceptions.base import WeatherBotError


class WeatherServiceError(WeatherBotError):
    """Base exception for weather service errors."""

    pass
