class WeatherBotError(Exception):
    """Base exception for all weather bot errors."""

    pass
