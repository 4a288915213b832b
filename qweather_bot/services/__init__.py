from qweather_bot.services.city_resolver import CityResolver
from qweather_bot.services.reply_channel import (
    CollectingReplyChannel,
    LoggingReplyChannel,
    ReplyChannel,
)
from qweather_bot.services.reply_formatter import ReplyFormatter, format_weather, reply_weather
from qweather_bot.services.weather_fetcher import WeatherFetcher
from qweather_bot.services.weather_service import WeatherService

__all__ = [
    "CityResolver",
    "CollectingReplyChannel",
    "LoggingReplyChannel",
    "ReplyChannel",
    "ReplyFormatter",
    "WeatherFetcher",
    "WeatherService",
    "format_weather",
    "reply_weather",
]
