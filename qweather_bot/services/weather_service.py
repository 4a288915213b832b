from typing import Optional

import structlog
from pydantic import ValidationError

from qweather_bot.config.config import Config
from qweather_bot.exceptions.weather import InvalidResponseError, WeatherServiceError
from qweather_bot.models.weather.weather import CityRecord, WeatherReport, is_success_code
from qweather_bot.models.weather.weather_result import WeatherFailure, WeatherResult, WeatherSuccess
from qweather_bot.services.city_resolver import CityResolver
from qweather_bot.services.reply_channel import ReplyChannel
from qweather_bot.services.weather_fetcher import WeatherFetcher

logger = structlog.get_logger(__name__)


def searching_message(city_name: str) -> str:
    return f"正在查询{city_name}天气"


class WeatherService:
    """
    Two step weather lookup: resolve the city, then fetch its current weather.

    Service errors never escape ``get_weather``; they are returned as a
    WeatherFailure so callers always discriminate on the result type.
    """

    def __init__(
        self,
        config: Config,
        city_resolver: Optional[CityResolver] = None,
        weather_fetcher: Optional[WeatherFetcher] = None,
    ):
        self.city_resolver = city_resolver or CityResolver(config)
        self.weather_fetcher = weather_fetcher or WeatherFetcher(config)

    async def get_weather(self, city_name: str, channel: ReplyChannel) -> WeatherResult:
        """
        Look up the current weather for a city name.

        Sends a "searching" acknowledgement through the channel once the city
        is resolved.

        Args:
            city_name: Free-text city name
            channel: Reply channel of the requester

        Returns:
            WeatherSuccess with the validated report, or WeatherFailure
        """
        city: Optional[CityRecord] = None
        try:
            city = await self.city_resolver.resolve(city_name)

            await channel.reply(searching_message(city.name))

            data = await self.weather_fetcher.fetch_now(city.id)

        except WeatherServiceError as e:
            logger.warning(
                "Weather lookup failed",
                city=city_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return WeatherFailure(city=city, error=e)

        if not is_success_code(data.get("code")):
            logger.warning("Weather endpoint returned failure code", city=city_name, code=data.get("code"))
            return WeatherFailure(city=city, payload=data)

        try:
            report = WeatherReport(**data)
        except ValidationError as e:
            logger.error("Failed to parse weather data", city=city_name, error=str(e))
            return WeatherFailure(
                city=city,
                error=InvalidResponseError(f"Invalid weather data received for {city.name}: {str(e)}"),
            )

        return WeatherSuccess(city=city, report=report)
