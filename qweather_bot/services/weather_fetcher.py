from typing import Any, Dict

import structlog

from qweather_bot.config.config import Config
from qweather_bot.services.qweather_client import QWeatherClient

logger = structlog.get_logger(__name__)


class WeatherFetcher(QWeatherClient):
    """Fetches current conditions for a resolved QWeather location ID."""

    def __init__(self, config: Config):
        super().__init__(config)
        self.url = config.weather_now_url

    async def fetch_now(self, city_id: str) -> Dict[str, Any]:
        """
        Get the raw current weather payload for a location ID.

        The payload is returned unmodified; callers inspect its ``code``.
        """
        logger.info("Fetching current weather", city_id=city_id)
        data = await self._make_request(self.url, {"location": city_id})
        logger.info("Fetched current weather", city_id=city_id, code=data.get("code"))
        return data
