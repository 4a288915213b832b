from typing import Any, Dict

import structlog
from pydantic import ValidationError

from qweather_bot.config.config import Config
from qweather_bot.exceptions.weather import (
    CityNotFoundError,
    InvalidResponseError,
    UpstreamCodeError,
)
from qweather_bot.models.weather.weather import CityLookupResponse, CityRecord, is_success_code
from qweather_bot.services.qweather_client import QWeatherClient

logger = structlog.get_logger(__name__)

NOT_FOUND_CODE = "404"


class CityResolver(QWeatherClient):
    """Resolves free-text city names through the QWeather geocoding API."""

    def __init__(self, config: Config):
        super().__init__(config)
        self.url = config.city_lookup_url

    async def lookup(self, city_name: str) -> Dict[str, Any]:
        """Return the raw geocoding response for a city name."""
        return await self._make_request(self.url, {"location": city_name})

    async def resolve(self, city_name: str) -> CityRecord:
        """
        Resolve a city name to the first matching location.

        Args:
            city_name: Free-text city name

        Returns:
            CityRecord of the best match

        Raises:
            CityNotFoundError: If nothing matches the name
            UpstreamCodeError: If the lookup answered with another failure code
            InvalidResponseError: If the lookup payload is malformed
        """
        if not city_name or not city_name.strip():
            raise CityNotFoundError("City name is empty")

        logger.info("Resolving city", city=city_name)
        data = await self.lookup(city_name)

        code = data.get("code")
        if not is_success_code(code):
            if str(code) == NOT_FOUND_CODE:
                raise CityNotFoundError(f"No city matches {city_name!r}")
            raise UpstreamCodeError(
                f"City lookup for {city_name!r} failed with code {code}",
                code=None if code is None else str(code),
                payload=data,
            )

        try:
            response = CityLookupResponse(**data)
        except ValidationError as e:
            logger.error("Failed to parse city lookup", city=city_name, error=str(e))
            raise InvalidResponseError(f"Invalid city data received for {city_name}: {str(e)}")

        if not response.location:
            raise CityNotFoundError(f"No city matches {city_name!r}")

        city = response.location[0]
        logger.info("Resolved city", city=city_name, city_id=city.id, city_name=city.name)
        return city
