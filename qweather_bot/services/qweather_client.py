import asyncio
import inspect
from typing import Any, Dict

import httpx
import structlog

from qweather_bot.config.config import Config
from qweather_bot.exceptions.weather import (
    APIRequestError,
    InvalidResponseError,
    RequestTimeoutError,
    TransportError,
    WeatherServiceError,
)

logger = structlog.get_logger(__name__)


class QWeatherClient:
    """
    Shared request handling for the QWeather endpoints.

    Every request carries the API key, asks for a gzip encoded body and is
    bounded by the configured timeout. Only HTTP 200 is accepted; every other
    status surfaces as an APIRequestError.
    """

    def __init__(self, config: Config):
        self.api_key = config.weather_api_key
        self.timeout = httpx.Timeout(
            config.request_timeout_seconds, connect=config.connect_timeout_seconds
        )
        self.retry_attempts = config.retry_attempts
        self.retry_backoff = config.retry_backoff_seconds
        self.headers = {"Accept-Encoding": "gzip"}

        if not self.api_key:
            logger.warning("QWeather API key is not configured", client=type(self).__name__)

    async def _make_request(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make a GET request to a QWeather endpoint.

        Args:
            url: Endpoint URL
            params: Query parameters (the API key is added here)

        Returns:
            Decoded JSON object

        Raises:
            APIRequestError: For any HTTP status other than 200
            RequestTimeoutError: If the request timed out on every attempt
            TransportError: For network failures on every attempt
            InvalidResponseError: If the body is not a gzip/JSON object
        """
        query = {"key": self.api_key, **params}

        for attempt in range(self.retry_attempts):
            try:
                async with httpx.AsyncClient(timeout=self.timeout, headers=self.headers) as client:
                    logger.info(
                        "Making API request",
                        url=url,
                        params=params,
                        attempt=attempt + 1,
                    )

                    response = await client.get(url, params=query)

                    if response.status_code != 200:
                        logger.warning(
                            "API request failed",
                            url=url,
                            status_code=response.status_code,
                        )
                        raise APIRequestError(
                            f"Unexpected HTTP status {response.status_code} from {url}",
                            status_code=response.status_code,
                            url=url,
                        )

                    try:
                        data = response.json()
                        data = await data if inspect.isawaitable(data) else data
                    except ValueError as e:
                        raise InvalidResponseError(f"Invalid JSON received from {url}: {str(e)}")

                    if not isinstance(data, dict):
                        raise InvalidResponseError(
                            f"Expected a JSON object from {url}, got {type(data).__name__}"
                        )
                    return data

            except httpx.TimeoutException as e:
                logger.warning("Request timeout", url=url, attempt=attempt + 1)
                if attempt == self.retry_attempts - 1:
                    raise RequestTimeoutError(f"Request to {url} timed out: {str(e)}")
                await asyncio.sleep(self.retry_backoff * (attempt + 1))

            except httpx.DecodingError as e:
                logger.warning("Response decoding failed", url=url, error=str(e))
                raise InvalidResponseError(f"Could not decode response from {url}: {str(e)}")

            except httpx.RequestError as e:
                logger.warning("Request error", url=url, error=str(e), attempt=attempt + 1)
                if attempt == self.retry_attempts - 1:
                    raise TransportError(f"Request to {url} failed: {str(e)}")
                await asyncio.sleep(self.retry_backoff * (attempt + 1))

        raise WeatherServiceError("All retry attempts failed")
