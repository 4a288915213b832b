from unittest.mock import AsyncMock

import pytest

from qweather_bot.exceptions.weather import (
    APIRequestError,
    CityNotFoundError,
    InvalidResponseError,
    TransportError,
)
from qweather_bot.models.weather.weather_result import WeatherFailure, WeatherSuccess
from qweather_bot.services.weather_service import WeatherService


@pytest.fixture
def weather_service(test_config, mock_city_resolver, mock_weather_fetcher):
    return WeatherService(
        test_config,
        city_resolver=mock_city_resolver,
        weather_fetcher=mock_weather_fetcher,
    )


class TestWeatherService:
    """Test cases for the two step weather lookup."""

    @pytest.mark.asyncio
    async def test_get_weather_success(
        self, weather_service, mock_city_resolver, mock_weather_fetcher, reply_channel
    ):
        result = await weather_service.get_weather("beijing", reply_channel)

        assert isinstance(result, WeatherSuccess)
        assert result.status == "success"
        assert result.city.name == "北京"
        assert result.report.now.temp == "24"
        assert result.report.now.feels_like == "26"
        mock_city_resolver.resolve.assert_called_once_with("beijing")
        mock_weather_fetcher.fetch_now.assert_called_once_with("101010100")

    @pytest.mark.asyncio
    async def test_get_weather_sends_searching_acknowledgement(self, weather_service, reply_channel):
        await weather_service.get_weather("beijing", reply_channel)

        assert reply_channel.replies == ["正在查询北京天气"]

    @pytest.mark.asyncio
    async def test_get_weather_city_not_found(
        self, weather_service, mock_city_resolver, mock_weather_fetcher, reply_channel
    ):
        error = CityNotFoundError("No city matches 'Atlantis'")
        mock_city_resolver.resolve.side_effect = error

        result = await weather_service.get_weather("Atlantis", reply_channel)

        assert isinstance(result, WeatherFailure)
        assert result.error is error
        assert result.payload is None
        assert result.city is None
        assert result.reply_payload is error
        assert reply_channel.replies == []
        mock_weather_fetcher.fetch_now.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_weather_transport_error_is_returned(
        self, weather_service, mock_weather_fetcher, reply_channel
    ):
        error = TransportError("Request failed: connection reset")
        mock_weather_fetcher.fetch_now.side_effect = error

        result = await weather_service.get_weather("beijing", reply_channel)

        assert isinstance(result, WeatherFailure)
        assert result.error is error
        assert result.city.id == "101010100"
        assert reply_channel.replies == ["正在查询北京天气"]

    @pytest.mark.asyncio
    async def test_get_weather_http_status_error_is_returned(self, weather_service, mock_city_resolver, reply_channel):
        error = APIRequestError("Unexpected HTTP status 503", status_code=503)
        mock_city_resolver.resolve.side_effect = error

        result = await weather_service.get_weather("beijing", reply_channel)

        assert isinstance(result, WeatherFailure)
        assert result.error.status_code == 503

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"code": "402"},
            {"code": "204", "updateTime": "2020-06-30T22:00+08:00"},
            {"message": "no code at all"},
        ],
    )
    async def test_get_weather_failure_code_passes_raw_payload(
        self, weather_service, mock_weather_fetcher, reply_channel, payload
    ):
        mock_weather_fetcher.fetch_now.return_value = payload

        result = await weather_service.get_weather("beijing", reply_channel)

        assert isinstance(result, WeatherFailure)
        assert result.payload is payload
        assert result.error is None
        assert result.reply_payload is payload

    @pytest.mark.asyncio
    async def test_get_weather_numeric_success_code(
        self, weather_service, mock_weather_fetcher, weather_now_payload, reply_channel
    ):
        weather_now_payload["code"] = 200
        mock_weather_fetcher.fetch_now.return_value = weather_now_payload

        result = await weather_service.get_weather("beijing", reply_channel)

        assert isinstance(result, WeatherSuccess)

    @pytest.mark.asyncio
    async def test_get_weather_malformed_success_payload(self, weather_service, mock_weather_fetcher, reply_channel):
        mock_weather_fetcher.fetch_now.return_value = {"code": "200", "updateTime": "2020-06-30T22:00+08:00"}

        result = await weather_service.get_weather("beijing", reply_channel)

        assert isinstance(result, WeatherFailure)
        assert isinstance(result.error, InvalidResponseError)
        assert "Invalid weather data received" in str(result.error)

    @pytest.mark.asyncio
    async def test_get_weather_channel_errors_propagate(self, weather_service):
        channel = AsyncMock()
        channel.reply.side_effect = RuntimeError("chat transport closed")

        with pytest.raises(RuntimeError, match="chat transport closed"):
            await weather_service.get_weather("beijing", channel)


class TestWeatherFailure:
    """Test cases for the failure variant of the result union."""

    def test_payload_is_kept_as_the_same_object(self):
        payload = {"code": "402", "refer": {"sources": ["QWeather"]}}

        failure = WeatherFailure(payload=payload)

        assert failure.payload is payload
        assert failure.reply_payload is payload

    def test_reply_payload_falls_back_to_error(self):
        error = TransportError("Request failed: connection reset")

        failure = WeatherFailure(error=error)

        assert failure.payload is None
        assert failure.reply_payload is error
