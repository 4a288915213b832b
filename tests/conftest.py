from unittest.mock import AsyncMock

import pytest

from qweather_bot.config.config import Config
from qweather_bot.models.weather.weather import CityRecord
from qweather_bot.services.reply_channel import CollectingReplyChannel


@pytest.fixture
def test_config():
    """Config isolated from the environment and .env files."""
    return Config(
        _env_file=None,
        weather_api_key="test-weather-key",
        weather_id="sunny.png",
        geo_api_base_url="https://geoapi.example.com/",
        weather_api_base_url="https://devapi.example.com",
        request_timeout_seconds=2.0,
        connect_timeout_seconds=1.0,
        retry_attempts=1,
        retry_backoff_seconds=0,
        log_to_file=False,
    )


@pytest.fixture
def city_lookup_payload():
    """Geocoding lookup response for Beijing."""
    return {
        "code": "200",
        "location": [
            {
                "name": "北京",
                "id": "101010100",
                "lat": "39.90499",
                "lon": "116.40529",
                "adm2": "北京",
                "adm1": "北京市",
                "country": "中国",
                "tz": "Asia/Shanghai",
                "utcOffset": "+08:00",
                "isDst": "0",
                "type": "city",
                "rank": "10",
                "fxLink": "https://www.qweather.com/weather/beijing-101010100.html",
            },
            {
                "name": "海淀",
                "id": "101010200",
                "adm1": "北京市",
                "country": "中国",
            },
        ],
        "refer": {"sources": ["QWeather"], "license": ["QWeather Developers License"]},
    }


@pytest.fixture
def weather_now_payload():
    """Current weather response for Beijing."""
    return {
        "code": "200",
        "updateTime": "2020-06-30T22:00+08:00",
        "fxLink": "http://hfx.link/2ax1",
        "now": {
            "obsTime": "2020-06-30T21:40+08:00",
            "temp": "24",
            "feelsLike": "26",
            "icon": "101",
            "text": "多云",
            "wind360": "123",
            "windDir": "东南风",
            "windScale": "1",
            "windSpeed": "3",
            "humidity": "72",
            "precip": "0.0",
            "pressure": "1003",
            "vis": "16",
            "cloud": "10",
            "dew": "21",
        },
        "refer": {"sources": ["QWeather"], "license": ["QWeather Developers License"]},
    }


@pytest.fixture
def beijing():
    return CityRecord(id="101010100", name="北京")


@pytest.fixture
def reply_channel():
    return CollectingReplyChannel()


@pytest.fixture
def mock_city_resolver(beijing):
    """City resolver that always resolves to Beijing."""
    resolver = AsyncMock()
    resolver.resolve = AsyncMock(return_value=beijing)
    return resolver


@pytest.fixture
def mock_weather_fetcher(weather_now_payload):
    """Weather fetcher returning the sample payload."""
    fetcher = AsyncMock()
    fetcher.fetch_now = AsyncMock(return_value=weather_now_payload)
    return fetcher
