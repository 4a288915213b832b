import pytest
from fastapi.testclient import TestClient

from main import create_app
from qweather_bot.exceptions.weather import APIRequestError
from qweather_bot.services.reply_formatter import ReplyFormatter
from qweather_bot.services.weather_service import WeatherService


@pytest.fixture
def app(test_config):
    app = create_app(test_config)
    yield app


@pytest.fixture
def client(app, test_config, mock_city_resolver, mock_weather_fetcher):
    with TestClient(app) as test_client:
        service = WeatherService(
            test_config, city_resolver=mock_city_resolver, weather_fetcher=mock_weather_fetcher
        )
        app.state.reply_formatter = ReplyFormatter(test_config, weather_service=service)
        yield test_client


class TestWeatherRoutes:
    """Test cases for the HTTP surface."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["message"] == "QWeather Bot API is running"

    def test_current_weather_success(self, client):
        response = client.get("/api/v1/weather/current/beijing")

        assert response.status_code == 200
        body = response.json()
        assert body["city_query"] == "beijing"
        assert body["status"] == "success"
        assert body["replies"][0] == "正在查询北京天气"
        assert body["replies"][1][0].splitlines()[0] == "当前天气：多云"

    def test_current_weather_failure_code_is_replied_raw(self, client, mock_weather_fetcher):
        mock_weather_fetcher.fetch_now.return_value = {"code": "402", "refer": {}}

        response = client.get("/api/v1/weather/current/beijing")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "failure"
        assert body["replies"][-1] == {"code": "402", "refer": {}}

    def test_current_weather_http_error_is_replied(self, client, mock_city_resolver):
        mock_city_resolver.resolve.side_effect = APIRequestError(
            "Unexpected HTTP status 500", status_code=500
        )

        response = client.get("/api/v1/weather/current/beijing")

        body = response.json()
        assert body["status"] == "failure"
        assert body["replies"] == [{"error": "Unexpected HTTP status 500", "type": "APIRequestError"}]

    def test_current_weather_requires_token_when_configured(self, client, app):
        app.state.config.api_token = "secret"

        unauthorized = client.get("/api/v1/weather/current/beijing")
        wrong = client.get(
            "/api/v1/weather/current/beijing", headers={"Authorization": "Bearer nope"}
        )
        authorized = client.get(
            "/api/v1/weather/current/beijing", headers={"Authorization": "Bearer secret"}
        )

        assert unauthorized.status_code == 401
        assert wrong.status_code == 401
        assert authorized.status_code == 200
