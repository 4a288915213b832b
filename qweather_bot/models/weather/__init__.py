from qweather_bot.models.weather.weather import (
    CityLookupResponse,
    CityRecord,
    NowConditions,
    WeatherReport,
    is_success_code,
)
from qweather_bot.models.weather.weather_result import WeatherFailure, WeatherResult, WeatherSuccess

__all__ = [
    "CityLookupResponse",
    "CityRecord",
    "NowConditions",
    "WeatherReport",
    "is_success_code",
    "WeatherFailure",
    "WeatherResult",
    "WeatherSuccess",
]
