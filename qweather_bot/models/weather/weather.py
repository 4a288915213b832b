from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from qweather_bot.utils.time_utils import parse_update_time


def is_success_code(code) -> bool:
    """QWeather codes arrive as strings ("200") but numbers compare equal too."""
    if code is None or isinstance(code, bool):
        return False
    if isinstance(code, (int, float)):
        return code == 200
    try:
        return float(str(code).strip()) == 200
    except ValueError:
        return False


class QWeatherModel(BaseModel):
    """Base model for QWeather payloads: camelCase aliases, values kept verbatim."""

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class CityRecord(QWeatherModel):
    """One entry of the geocoding lookup result."""

    id: str = Field(..., description="QWeather location ID")
    name: str = Field(..., description="Display name of the location")
    lat: Optional[str] = Field(None, description="Latitude")
    lon: Optional[str] = Field(None, description="Longitude")
    adm2: Optional[str] = Field(None, description="Superior administrative division")
    adm1: Optional[str] = Field(None, description="First level administrative division")
    country: Optional[str] = Field(None, description="Country name")
    tz: Optional[str] = Field(None, description="IANA timezone")
    utc_offset: Optional[str] = Field(None, alias="utcOffset", description="Offset from UTC")
    type: Optional[str] = Field(None, description="Location type")
    rank: Optional[str] = Field(None, description="Location rank")
    fx_link: Optional[str] = Field(None, alias="fxLink", description="Link to the QWeather page")


class CityLookupResponse(QWeatherModel):
    """Geocoding lookup response (GET /v2/city/lookup)."""

    code: str = Field(..., description="Application status code")
    location: List[CityRecord] = Field(default_factory=list, description="Matching locations")


class NowConditions(QWeatherModel):
    """Current conditions block of the weather response."""

    text: str = Field(..., description="Weather condition text")
    temp: str = Field(..., description="Temperature in Celsius")
    feels_like: str = Field(..., alias="feelsLike", description="Feels like temperature in Celsius")
    wind_dir: str = Field(..., alias="windDir", description="Wind direction")
    wind_scale: str = Field(..., alias="windScale", description="Wind scale")
    wind_speed: str = Field(..., alias="windSpeed", description="Wind speed in km/h")
    humidity: str = Field(..., description="Relative humidity percentage")
    precip: str = Field(..., description="Precipitation of the last hour in mm")
    vis: str = Field(..., description="Visibility in km")
    icon: str = Field(..., description="Weather icon code")
    obs_time: Optional[str] = Field(None, alias="obsTime", description="Observation time")
    wind360: Optional[str] = Field(None, description="Wind direction in degrees")
    pressure: Optional[str] = Field(None, description="Atmospheric pressure in hPa")
    cloud: Optional[str] = Field(None, description="Cloud cover percentage")
    dew: Optional[str] = Field(None, description="Dew point temperature")


class WeatherReport(QWeatherModel):
    """Current weather response (GET /v7/weather/now)."""

    code: str = Field(..., description="Application status code")
    update_time: str = Field(..., alias="updateTime", description="Upstream refresh time")
    fx_link: Optional[str] = Field(None, alias="fxLink", description="Link to the QWeather page")
    now: NowConditions = Field(..., description="Current conditions")

    @field_validator("update_time")
    def validate_update_time(cls, v):
        parse_update_time(v)
        return v
