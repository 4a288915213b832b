from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Every service receives an instance of this class in its constructor;
    request handling code never reads the environment directly.
    """

    # QWeather credentials
    weather_api_key: str = Field(default="", description="QWeather API key")
    weather_id: str = Field(default="", description="Image id used by the weather card")

    # QWeather endpoints
    geo_api_base_url: str = Field(
        default="https://geoapi.qweather.com", description="QWeather geocoding API base URL"
    )
    weather_api_base_url: str = Field(
        default="https://devapi.qweather.com", description="QWeather weather API base URL"
    )

    # HTTP client configuration
    request_timeout_seconds: float = Field(default=10.0, gt=0, description="Overall request timeout")
    connect_timeout_seconds: float = Field(default=5.0, gt=0, description="Connect timeout")
    retry_attempts: int = Field(default=1, ge=1, description="Attempts per request (1 disables retries)")
    retry_backoff_seconds: float = Field(default=1.0, ge=0, description="Linear backoff between attempts")

    # Reply configuration
    reply_include_icon: bool = Field(default=False, description="Attach the condition icon to replies")
    icon_dir: str = Field(default="./res/icons", description="Directory holding the condition icons")
    weather_card_enabled: bool = Field(default=False, description="Attach the XML weather card to replies")
    weather_card_url: str = Field(
        default="https://github.com/morningos/chat_qq", description="Click-through link of the weather card"
    )

    # API Configuration
    api_host: str = Field(default="127.0.0.1", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")
    api_token: Optional[str] = Field(default=None, description="API authentication token")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_to_file: bool = Field(default=True, description="Also write logs under ./logs")

    @field_validator("geo_api_base_url", "weather_api_base_url")
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    @property
    def city_lookup_url(self) -> str:
        return f"{self.geo_api_base_url}/v2/city/lookup"

    @property
    def weather_now_url(self) -> str:
        return f"{self.weather_api_base_url}/v7/weather/now"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


config = Config()
