from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, SkipValidation

from qweather_bot.exceptions.weather import WeatherServiceError
from qweather_bot.models.weather.weather import CityRecord, WeatherReport


class WeatherSuccess(BaseModel):
    """Weather lookup that produced a valid report."""

    status: Literal["success"] = "success"
    city: CityRecord = Field(..., description="Resolved city")
    report: WeatherReport = Field(..., description="Validated weather report")


class WeatherFailure(BaseModel):
    """
    Weather lookup that did not produce a report.

    Exactly one of ``error`` and ``payload`` is set: ``payload`` is the raw
    weather object when the weather endpoint answered with a non-success
    code, ``error`` is the caught exception for every other failure.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: Literal["failure"] = "failure"
    city: Optional[CityRecord] = Field(None, description="Resolved city, if resolution succeeded")
    error: Optional[WeatherServiceError] = Field(None, description="Caught service error")
    payload: SkipValidation[Optional[Dict[str, Any]]] = Field(None, description="Raw upstream weather object")

    @property
    def reply_payload(self) -> Union[Dict[str, Any], WeatherServiceError]:
        """What gets shown to the requester, unmodified."""
        return self.payload if self.payload is not None else self.error


WeatherResult = Union[WeatherSuccess, WeatherFailure]
