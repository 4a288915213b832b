from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, Field


class ImageSegment(BaseModel):
    """Rich message segment referencing an image file."""

    type: Literal["image"] = "image"
    file: str = Field(..., description="Path or URL of the image")


class XmlSegment(BaseModel):
    """Rich message segment carrying a prebuilt XML card."""

    type: Literal["xml"] = "xml"
    data: str = Field(..., description="Serialized XML document")


MessageSegment = Union[ImageSegment, XmlSegment]

# A plain string, or a list mixing strings and rich segments. Failures are
# replied with the raw upstream object or the caught error.
ReplyPayload = Union[str, List[Union[str, MessageSegment]], Dict[str, Any], BaseException]


class WeatherReplyResponse(BaseModel):
    """HTTP response body of the weather reply endpoint."""

    city_query: str = Field(..., description="City name as requested")
    status: Literal["success", "failure"] = Field(..., description="Outcome of the lookup")
    replies: List[Any] = Field(default_factory=list, description="Delivered replies, in order")
