from qweather_bot.models.reply.reply import (
    ImageSegment,
    MessageSegment,
    ReplyPayload,
    WeatherReplyResponse,
    XmlSegment,
)

__all__ = ["ImageSegment", "MessageSegment", "ReplyPayload", "WeatherReplyResponse", "XmlSegment"]
