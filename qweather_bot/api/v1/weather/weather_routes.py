import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status

from qweather_bot.api.auth import verify_token
from qweather_bot.models.reply.reply import WeatherReplyResponse
from qweather_bot.services.reply_channel import CollectingReplyChannel
from qweather_bot.services.reply_formatter import ReplyFormatter

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["Weather"])


def get_reply_formatter(request: Request) -> ReplyFormatter:
    return request.app.state.reply_formatter


@router.get("/current/{city}", summary="Reply With Current Weather", response_model=WeatherReplyResponse)
async def get_current_weather(
    city: str,
    formatter: ReplyFormatter = Depends(get_reply_formatter),
    authenticated: bool = Depends(verify_token),
):
    """
    Run the chat weather reply for a city and return every delivered message.

    The first reply is the "searching" acknowledgement once the city is
    resolved, the last one is either the formatted weather or the raw failure,
    exactly as a chat requester would see them.

    Args:
        city: City name to query.
        formatter: Reply formatter created at startup.
        authenticated: Dependency that enforces optional token verification.

    Returns:
        The city query, the lookup status and the serialized replies.
    """
    if not city.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="City name is required")

    logger.info("API request: Reply weather", city=city, authenticated=authenticated)

    channel = CollectingReplyChannel()
    result = await formatter.reply(city, channel)

    return WeatherReplyResponse(
        city_query=city,
        status=result.status,
        replies=channel.serialized(),
    )
