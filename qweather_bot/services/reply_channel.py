from typing import Any, List, Protocol, runtime_checkable

import structlog
from pydantic import BaseModel

from qweather_bot.models.reply.reply import ReplyPayload

logger = structlog.get_logger(__name__)


@runtime_checkable
class ReplyChannel(Protocol):
    """Delivers messages back to whoever asked, independent of the transport."""

    async def reply(self, payload: ReplyPayload) -> None:
        ...


def to_jsonable(payload: Any) -> Any:
    """Convert a reply payload into JSON-safe values."""
    if isinstance(payload, BaseException):
        return {"error": str(payload), "type": type(payload).__name__}
    if isinstance(payload, BaseModel):
        return payload.model_dump()
    if isinstance(payload, (list, tuple)):
        return [to_jsonable(item) for item in payload]
    if isinstance(payload, dict):
        return {key: to_jsonable(value) for key, value in payload.items()}
    return payload


class CollectingReplyChannel:
    """Buffers replies in memory, in delivery order."""

    def __init__(self):
        self.replies: List[ReplyPayload] = []

    async def reply(self, payload: ReplyPayload) -> None:
        self.replies.append(payload)

    def serialized(self) -> List[Any]:
        return [to_jsonable(payload) for payload in self.replies]


class LoggingReplyChannel:
    """Writes replies to the log. Handy for local runs without a chat transport."""

    def __init__(self, requester: str = "console"):
        self.requester = requester

    async def reply(self, payload: ReplyPayload) -> None:
        logger.info("Reply", requester=self.requester, payload=to_jsonable(payload))
