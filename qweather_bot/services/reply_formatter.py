import asyncio
from typing import List, Optional, Set, Union

import structlog

from qweather_bot.config.config import Config
from qweather_bot.models.reply.reply import ImageSegment, MessageSegment, XmlSegment
from qweather_bot.models.weather.weather import WeatherReport
from qweather_bot.models.weather.weather_result import WeatherResult, WeatherSuccess
from qweather_bot.services.reply_channel import ReplyChannel, to_jsonable
from qweather_bot.services.weather_card import build_weather_card
from qweather_bot.services.weather_service import WeatherService
from qweather_bot.utils.time_utils import format_update_time

logger = structlog.get_logger(__name__)


def format_weather(report: WeatherReport) -> str:
    """
    Render a weather report as the fixed ten line reply.

    Values are used verbatim; only the update time is reformatted.
    """
    now = report.now
    lines = [
        f"当前天气：{now.text}",
        f"温度：{now.temp}℃",
        f"体感温度：{now.feels_like}℃",
        f"风向：{now.wind_dir}",
        f"风力等级：{now.wind_scale}级",
        f"风速：{now.wind_speed}公里/小时",
        f"相对湿度：{now.humidity}%",
        f"小时降水量：{now.precip}毫米",
        f"能见度：{now.vis}公里",
        f"更新时间：{format_update_time(report.update_time)}",
    ]
    return "\n".join(lines).strip()


class ReplyFormatter:
    """Runs a weather lookup and replies with the formatted result."""

    def __init__(self, config: Config, weather_service: Optional[WeatherService] = None):
        self.weather_service = weather_service or WeatherService(config)
        self.include_icon = config.reply_include_icon
        self.icon_dir = config.icon_dir.rstrip("/")
        self.card_enabled = config.weather_card_enabled
        self.card_url = config.weather_card_url
        self.weather_id = config.weather_id
        self._pending: Set[asyncio.Task] = set()

    def build_message(self, result: WeatherSuccess) -> List[Union[str, MessageSegment]]:
        content = format_weather(result.report)
        message: List[Union[str, MessageSegment]] = [content]

        if self.include_icon:
            message.append(ImageSegment(file=f"{self.icon_dir}/{result.report.now.icon}-fill.svg"))

        if self.card_enabled:
            message.append(
                XmlSegment(
                    data=build_weather_card(
                        self.weather_id,
                        self.card_url,
                        title=f"{result.city.name}实时天气",
                        summary=content.splitlines()[0],
                    )
                )
            )

        return message

    async def reply(self, city_name: str, channel: ReplyChannel) -> WeatherResult:
        """
        Look up the weather for a city and reply through the channel.

        Successful lookups are replied as the formatted message; failures are
        logged and replied unmodified (raw upstream object or caught error).

        Returns:
            The lookup result, for callers that need the outcome
        """
        result = await self.weather_service.get_weather(city_name, channel)

        if isinstance(result, WeatherSuccess):
            await channel.reply(self.build_message(result))
            logger.info("Replied weather", city=city_name, city_id=result.city.id)
        else:
            logger.warning("Replying raw weather failure", city=city_name, result=to_jsonable(result.reply_payload))
            await channel.reply(result.reply_payload)

        return result

    def dispatch(self, city_name: str, channel: ReplyChannel) -> None:
        """Schedule a reply without waiting for it."""
        task = asyncio.get_running_loop().create_task(self.reply(city_name, channel))
        self._pending.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task):
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Weather reply failed", error=str(exc), error_type=type(exc).__name__)

    async def wait_pending(self):
        """Wait for every dispatched reply to finish."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)


def reply_weather(city_name: str, channel: ReplyChannel, formatter: ReplyFormatter) -> None:
    """
    Public entry point: reply with the current weather of ``city_name``.

    Fire-and-forget; must be called from a running event loop. Nothing is
    returned to await, the replies arrive through ``channel``.
    """
    formatter.dispatch(city_name, channel)
