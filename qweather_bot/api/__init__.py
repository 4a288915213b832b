from qweather_bot.api.health import health_router
from qweather_bot.api.v1 import router as v1_router

__all__ = ["health_router", "v1_router"]
