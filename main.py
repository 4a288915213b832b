import argparse
import asyncio
import sys
import time
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from qweather_bot.api import health_router, v1_router
from qweather_bot.config.config import Config, config
from qweather_bot.services.reply_channel import LoggingReplyChannel
from qweather_bot.services.reply_formatter import ReplyFormatter, reply_weather
from qweather_bot.utils.logging_config import setup_logging

# Configure logging
setup_logging(config)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Builds the weather services from the explicit config and waits for
    dispatched replies on shutdown.
    """
    logger.info("Starting QWeather Bot application", environment=app.state.config.environment)

    app.state.reply_formatter = ReplyFormatter(app.state.config)
    logger.info("QWeather Bot application started successfully")

    try:
        yield
    finally:
        logger.info("Shutting down QWeather Bot")
        await app.state.reply_formatter.wait_pending()


def create_app(app_config: Config = config) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_config: Settings used to build every service

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="QWeather Bot API",
        description="""
        ## QWeather Bot API

        Current weather replies for chat requesters, backed by the QWeather
        geocoding and weather APIs.

        ### Authentication:
        If an API token is configured, include it as a Bearer token in the Authorization header.
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.config = app_config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                method=request.method,
                url=str(request.url),
                status_code=response.status_code,
                process_time=process_time,
            )

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
                process_time=process_time,
            )
            raise

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred. Please try again later.",
                "timestamp": time.time(),
            },
        )

    # HTTP exception handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent formatting."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            url=str(request.url),
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "status_code": exc.status_code, "timestamp": time.time()},
        )

    app.include_router(health_router)
    app.include_router(v1_router)

    @app.get("/", tags=["Root"], include_in_schema=False)
    async def root():
        """Root endpoint providing basic system information."""
        return {
            "message": "QWeather Bot API",
            "version": "1.0.0",
            "status": "running",
            "timestamp": time.time(),
            "docs": "/docs",
        }

    return app


# Create the application instance
app = create_app()


async def reply_once(city: str):
    """Reply to a single city query through the log, without starting the server."""
    formatter = ReplyFormatter(config)
    reply_weather(city, LoggingReplyChannel(), formatter)
    await formatter.wait_pending()


def main():
    parser = argparse.ArgumentParser(description="QWeather chat bot")
    parser.add_argument("--city", help="Reply once for this city instead of serving the API")
    args = parser.parse_args()

    if args.city:
        asyncio.run(reply_once(args.city))
        return

    logger.info(
        f"Starting QWeather Bot server in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
    )

    try:
        uvicorn.run(
            app,
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower(),
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
