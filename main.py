"""
FastAPI Application Entry Point

Integrates:
  - Notification endpoints (/notify, /pai)
  - Health check (/health)
  - Usage text for every other route
  - Middleware for CORS, logging & error handling

Run: python main.py
 or: uvicorn main:app --host 127.0.0.1 --port 8888
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from config import Config
from guardrails.rate_limit import RateLimitExceeded
from guardrails.validation import ValidationError
from infra.bootstrap import NotifyBootstrap
from webhook.notify import USAGE_TEXT, router as notify_router

# Setup logging
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "http://localhost",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(bootstrap: Optional[NotifyBootstrap] = None) -> FastAPI:
    """
    Build the application.

    Args:
        bootstrap: Pre-built backends (tests); defaults to the process singleton
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan: startup and shutdown handlers.
        """
        config = app.state.bootstrap.config

        # Startup
        logger.info("=" * 60)
        logger.info("Voice Notify server starting up...")
        logger.info(f"Listening on: http://{config.host}:{config.port}")
        logger.info(f"Backends: {app.state.bootstrap!r}")
        if not config.elevenlabs_api_key:
            logger.warning("ELEVENLABS_API_KEY not set - using local speech only")
        logger.info("=" * 60)

        yield

        # Shutdown
        logger.info("Voice Notify server shutting down...")
        await app.state.bootstrap.aclose()

    app = FastAPI(
        title="Voice Notify API",
        description="Local spoken + desktop notification relay",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.bootstrap = bootstrap or NotifyBootstrap.get_instance()

    # Middleware for CORS, logging and last-resort error handling
    @app.middleware("http")
    async def cors_and_logging(request: Request, call_next):
        """Answer preflights, tag responses with CORS headers, log requests."""
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)

        logger.debug(f"{request.method} {request.url.path}")
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Request error: {str(e)}", exc_info=True)
            response = JSONResponse(
                status_code=500,
                content={"status": "error", "message": "Internal server error"},
            )

        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning(f"Rejected request: {exc.message}", extra={"field": exc.field})
        return JSONResponse(
            status_code=400,
            content={"status": "error", "message": exc.message},
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        return JSONResponse(
            status_code=429,
            content={"status": "error", "message": "Rate limit exceeded"},
        )

    # Include routers
    app.include_router(notify_router)

    # Everything else gets the usage text
    @app.api_route(
        "/{path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"],
        include_in_schema=False,
    )
    async def usage(path: str):
        return PlainTextResponse(USAGE_TEXT)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    Config.validate()
    uvicorn.run(
        app,
        host=Config.HOST,
        port=Config.PORT,
        log_level=Config.LOG_LEVEL.lower(),
    )
