"""
FastAPI application for the voting page.

Project: Simple Voting Website
Description: Bilingual fruit poll with in-memory counters
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from prometheus_client import start_http_server

from .config import Settings, settings
from .handler import handle_request
from .store import VoteStore

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

HANDLED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(store: Optional[VoteStore] = None, config: Settings = settings) -> FastAPI:
    """
    Build the voting application.

    Args:
        store: Vote counters to serve; a fresh zeroed store when omitted
        config: Settings to apply

    Returns:
        FastAPI: Application routing every path and method to handle_request
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events."""
        logger.info(f"Starting {config.SERVICE_NAME} service...")

        if config.METRICS_PORT is not None:
            start_http_server(config.METRICS_PORT)
            logger.info(f"Prometheus metrics served on port {config.METRICS_PORT}")

        logger.info(
            f"{config.SERVICE_NAME} started with options {', '.join(app.state.store.options)}"
        )

        yield

        logger.info(
            f"Shutting down {config.SERVICE_NAME} service, "
            f"{app.state.store.total()} votes discarded"
        )

    # Docs routes are disabled so that every path serves the voting page
    app = FastAPI(
        title="Simple Voting Website",
        description="Vote for your favorite fruit and see the current results",
        version=config.APP_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )
    app.state.store = store if store is not None else VoteStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=config.CORS_ALLOW_METHODS,
        allow_headers=config.CORS_ALLOW_HEADERS,
    )

    @app.api_route("/{path:path}", methods=HANDLED_METHODS)
    async def vote_page(request: Request) -> Response:
        """Voting form on GET, vote submission on POST."""
        return await handle_request(request, request.app.state.store)

    return app


app = create_app()


def run():
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "voting_web.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
