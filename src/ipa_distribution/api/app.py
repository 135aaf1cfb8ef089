"""
FastAPI Application Setup.

Application factory for the IPA Distribution service.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from ipa_distribution.api.middleware.cors import add_cors_middleware
from ipa_distribution.api.middleware.logging import RequestLoggingMiddleware
from ipa_distribution.api.routes import apps, health, manifest, uploads
from ipa_distribution.api.schemas.exceptions import status_code_for
from ipa_distribution.api.staticfiles import PublishedFiles
from ipa_distribution.artifacts import ArtifactStore
from ipa_distribution.config import PUBLIC_PATH, DistributionConfig
from ipa_distribution.core.exceptions import DistributionError
from ipa_distribution.version import __version__

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Create the storage directories before the first request.

    A StorageUnavailable raised here aborts startup.
    """
    config: DistributionConfig = app.state.config
    logger.info("IPA Distribution API starting up...")
    logger.info(f"Version: {__version__}")
    logger.info(f"Staging directory: {config.staging_root}")
    logger.info(f"Publish directory: {config.publish_root}")
    if config.public_base_url is None:
        logger.warning("IPA_PUBLIC_BASE_URL is not set; manifest links will use the request host")

    await run_in_threadpool(app.state.store.ensure_layout)

    yield

    logger.info("IPA Distribution API shutting down...")


def create_app(config: DistributionConfig | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Service configuration (default: loaded from the environment)

    Returns:
        Configured FastAPI application instance
    """
    if config is None:
        config = DistributionConfig.from_env()

    logging.getLogger().setLevel(config.log_level)

    app = FastAPI(
        title="IPA Distribution API",
        description="Upload, list and install iOS builds over the air",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.store = ArtifactStore(config)

    app.add_middleware(RequestLoggingMiddleware)
    add_cors_middleware(app, allow_origins=config.cors_origins)

    app.include_router(uploads.router, tags=["Artifacts"])
    app.include_router(apps.router, tags=["Artifacts"])
    app.include_router(manifest.router, tags=["Manifest"])
    app.include_router(health.router, prefix="/health", tags=["Health"])

    # Directory is created by the lifespan hook, not at construction time
    app.mount(
        f"/{PUBLIC_PATH}",
        PublishedFiles(directory=config.publish_root, check_dir=False),
        name="distribution",
    )

    @app.exception_handler(DistributionError)
    async def distribution_error_handler(request: Request, exc: DistributionError) -> JSONResponse:
        """Map domain errors to 400/500 with a short message."""
        status_code = status_code_for(exc)
        extra = {"error": exc.to_dict(), "path": request.url.path}
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}", extra=extra)
        else:
            logger.info(f"{request.method} {request.url.path} rejected: {exc}", extra=extra)
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Keep framework errors (404, 405, malformed forms) in the same error shape."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/", response_class=PlainTextResponse, tags=["Root"])
    async def root() -> str:
        """Liveness probe."""
        return "IPA Distribution service is running"

    return app
