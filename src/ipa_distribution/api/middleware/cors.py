"""
CORS (Cross-Origin Resource Sharing) middleware configuration.

Browser-based upload pages and install pages live on other origins, so
every response carries the CORS headers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

DEFAULT_ALLOW_ORIGINS: list[str] = ["*"]

DEFAULT_ALLOW_METHODS: list[str] = ["GET", "POST", "OPTIONS"]

DEFAULT_ALLOW_HEADERS: list[str] = ["Content-Type"]


def add_cors_middleware(
    app: FastAPI,
    *,
    allow_origins: list[str] | None = None,
    allow_methods: list[str] | None = None,
    allow_headers: list[str] | None = None,
    max_age: int = 600,
) -> None:
    """
    Add CORS middleware to the FastAPI application.

    Args:
        app: FastAPI application instance
        allow_origins: Allowed origins, ["*"] for any
        allow_methods: Allowed HTTP methods
        allow_headers: Allowed request headers
        max_age: Cache time for preflight requests (seconds)
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins or DEFAULT_ALLOW_ORIGINS,
        allow_credentials=False,
        allow_methods=allow_methods or DEFAULT_ALLOW_METHODS,
        allow_headers=allow_headers or DEFAULT_ALLOW_HEADERS,
        max_age=max_age,
    )
