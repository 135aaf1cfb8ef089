"""
Middleware for the IPA Distribution API.
"""

from ipa_distribution.api.middleware.cors import add_cors_middleware
from ipa_distribution.api.middleware.logging import RequestLoggingMiddleware

__all__ = [
    "add_cors_middleware",
    "RequestLoggingMiddleware",
]
