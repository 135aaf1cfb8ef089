"""
Request/response schemas and error mapping for the API.
"""

from ipa_distribution.api.schemas.exceptions import status_code_for
from ipa_distribution.api.schemas.responses import (
    AppEntryResponse,
    ErrorResponse,
    HealthResponse,
    UploadResponse,
)

__all__ = [
    "AppEntryResponse",
    "ErrorResponse",
    "HealthResponse",
    "UploadResponse",
    "status_code_for",
]
