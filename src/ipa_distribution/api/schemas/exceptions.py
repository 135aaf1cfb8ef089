"""
Mapping from domain errors to HTTP error responses.
"""

from fastapi import status

from ipa_distribution.core.exceptions import (
    DistributionError,
    InvalidParameter,
    InvalidVersion,
    MissingFile,
    MissingParameter,
    MissingVersion,
)

# Errors caused by the caller's input; everything else is a server-side
# storage or environment failure.
CLIENT_ERRORS: tuple[type[DistributionError], ...] = (
    MissingFile,
    MissingVersion,
    InvalidVersion,
    MissingParameter,
    InvalidParameter,
)


def status_code_for(exc: DistributionError) -> int:
    """Return the HTTP status code for a domain error."""
    if isinstance(exc, CLIENT_ERRORS):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR

