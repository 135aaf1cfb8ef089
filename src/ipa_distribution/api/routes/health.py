"""
Health check endpoint.

Reports whether the staging and publish directories are usable.
"""

import os
from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from ipa_distribution.api.dependencies import get_store
from ipa_distribution.api.schemas.responses import HealthResponse
from ipa_distribution.artifacts import ArtifactStore
from ipa_distribution.version import __version__

router = APIRouter()


def check_directory(path: Path) -> str:
    """Describe a storage directory as healthy/unhealthy with a reason."""
    if not path.is_dir():
        return "unhealthy: missing"
    if not os.access(path, os.W_OK | os.X_OK):
        return "unhealthy: not writable"
    return "healthy"


def _collect(store: ArtifactStore) -> dict[str, str]:
    return {
        "staging": check_directory(store.layout.staging_root),
        "publish": check_directory(store.layout.publish_root),
    }


@router.get("", response_model=HealthResponse)
@router.get("/", response_model=HealthResponse, include_in_schema=False)
async def health_check(store: ArtifactStore = Depends(get_store)) -> HealthResponse:
    """
    Check storage directories.

    Status is "healthy" when both directories exist and are writable,
    otherwise "degraded". The service keeps answering either way.
    """
    components = await run_in_threadpool(_collect, store)
    overall = "healthy" if all(v == "healthy" for v in components.values()) else "degraded"

    return HealthResponse(
        status=overall,
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        components=components,
    )
