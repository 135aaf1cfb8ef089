"""
OTA manifest endpoint.

Serves the manifest.plist referenced from an
itms-services://?action=download-manifest&url=... install link.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response

from ipa_distribution.api.dependencies import get_config
from ipa_distribution.api.schemas.responses import ErrorResponse
from ipa_distribution.config import DistributionConfig
from ipa_distribution.manifest import MANIFEST_CONTENT_TYPE, generate_manifest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/manifest.plist",
    response_class=Response,
    responses={
        200: {"content": {"text/xml": {}}, "description": "OTA install manifest"},
        400: {"model": ErrorResponse},
    },
)
async def get_manifest(
    request: Request,
    bundle_id: str | None = Query(None, alias="bundleId", description="App bundle identifier"),
    version: str | None = Query(None, description="Published version"),
    title: str | None = Query(None, description="Title shown by the installer"),
    config: DistributionConfig = Depends(get_config),
) -> Response:
    """Render the install manifest for a published version."""
    base_url = config.public_base_url or str(request.base_url).rstrip("/")
    document = generate_manifest(bundle_id, version, title, base_url)

    logger.debug(f"Manifest generated for {bundle_id} {version}")
    return Response(
        content=document,
        media_type=MANIFEST_CONTENT_TYPE,
        headers={"Content-Disposition": "inline"},
    )
