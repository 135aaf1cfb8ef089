"""
Upload endpoint.

Receives a multipart form with the binary in the `ipa` field and its
version in the `version` field, then stages and publishes it in one step.
"""

import logging

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from ipa_distribution.api.dependencies import get_store
from ipa_distribution.api.schemas.responses import ErrorResponse, UploadResponse
from ipa_distribution.artifacts import ArtifactStore

router = APIRouter()
logger = logging.getLogger(__name__)

UPLOAD_FIELD = "ipa"
VERSION_FIELD = "version"


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_artifact(
    request: Request,
    store: ArtifactStore = Depends(get_store),
) -> UploadResponse:
    """
    Upload and publish an .ipa build.

    Form fields:
        ipa: The binary (file part)
        version: Version string; the build is stored as {version}.ipa

    Uploading an existing version replaces it.
    """
    logger.info("Upload request received")
    form = await request.form()
    try:
        upload = form.get(UPLOAD_FIELD)
        version = form.get(VERSION_FIELD)

        source = upload.file if isinstance(upload, UploadFile) else None
        if not isinstance(version, str):
            version = None

        logger.info(
            f"File received: {upload.filename if source else 'No file'}, version: {version!r}"
        )
        result = await run_in_threadpool(store.upload, source, version)
    finally:
        await form.close()

    return UploadResponse(message="Upload successful", fileName=result.file_name)
