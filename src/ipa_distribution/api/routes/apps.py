"""
Catalog endpoint.

Lists every artifact currently in the publish area.
"""

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from ipa_distribution.api.dependencies import get_store
from ipa_distribution.api.schemas.responses import AppEntryResponse, ErrorResponse
from ipa_distribution.artifacts import ArtifactStore

router = APIRouter()


@router.get(
    "/apps",
    response_model=list[AppEntryResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_apps(store: ArtifactStore = Depends(get_store)) -> list[AppEntryResponse]:
    """
    List published builds, sorted by file name.

    Returns an empty list when nothing has been published yet.
    """
    entries = await run_in_threadpool(store.list_published)
    return [AppEntryResponse(name=entry.name, path=entry.path) for entry in entries]
