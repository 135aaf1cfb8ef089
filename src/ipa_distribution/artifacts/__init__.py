"""
IPA Distribution Artifacts Module.

Staging, publishing and listing of uploaded application binaries.
"""

from .catalog import CatalogLister
from .layout import ARTIFACT_SUFFIX, StorageLayout, artifact_file_name
from .models import CatalogEntry, PublishResult, UploadResult
from .publisher import Publisher
from .receiver import UploadReceiver
from .store import ArtifactStore

__all__ = [
    # Models
    "UploadResult",
    "PublishResult",
    "CatalogEntry",
    # Layout
    "StorageLayout",
    "ARTIFACT_SUFFIX",
    "artifact_file_name",
    # Operations
    "UploadReceiver",
    "Publisher",
    "CatalogLister",
    "ArtifactStore",
]
