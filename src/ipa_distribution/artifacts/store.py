"""
Artifact store.

Single entry point used by the API and the CLI. Upload and publish are
fused into one operation so callers never observe a file that is staged
but not yet published.
"""

from pathlib import Path
from typing import BinaryIO

from ipa_distribution.config import DistributionConfig

from .catalog import CatalogLister
from .layout import StorageLayout
from .models import CatalogEntry, PublishResult
from .publisher import Publisher
from .receiver import UploadReceiver


class ArtifactStore:
    """
    Facade over the staging/publish state machine.

    All state lives on the filesystem; instances hold no per-request data
    and can be shared between concurrent requests.
    """

    def __init__(self, config: DistributionConfig):
        self.layout = StorageLayout(config.staging_root, config.publish_root)
        self.receiver = UploadReceiver(self.layout)
        self.publisher = Publisher(self.layout)
        self.catalog = CatalogLister(self.layout)

    def ensure_layout(self) -> None:
        """Create the staging and publish directories if missing."""
        self.layout.ensure()

    def upload(self, source: BinaryIO | None, version: str | None) -> PublishResult:
        """
        Stage and publish an uploaded binary.

        Args:
            source: Binary stream of the uploaded file, None if absent
            version: Client-supplied version string

        Returns:
            PublishResult for the newly published artifact
        """
        staged = self.receiver.receive(source, version)
        return self.publisher.publish(staged.version)

    def list_published(self) -> list[CatalogEntry]:
        """List published artifacts."""
        return self.catalog.list_published()

    def published_path(self, version: str) -> Path:
        """On-disk location a version is served from, whether or not it exists yet."""
        return self.layout.published_path(version)

