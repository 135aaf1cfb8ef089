"""
Publisher.

Moves a staged artifact into the publish area with a single atomic
rename. This is the only way an artifact becomes listable and
downloadable.
"""

import logging
import os

from ipa_distribution.config import PUBLIC_PATH
from ipa_distribution.core.exceptions import SourceNotFound, StorageUnavailable

from .layout import StorageLayout
from .models import PublishResult

logger = logging.getLogger(__name__)


class Publisher:
    """Promotes staged artifacts to the publish directory."""

    def __init__(self, layout: StorageLayout):
        self._layout = layout

    def publish(self, version: str) -> PublishResult:
        """
        Publish the staged artifact for a version.

        Replaces any published artifact with the same version.

        Args:
            version: Version whose staged file should be published

        Returns:
            PublishResult with the public relative path

        Raises:
            SourceNotFound: If nothing is staged for the version
            StorageUnavailable: If the rename fails
        """
        source = self._layout.staged_path(version)
        target = self._layout.published_path(version)

        logger.debug(f"Source path: {source}")
        logger.debug(f"Target path: {target}")

        if not source.is_file():
            logger.error(f"Staged file not found: {source}")
            raise SourceNotFound(version, str(source))

        try:
            os.replace(source, target)
        except OSError as e:
            if not source.exists():
                # Staged file vanished between the check and the rename
                raise SourceNotFound(version, str(source)) from e
            logger.error(f"Error moving file: {e}")
            raise StorageUnavailable(
                f"Error moving file: {e.strerror or e}",
                path=str(target),
                operation="rename",
            ) from e

        logger.info(f"File moved successfully to {target}")
        return PublishResult(
            version=version,
            file_name=f"{PUBLIC_PATH}/{target.name}",
            published_path=target,
        )
