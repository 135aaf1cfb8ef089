"""
Storage layout for staged and published artifacts.

Two directories make up the layout:
- staging_root/{version}.ipa   uploads waiting to be published
- publish_root/{version}.ipa   artifacts served under /distribution/ios
"""

import logging
from pathlib import Path

from ipa_distribution.core.exceptions import InvalidVersion, MissingVersion, StorageUnavailable

logger = logging.getLogger(__name__)

ARTIFACT_SUFFIX = ".ipa"

_FORBIDDEN_VERSIONS = {".", ".."}


def artifact_file_name(version: str | None) -> str:
    """
    Map a version string to its on-disk file name.

    Args:
        version: Client-supplied version

    Returns:
        The file name `{version}.ipa`

    Raises:
        MissingVersion: If version is None, empty or whitespace
        InvalidVersion: If version would resolve outside its directory
    """
    if version is None or not version.strip():
        raise MissingVersion()
    if version in _FORBIDDEN_VERSIONS:
        raise InvalidVersion(version, reason="reserved path segment")
    if "/" in version or "\\" in version or "\x00" in version:
        raise InvalidVersion(version, reason="contains a path separator")
    return f"{version}{ARTIFACT_SUFFIX}"


class StorageLayout:
    """
    Resolves and creates the staging and publish directories.

    Both directories are created once at process start; ensure() is
    idempotent and may be called again at any time.
    """

    def __init__(self, staging_root: Path, publish_root: Path):
        self.staging_root = Path(staging_root)
        self.publish_root = Path(publish_root)

    def ensure(self) -> None:
        """
        Create both directories, including missing parents.

        Raises:
            StorageUnavailable: If a directory cannot be created
        """
        for directory in (self.staging_root, self.publish_root):
            self._ensure_dir(directory)

    def _ensure_dir(self, directory: Path) -> None:
        if directory.is_dir():
            logger.info(f"Directory exists: {directory}")
            return

        logger.info(f"Creating directory: {directory}")
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create directory {directory}: {e}")
            raise StorageUnavailable(
                f"Cannot create directory: {e.strerror or e}",
                path=str(directory),
                operation="mkdir",
            ) from e

    def staged_path(self, version: str) -> Path:
        """Return the staging path for a version."""
        return self.staging_root / artifact_file_name(version)

    def published_path(self, version: str) -> Path:
        """Return the publish path for a version."""
        return self.publish_root / artifact_file_name(version)
