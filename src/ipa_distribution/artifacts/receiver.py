"""
Upload receiver.

Writes the raw bytes of an uploaded binary into the staging area under
its version-derived name. The payload is opaque: no content-type or
format checks are made.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import BinaryIO

from ipa_distribution.core.exceptions import MissingFile, StorageUnavailable

from .layout import StorageLayout
from .models import UploadResult

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024 * 1024
PARTIAL_SUFFIX = ".part"


class UploadReceiver:
    """Streams uploaded binaries into the staging directory."""

    def __init__(self, layout: StorageLayout, *, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self._layout = layout
        self._chunk_size = chunk_size

    def receive(self, source: BinaryIO | None, version: str | None) -> UploadResult:
        """
        Stage an uploaded binary.

        Bytes are written to a private partial file which is then renamed
        onto the staged name, so a staged file always holds one complete
        payload even when the same version is uploaded concurrently. Any
        staged file with the same version is overwritten.

        Args:
            source: Readable binary stream of the file part, None if absent
            version: Client-supplied version string

        Returns:
            UploadResult describing the staged file

        Raises:
            MissingFile: If no file part was supplied
            MissingVersion: If the version is absent or empty
            InvalidVersion: If the version cannot be used as a file name
            StorageUnavailable: If the write fails
        """
        if source is None:
            logger.info("No file uploaded")
            raise MissingFile()

        target = self._layout.staged_path(version)
        file_name = target.name
        logger.info(f"Saving file as: {file_name}")

        partial: Path | None = None
        size_bytes = 0
        try:
            with tempfile.NamedTemporaryFile(
                dir=target.parent,
                prefix=f".{file_name}.",
                suffix=PARTIAL_SUFFIX,
                delete=False,
            ) as dst:
                partial = Path(dst.name)
                while True:
                    chunk = source.read(self._chunk_size)
                    if not chunk:
                        break
                    dst.write(chunk)
                    size_bytes += len(chunk)
            # mkstemp creates 0600 files; published builds must stay world-readable
            os.chmod(partial, 0o644)
            os.replace(partial, target)
        except OSError as e:
            logger.error(f"Error writing {target}: {e}")
            if partial is not None:
                self._discard(partial)
            raise StorageUnavailable(
                f"Error saving file: {e.strerror or e}",
                path=str(target),
                operation="write",
            ) from e

        logger.info(f"Staged {file_name} ({size_bytes} bytes) at {target}")
        return UploadResult(version=version, staged_path=target, size_bytes=size_bytes)

    def _discard(self, partial: Path) -> None:
        """Remove a partially written staging file."""
        try:
            partial.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove partial upload {partial}: {e}")
