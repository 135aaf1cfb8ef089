"""
Catalog lister.

Enumerates the publish area. A publish directory that does not exist yet
is an empty catalog, not an error.
"""

import logging
import os

from ipa_distribution.config import PUBLIC_PATH
from ipa_distribution.core.exceptions import StorageUnavailable

from .layout import StorageLayout
from .models import CatalogEntry

logger = logging.getLogger(__name__)


class CatalogLister:
    """Lists artifacts currently in the publish directory."""

    def __init__(self, layout: StorageLayout):
        self._layout = layout

    def list_published(self) -> list[CatalogEntry]:
        """
        List published entries, non-recursively, sorted by name.

        Returns:
            CatalogEntry per directory entry; empty when the publish
            directory is absent

        Raises:
            StorageUnavailable: If the directory exists but cannot be read
        """
        publish_root = self._layout.publish_root
        try:
            with os.scandir(publish_root) as it:
                names = sorted(entry.name for entry in it)
        except FileNotFoundError:
            logger.info(f"Directory not found: {publish_root}")
            return []
        except OSError as e:
            logger.error(f"Error reading directory {publish_root}: {e}")
            raise StorageUnavailable(
                "Error listing files",
                path=str(publish_root),
                operation="scandir",
            ) from e

        entries = [CatalogEntry(name=name, path=f"/{PUBLIC_PATH}/{name}") for name in names]
        logger.debug(f"Found {len(entries)} published file(s)")
        return entries
