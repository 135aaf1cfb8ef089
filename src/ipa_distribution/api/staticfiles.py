"""
Static download of published builds.
"""

import logging
import os

from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)


class PublishedFiles(StaticFiles):
    """
    StaticFiles that tolerates a missing publish directory.

    The publish root may live on a volatile path that is cleared while the
    service runs. Starlette treats a missing directory as a configuration
    error (500); here it only means nothing is published, so lookups fall
    through to the normal 404.
    """

    async def check_config(self) -> None:
        if self.directory is not None and not await run_in_threadpool(
            os.path.isdir, self.directory
        ):
            logger.warning(f"Publish directory {self.directory} is missing")
            return
        await super().check_config()
