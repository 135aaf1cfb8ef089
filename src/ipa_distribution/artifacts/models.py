"""
Pydantic models for staged, published and listed artifacts.
"""

from pathlib import Path

from pydantic import BaseModel, Field


class UploadResult(BaseModel):
    """Outcome of writing an upload into the staging area."""

    version: str = Field(description="Client-supplied version string")
    staged_path: Path = Field(description="Absolute path of the staged file")
    size_bytes: int = Field(description="Number of bytes written")


class PublishResult(BaseModel):
    """Outcome of moving a staged artifact into the publish area."""

    version: str = Field(description="Client-supplied version string")
    file_name: str = Field(
        description="Published path relative to the service root, e.g. distribution/ios/1.0.ipa"
    )
    published_path: Path = Field(description="Filesystem path of the published file")


class CatalogEntry(BaseModel):
    """A single entry of the publish area listing."""

    name: str = Field(description="File name inside the publish area")
    path: str = Field(description="Public URL path of the file")
