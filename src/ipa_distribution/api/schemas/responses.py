"""
Pydantic response schemas for API endpoints.
"""

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Response for a successful upload."""

    message: str = Field(..., description="Human-readable outcome")
    fileName: str = Field(..., description="Published path relative to the service root")

    model_config = {"extra": "forbid"}


class AppEntryResponse(BaseModel):
    """One published artifact in the /apps listing."""

    name: str = Field(..., description="File name, e.g. 1.0.0.ipa")
    path: str = Field(..., description="Public download path")


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str = Field(..., description="Reason for the failure")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="healthy or degraded")
    version: str = Field(..., description="Service version")
    timestamp: str = Field(..., description="ISO timestamp of the check")
    components: dict[str, str] = Field(
        default_factory=dict, description="Status of each storage directory"
    )
