"""
FastAPI dependencies resolving per-application state.
"""

from fastapi import Request

from ipa_distribution.artifacts import ArtifactStore
from ipa_distribution.config import DistributionConfig


def get_config(request: Request) -> DistributionConfig:
    """Configuration the application was created with."""
    return request.app.state.config


def get_store(request: Request) -> ArtifactStore:
    """Artifact store bound to the configured directories."""
    return request.app.state.store
