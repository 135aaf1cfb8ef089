"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from ipa_distribution.api.app import create_app
from ipa_distribution.artifacts import ArtifactStore
from ipa_distribution.config import DistributionConfig

PUBLIC_BASE_URL = "https://builds.example.com"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config(temp_dir: Path) -> DistributionConfig:
    """Configuration rooted in a fresh temporary directory."""
    return DistributionConfig.for_root(temp_dir / "storage", public_base_url=PUBLIC_BASE_URL)


@pytest.fixture
def store(config: DistributionConfig) -> ArtifactStore:
    """Artifact store with its directories created."""
    artifact_store = ArtifactStore(config)
    artifact_store.ensure_layout()
    return artifact_store


@pytest.fixture
def client(config: DistributionConfig) -> Generator[TestClient, None, None]:
    """Test client; the context manager runs the lifespan hook."""
    app = create_app(config)
    with TestClient(app) as test_client:
        yield test_client
