"""Tests for CLI module."""

import plistlib
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from ipa_distribution.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of CLI tests."""
    for name in ("IPA_STORAGE_ROOT", "IPA_STAGING_ROOT", "IPA_PUBLISH_ROOT",
                 "IPA_PUBLIC_BASE_URL", "IPA_PORT", "PORT", "IPA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ipa_file(temp_dir: Path) -> Path:
    path = temp_dir / "App.ipa"
    path.write_bytes(b"PK\x03\x04 fake ipa")
    return path


class TestPublishCommand:
    """Tests for the publish command."""

    def test_publish_local_file(self, ipa_file: Path, temp_dir: Path) -> None:
        storage = temp_dir / "storage"

        result = runner.invoke(
            app, ["publish", str(ipa_file), "--version", "1.0.0", "--storage-root", str(storage)]
        )

        assert result.exit_code == 0
        assert "distribution/ios/1.0.0.ipa" in result.stdout
        assert "Stored at" in result.stdout
        assert (storage / "distribution" / "ios" / "1.0.0.ipa").read_bytes() == ipa_file.read_bytes()
        assert ipa_file.exists()

    def test_publish_invalid_version(self, ipa_file: Path, temp_dir: Path) -> None:
        result = runner.invoke(
            app, ["publish", str(ipa_file), "--version", "../x", "--storage-root", str(temp_dir)]
        )

        assert result.exit_code == 1
        assert "Publish failed" in result.stdout

    def test_publish_missing_file(self, temp_dir: Path) -> None:
        result = runner.invoke(
            app, ["publish", str(temp_dir / "nope.ipa"), "--version", "1.0"]
        )

        assert result.exit_code != 0


class TestAppsCommand:
    """Tests for the apps command."""

    def test_empty_catalog(self, temp_dir: Path) -> None:
        result = runner.invoke(app, ["apps", "--storage-root", str(temp_dir / "empty")])

        assert result.exit_code == 0
        assert "Published Builds (0)" in result.stdout

    def test_lists_published_builds(self, ipa_file: Path, temp_dir: Path) -> None:
        storage = str(temp_dir / "storage")
        runner.invoke(app, ["publish", str(ipa_file), "-v", "2.0", "-s", storage])

        result = runner.invoke(app, ["apps", "-s", storage])

        assert result.exit_code == 0
        assert "Published Builds (1)" in result.stdout
        assert "2.0.ipa" in result.stdout


class TestManifestCommand:
    """Tests for the manifest command."""

    def test_prints_manifest(self) -> None:
        result = runner.invoke(
            app,
            ["manifest", "-b", "com.x.y", "-v", "2.3.1", "-t", "MyApp",
             "--base-url", "https://host"],
        )

        assert result.exit_code == 0
        parsed = plistlib.loads(result.stdout.encode("utf-8"))
        assert parsed["items"][0]["assets"][0]["url"] == "https://host/distribution/ios/2.3.1.ipa"

    def test_base_url_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IPA_PUBLIC_BASE_URL", "https://env-host")

        result = runner.invoke(app, ["manifest", "-b", "com.x.y", "-v", "1.0", "-t", "MyApp"])

        assert result.exit_code == 0
        assert "https://env-host/distribution/ios/1.0.ipa" in result.stdout

    def test_requires_base_url(self) -> None:
        result = runner.invoke(app, ["manifest", "-b", "com.x.y", "-v", "1.0", "-t", "MyApp"])

        assert result.exit_code == 2
        assert "No base URL" in result.stdout


class TestServeCommand:
    """Tests for the serve command."""

    def test_runs_uvicorn_with_factory(self) -> None:
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "9001"])

        assert result.exit_code == 0
        args, kwargs = mock_run.call_args
        assert args[0] == "ipa_distribution.api.app:create_app"
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9001

    def test_invalid_port_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not-a-port")

        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 2
        mock_run.assert_not_called()

    def test_unknown_log_level_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IPA_LOG_LEVEL", "verbose")

        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 2
        assert "Unknown log level" in result.stdout
        mock_run.assert_not_called()


class TestVersionCommand:
    """Tests for the version command."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "IPA Distribution v" in result.stdout
