"""Tests for OTA manifest generation."""

import plistlib

import pytest

from ipa_distribution.core.exceptions import InvalidParameter, MissingParameter
from ipa_distribution.manifest import (
    build_descriptor,
    download_url,
    generate_manifest,
    render_manifest,
)


class TestDownloadUrl:
    """Tests for download URL computation."""

    def test_builds_distribution_url(self) -> None:
        assert download_url("https://host", "2.3.1") == "https://host/distribution/ios/2.3.1.ipa"

    def test_trailing_slash_on_base_url(self) -> None:
        assert download_url("https://host/", "1.0") == "https://host/distribution/ios/1.0.ipa"

    def test_version_is_percent_encoded(self) -> None:
        assert (
            download_url("https://host", "1.0 beta")
            == "https://host/distribution/ios/1.0%20beta.ipa"
        )


class TestBuildDescriptor:
    """Tests for input validation."""

    def test_descriptor_fields(self) -> None:
        descriptor = build_descriptor("com.x.y", "2.3.1", "MyApp", "https://host")

        assert descriptor.bundle_id == "com.x.y"
        assert descriptor.version == "2.3.1"
        assert descriptor.title == "MyApp"
        assert descriptor.download_url == "https://host/distribution/ios/2.3.1.ipa"

    @pytest.mark.parametrize(
        "bundle_id,version,title,missing",
        [
            (None, "1.0", "App", ["bundleId"]),
            ("com.x.y", "", "App", ["version"]),
            ("com.x.y", "1.0", None, ["title"]),
            (None, None, None, ["bundleId", "version", "title"]),
        ],
    )
    def test_missing_parameters(self, bundle_id, version, title, missing) -> None:
        with pytest.raises(MissingParameter) as exc_info:
            build_descriptor(bundle_id, version, title, "https://host")

        assert exc_info.value.missing == missing
        for name in missing:
            assert name in exc_info.value.message

    def test_control_characters_are_rejected(self) -> None:
        with pytest.raises(InvalidParameter) as exc_info:
            build_descriptor("com.x.y", "1.0", "My\x07App", "https://host")

        assert exc_info.value.name == "title"


class TestGenerateManifest:
    """Tests for the rendered plist document."""

    def test_document_structure(self) -> None:
        document = generate_manifest("com.x.y", "2.3.1", "MyApp", "https://host")

        parsed = plistlib.loads(document.encode("utf-8"))
        assert parsed == {
            "items": [
                {
                    "assets": [
                        {
                            "kind": "software-package",
                            "url": "https://host/distribution/ios/2.3.1.ipa",
                        }
                    ],
                    "metadata": {
                        "bundle-identifier": "com.x.y",
                        "bundle-version": "2.3.1",
                        "kind": "software",
                        "title": "MyApp",
                    },
                }
            ]
        }

    def test_is_an_apple_plist(self) -> None:
        document = generate_manifest("com.x.y", "1.0", "MyApp", "https://host")

        assert document.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert "-//Apple//DTD PLIST 1.0//EN" in document
        assert '<plist version="1.0">' in document

    def test_is_deterministic(self) -> None:
        first = generate_manifest("com.x.y", "2.3.1", "MyApp", "https://host")
        second = generate_manifest("com.x.y", "2.3.1", "MyApp", "https://host")

        assert first == second

    def test_reserved_characters_are_escaped(self) -> None:
        document = generate_manifest("com.x.y", "1.0", "Tom & Jerry <Beta>", "https://host")

        assert "<string>Tom &amp; Jerry &lt;Beta&gt;</string>" in document
        parsed = plistlib.loads(document.encode("utf-8"))
        assert parsed["items"][0]["metadata"]["title"] == "Tom & Jerry <Beta>"

    def test_render_matches_generate(self) -> None:
        descriptor = build_descriptor("com.x.y", "1.0", "MyApp", "https://host")

        assert render_manifest(descriptor) == generate_manifest(
            "com.x.y", "1.0", "MyApp", "https://host"
        )
