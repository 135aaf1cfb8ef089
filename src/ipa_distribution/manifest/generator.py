"""
Manifest generator.

Builds the OTA-install descriptor for a published build. The document has a
fixed shape: one item with a single software-package asset pointing at the
download URL, plus bundle metadata. Rendering is pure and uncached.
"""

import plistlib
import re
from urllib.parse import quote

from pydantic import BaseModel, Field

from ipa_distribution.artifacts.layout import ARTIFACT_SUFFIX
from ipa_distribution.config import PUBLIC_PATH
from ipa_distribution.core.exceptions import InvalidParameter, MissingParameter

MANIFEST_CONTENT_TYPE = "text/xml; charset=utf-8"

# Characters XML 1.0 cannot carry, even escaped
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


class ManifestDescriptor(BaseModel):
    """Request-scoped values embedded in a manifest."""

    bundle_id: str = Field(description="CFBundleIdentifier of the app")
    version: str = Field(description="Bundle version, also the artifact key")
    title: str = Field(description="Title shown by the installer prompt")
    download_url: str = Field(description="Absolute URL of the .ipa")

    def to_plist(self) -> dict:
        """Return the manifest as a property list structure."""
        return {
            "items": [
                {
                    "assets": [
                        {
                            "kind": "software-package",
                            "url": self.download_url,
                        }
                    ],
                    "metadata": {
                        "bundle-identifier": self.bundle_id,
                        "bundle-version": self.version,
                        "kind": "software",
                        "title": self.title,
                    },
                }
            ]
        }


def download_url(base_url: str, version: str) -> str:
    """Absolute download URL of the published artifact for a version."""
    # Percent-encode so versions with spaces or reserved characters stay one path segment
    return f"{base_url.rstrip('/')}/{PUBLIC_PATH}/{quote(version, safe='')}{ARTIFACT_SUFFIX}"


def build_descriptor(
    bundle_id: str | None,
    version: str | None,
    title: str | None,
    base_url: str,
) -> ManifestDescriptor:
    """
    Validate inputs and compute the manifest descriptor.

    Args:
        bundle_id: App bundle identifier
        version: Artifact version
        title: Display title
        base_url: Externally reachable base URL of this service

    Returns:
        ManifestDescriptor with the computed download URL

    Raises:
        MissingParameter: If any of bundle_id, version, title is absent or empty
        InvalidParameter: If a value contains characters XML cannot encode
    """
    params = {"bundleId": bundle_id, "version": version, "title": title}
    missing = [name for name, value in params.items() if not value]
    if missing:
        raise MissingParameter(missing)

    for name, value in params.items():
        if _CONTROL_CHARS.search(value):
            raise InvalidParameter(name, reason="contains control characters")

    return ManifestDescriptor(
        bundle_id=bundle_id,
        version=version,
        title=title,
        download_url=download_url(base_url, version),
    )


def render_manifest(descriptor: ManifestDescriptor) -> str:
    """Serialize a descriptor as an XML property list."""
    # plistlib escapes &, < and > in string values
    return plistlib.dumps(descriptor.to_plist(), fmt=plistlib.FMT_XML).decode("utf-8")


def generate_manifest(
    bundle_id: str | None,
    version: str | None,
    title: str | None,
    base_url: str,
) -> str:
    """Validate inputs and render the manifest document."""
    return render_manifest(build_descriptor(bundle_id, version, title, base_url))
