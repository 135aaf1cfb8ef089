"""
OTA manifest generation.

Renders the manifest.plist the iOS installer fetches through
itms-services://?action=download-manifest&url=...
"""

from .generator import (
    MANIFEST_CONTENT_TYPE,
    ManifestDescriptor,
    build_descriptor,
    download_url,
    generate_manifest,
    render_manifest,
)

__all__ = [
    "MANIFEST_CONTENT_TYPE",
    "ManifestDescriptor",
    "build_descriptor",
    "download_url",
    "generate_manifest",
    "render_manifest",
]
