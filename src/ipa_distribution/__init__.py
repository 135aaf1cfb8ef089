"""
IPA Distribution - over-the-air delivery of iOS application builds.

Accepts uploaded .ipa binaries, publishes them under a version-keyed name,
lists published versions, and renders the manifest.plist the iOS installer
fetches to install a build.
"""

from ipa_distribution.version import __version__

# API module is available but not exported by default
# Import explicitly: from ipa_distribution.api import create_app

__all__ = ["__version__"]
