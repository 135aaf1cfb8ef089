"""
IPA Distribution API Module.

HTTP surface for uploading, listing and installing builds.
"""

from ipa_distribution.api.app import create_app

__all__ = ["create_app"]
