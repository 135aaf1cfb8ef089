"""
API route modules.
"""

from ipa_distribution.api.routes import apps, health, manifest, uploads

__all__ = ["apps", "health", "manifest", "uploads"]
