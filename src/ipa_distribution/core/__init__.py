"""
Core building blocks shared by storage, manifest and API layers.
"""

from ipa_distribution.core.exceptions import (
    ConfigurationError,
    DistributionError,
    InvalidParameter,
    InvalidVersion,
    MissingFile,
    MissingParameter,
    MissingVersion,
    SourceNotFound,
    StorageUnavailable,
)

__all__ = [
    "DistributionError",
    "ConfigurationError",
    "MissingFile",
    "MissingVersion",
    "InvalidVersion",
    "MissingParameter",
    "InvalidParameter",
    "SourceNotFound",
    "StorageUnavailable",
]
