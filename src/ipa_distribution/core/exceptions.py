"""
IPA Distribution Exception Hierarchy.

Defines the errors raised by the storage, publishing and manifest layers.
Every error is request-local: the API maps input problems to 400 and
storage/environment problems to 500.
"""

from typing import Any


class DistributionError(Exception):
    """
    Base exception for all IPA Distribution errors.

    All custom exceptions inherit from this class, allowing
    generic catch blocks and consistent error handling.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a DistributionError.

        Args:
            message: Human-readable error message
            details: Optional structured data for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DistributionError):
    """
    Raised when service configuration is invalid.

    Detected at load time, before any request is served.
    """

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if setting:
            details["setting"] = setting

        super().__init__(message, details=details)
        self.setting = setting


class MissingFile(DistributionError):
    """Raised when an upload request carries no file part."""

    def __init__(self, message: str = "No file was uploaded", **kwargs):
        super().__init__(message, **kwargs)


class MissingVersion(DistributionError):
    """Raised when an upload request has no (or an empty) version field."""

    def __init__(self, message: str = "Missing parameter: version", **kwargs):
        super().__init__(message, **kwargs)


class InvalidVersion(DistributionError):
    """
    Raised when a version string cannot be used as a file name.

    Versions are opaque, but they become `{version}.ipa` on disk, so
    anything that would resolve outside the storage directory is refused.
    """

    def __init__(self, version: str, *, reason: str | None = None):
        details: dict[str, Any] = {"version": version}
        if reason:
            details["reason"] = reason

        super().__init__(f"Invalid version: {version!r}", details=details)
        self.version = version


class MissingParameter(DistributionError):
    """Raised when required manifest parameters are absent or empty."""

    def __init__(self, missing: list[str]):
        super().__init__(
            f"Missing parameter: {', '.join(missing)}",
            details={"missing": missing},
        )
        self.missing = missing


class SourceNotFound(DistributionError):
    """
    Raised when a staged artifact is absent at publish time.

    Typically the upload step failed or was skipped. The client is
    expected to upload again.
    """

    def __init__(self, version: str, path: str | None = None):
        details: dict[str, Any] = {"version": version}
        if path:
            details["path"] = path

        super().__init__("File not found at source path", details=details)
        self.version = version
        self.path = path


class StorageUnavailable(DistributionError):
    """
    Raised when the filesystem refuses an operation.

    Covers directory creation, writes, renames and directory reads
    (permission denied, disk full, cross-device rename).
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if path:
            details["path"] = path
        if operation:
            details["operation"] = operation

        super().__init__(message, details=details)
        self.path = path
        self.operation = operation


class InvalidParameter(DistributionError):
    """Raised when a manifest parameter cannot be represented in a plist."""

    def __init__(self, name: str, *, reason: str | None = None):
        details: dict[str, Any] = {"parameter": name}
        if reason:
            details["reason"] = reason

        super().__init__(f"Invalid parameter: {name}", details=details)
        self.name = name
