"""
Service configuration.

All deployment-specific values (storage paths, public base URL, port) are
collected into one DistributionConfig, built once at startup and passed to
the application factory.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from ipa_distribution.core.exceptions import ConfigurationError

DEFAULT_STORAGE_ROOT = "var"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
# Names understood by both the logging module and uvicorn --log-level
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# Relative location of published artifacts, both on disk under the storage
# root and in public URLs.
PUBLIC_PATH = "distribution/ios"


@dataclass(frozen=True)
class DistributionConfig:
    """
    Runtime configuration for the distribution service.

    Attributes:
        staging_root: Directory holding just-uploaded artifacts
        publish_root: Directory served under /distribution/ios
        public_base_url: Externally reachable base URL used in manifests;
            when None the URL is derived from the incoming request
        host: Bind address for the HTTP server
        port: Listening port for the HTTP server
        cors_origins: Origins allowed to call the API from a browser
        log_level: Root logging level name
    """

    staging_root: Path
    publish_root: Path
    public_base_url: str | None = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def for_root(cls, storage_root: Path | str, **kwargs) -> "DistributionConfig":
        """Build a config whose staging and publish areas live under one root."""
        root = Path(storage_root)
        return cls(
            staging_root=root / "uploads",
            publish_root=root / PUBLIC_PATH,
            **kwargs,
        )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "DistributionConfig":
        """
        Load configuration from environment variables.

        Reads IPA_STORAGE_ROOT, IPA_STAGING_ROOT, IPA_PUBLISH_ROOT,
        IPA_PUBLIC_BASE_URL, IPA_HOST, PORT / IPA_PORT, IPA_CORS_ORIGINS
        and IPA_LOG_LEVEL.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Loaded DistributionConfig

        Raises:
            ConfigurationError: If a value cannot be parsed
        """
        env = os.environ if environ is None else environ

        storage_root = Path(env.get("IPA_STORAGE_ROOT") or DEFAULT_STORAGE_ROOT)
        staging_root = Path(env.get("IPA_STAGING_ROOT") or storage_root / "uploads")
        publish_root = Path(env.get("IPA_PUBLISH_ROOT") or storage_root / PUBLIC_PATH)

        base_url = (env.get("IPA_PUBLIC_BASE_URL") or "").strip().rstrip("/") or None

        raw_port = env.get("IPA_PORT") or env.get("PORT") or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid port: {raw_port}", setting="IPA_PORT"
            ) from e
        if not 0 < port < 65536:
            raise ConfigurationError(f"Port out of range: {port}", setting="IPA_PORT")

        log_level = (env.get("IPA_LOG_LEVEL") or "").strip().upper() or DEFAULT_LOG_LEVEL
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {log_level}", setting="IPA_LOG_LEVEL"
            )

        origins = [
            origin.strip()
            for origin in (env.get("IPA_CORS_ORIGINS") or "*").split(",")
            if origin.strip()
        ]

        return cls(
            staging_root=staging_root,
            publish_root=publish_root,
            public_base_url=base_url,
            host=env.get("IPA_HOST") or DEFAULT_HOST,
            port=port,
            cors_origins=origins or ["*"],
            log_level=log_level,
        )
