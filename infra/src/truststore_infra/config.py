"""Typed provider configuration loaded from environment variables at startup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from truststore_infra.client import DEFAULT_VERSION, TrustStoreClient

logger: logging.Logger = logging.getLogger(__name__)

ENV_PREFIX: str = "TRUST_STORE_"
TOKEN_ENV_VAR: str = f"{ENV_PREFIX}TOKEN"


class ProviderSettings(BaseSettings):
    """Fully validated trust store provider configuration.

    ``token`` and ``url`` are the provider-level configuration; both are
    required. Raises ``ValidationError`` on missing or invalid values.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    token: str = Field(min_length=1, repr=False)
    url: str = Field(min_length=1)
    certificate_path: Path | None = None
    resource_name: str = "trust-store-certificate"
    strict_decode: bool = False
    version: str = DEFAULT_VERSION
    environment: Literal["prod", "staging", "dev"] = "prod"

    @classmethod
    def load(cls) -> ProviderSettings:
        """Load and validate configuration from the environment.

        Logs each resolved non-secret setting at DEBUG level.
        Raises ``pydantic.ValidationError`` on missing or invalid values.
        """
        settings = cls()  # type: ignore[call-arg]  # env vars supply required fields
        logger.debug(
            "provider_settings_loaded",
            extra={
                "url": settings.url,
                "certificate_path": str(settings.certificate_path),
                "strict_decode": settings.strict_decode,
                "environment": settings.environment,
            },
        )
        return settings

    def client(self) -> TrustStoreClient:
        """Build the immutable client handed to every lifecycle operation."""
        return TrustStoreClient(endpoint=self.url, credential=self.token, version=self.version)

    def read_certificate(self) -> str:
        """Return the PEM blob at ``certificate_path``.

        Raises:
            ValueError: ``certificate_path`` is not configured.
        """
        if self.certificate_path is None:
            raise ValueError("TRUST_STORE_CERTIFICATE_PATH is not set.")
        return self.certificate_path.read_text(encoding="utf-8")
