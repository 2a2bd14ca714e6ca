"""Pulumi stack entry point for the trust store certificate."""

from __future__ import annotations

import logging

import pulumi
import structlog

from truststore_infra.config import ProviderSettings
from truststore_infra.providers.dynamic.certificate import (
    TrustStoreCertificate,
    TrustStoreCertificateArgs,
)

logger: logging.Logger = logging.getLogger(__name__)


class TrustStoreStack:
    """Declares the managed certificate from resolved provider settings."""

    def __init__(self, settings: ProviderSettings) -> None:
        """Initialise the stack with resolved settings."""
        self._settings: ProviderSettings = settings

    def run(self) -> TrustStoreCertificate:
        """Declare the certificate resource and export its computed attributes."""
        settings = self._settings
        logger.info(
            "stack_run_started",
            extra={"url": settings.url, "environment": settings.environment},
        )

        certificate = TrustStoreCertificate(
            settings.resource_name,
            TrustStoreCertificateArgs(certificate=settings.read_certificate()),
            client=settings.client(),
            strict_decode=settings.strict_decode,
        )

        pulumi.export("certificate_id", certificate.outputs.certificate_id)
        pulumi.export("serial_number", certificate.outputs.serial_number)
        pulumi.export("status", certificate.outputs.status)
        pulumi.export("expires_on", certificate.outputs.expires_on)
        return certificate


if __name__ == "__main__":
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO))
    TrustStoreStack(settings=ProviderSettings.load()).run()
