"""Provider-agnostic trust store certificate component interface."""

from __future__ import annotations

import logging
from typing import Protocol

import pulumi

logger: logging.Logger = logging.getLogger(__name__)


class CertificateOutputs:
    """Resolved outputs from a certificate uploaded to the trust store."""

    def __init__(
        self,
        certificate_id: pulumi.Output[str],
        serial_number: pulumi.Output[str],
        status: pulumi.Output[str],
        expires_on: pulumi.Output[str],
    ) -> None:
        """Initialise certificate outputs.

        Args:
            certificate_id: Identifier assigned by the trust store on upload.
            serial_number: Serial number parsed by the trust store.
            status: Trust store status of the entry, e.g. ``"active"``.
            expires_on: Expiry date reported by the trust store.
        """
        self.certificate_id: pulumi.Output[str] = certificate_id
        self.serial_number: pulumi.Output[str] = serial_number
        self.status: pulumi.Output[str] = status
        self.expires_on: pulumi.Output[str] = expires_on


class TrustStoreCertificateComponent(Protocol):
    """Provider-agnostic interface for a managed trust store certificate."""

    @property
    def outputs(self) -> CertificateOutputs:
        """Return the resolved certificate outputs."""
        ...
