"""Pulumi dynamic provider binding the certificate lifecycle to the engine."""

from __future__ import annotations

import logging
import os
from typing import Any

import pulumi
import pulumi.dynamic

from truststore_infra.client import PROVIDER_TYPE_NAME, TrustStoreClient
from truststore_infra.components.certificate import CertificateOutputs
from truststore_infra.config import TOKEN_ENV_VAR
from truststore_infra.controller import CertificateLifecycle
from truststore_infra.errors import DecodeAnomaly
from truststore_infra.models import DesiredCertificate, TrustStoreRecord

logger: logging.Logger = logging.getLogger(__name__)

RESOURCE_TYPE_NAME: str = f"{PROVIDER_TYPE_NAME}_origin"

# The Pulumi resource ID carries the record ``id``; these are the remaining outputs.
_COMPUTED_OUTPUTS: tuple[str, ...] = (
    "serial_number",
    "status",
    "issuer",
    "signature",
    "uploaded_on",
    "uploaded_at",
    "expires_on",
)


def _to_outputs(record: TrustStoreRecord) -> dict[str, str]:
    outs = record.to_state()
    del outs["id"]
    return outs


def _from_outputs(certificate_id: str, props: dict[str, Any]) -> TrustStoreRecord:
    return TrustStoreRecord.from_state({**props, "id": certificate_id})


class TrustStoreCertificateProvider(pulumi.dynamic.ResourceProvider):
    """Dynamic provider for ``opaas_trust_store_origin`` resources.

    Read is a no-op (persisted state is trusted until the next create or
    delete) and Update is a no-op (certificates are write-once).

    Pulumi pickles the provider into the stack state, so the pickled form
    carries no credential; it is resolved again from ``TRUST_STORE_TOKEN`` in
    the process that unpickles it.
    """

    def __init__(self, client: TrustStoreClient, strict_decode: bool = False) -> None:
        if not isinstance(client, TrustStoreClient):
            raise TypeError(
                f"Expected TrustStoreClient, got: {type(client).__name__}. "
                "Please report this issue to the provider developers."
            )
        self._lifecycle: CertificateLifecycle = CertificateLifecycle(
            client, strict_decode=strict_decode
        )

    def __getstate__(self) -> dict[str, Any]:
        client = self._lifecycle.client
        return {
            "endpoint": client.endpoint,
            "version": client.version,
            "strict_decode": self._lifecycle.strict_decode,
        }

    def __setstate__(self, state: dict[str, Any]) -> None:
        client = TrustStoreClient(
            endpoint=state["endpoint"],
            credential=os.environ.get(TOKEN_ENV_VAR, ""),
            version=state["version"],
        )
        self._lifecycle = CertificateLifecycle(client, strict_decode=state["strict_decode"])

    def create(self, props: dict[str, Any]) -> pulumi.dynamic.CreateResult:
        """Upload the certificate; the trust store must assign it an id.

        Raises:
            DecodeAnomaly: The 201 body carried no id, so the uploaded entry
                cannot be addressed again.
        """
        record = self._lifecycle.create(DesiredCertificate(certificate=props["certificate"]))
        if not record.id:
            raise DecodeAnomaly(
                "Trust store accepted the certificate but returned no id; "
                "the entry must be removed from the trust store by hand."
            )
        return pulumi.dynamic.CreateResult(id_=record.id, outs=_to_outputs(record))

    def read(self, id_: str, props: dict[str, Any]) -> pulumi.dynamic.ReadResult:
        record = self._lifecycle.read(_from_outputs(id_, props))
        return pulumi.dynamic.ReadResult(id_=record.id, outs=_to_outputs(record))

    def diff(
        self, id_: str, olds: dict[str, Any], news: dict[str, Any]
    ) -> pulumi.dynamic.DiffResult:
        """Report a change when the certificate differs; never replace."""
        return pulumi.dynamic.DiffResult(
            changes=olds.get("certificate") != news.get("certificate"),
            replaces=[],
            delete_before_replace=False,
        )

    def update(
        self, id_: str, olds: dict[str, Any], news: dict[str, Any]
    ) -> pulumi.dynamic.UpdateResult:
        record = self._lifecycle.update(
            DesiredCertificate(certificate=news["certificate"]),
            _from_outputs(id_, olds),
        )
        return pulumi.dynamic.UpdateResult(outs=_to_outputs(record))

    def delete(self, id_: str, props: dict[str, Any]) -> None:
        self._lifecycle.delete(_from_outputs(id_, props))


class TrustStoreCertificateArgs:
    """Arguments for a trust store certificate."""

    def __init__(self, certificate: pulumi.Input[str]) -> None:
        self.certificate: pulumi.Input[str] = certificate


class TrustStoreCertificate(pulumi.dynamic.Resource):
    """A certificate entry uploaded to the remote trust store.

    ``certificate`` is the only input. Every other attribute is computed by the
    trust store and the resource ID is the identifier it assigns on upload.
    Changing ``certificate`` after creation has no remote effect.
    """

    certificate: pulumi.Output[str]
    serial_number: pulumi.Output[str]
    status: pulumi.Output[str]
    issuer: pulumi.Output[str]
    signature: pulumi.Output[str]
    uploaded_on: pulumi.Output[str]
    uploaded_at: pulumi.Output[str]
    expires_on: pulumi.Output[str]

    def __init__(
        self,
        name: str,
        args: TrustStoreCertificateArgs,
        client: TrustStoreClient,
        strict_decode: bool = False,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        logger.debug(
            "declaring_trust_store_certificate",
            extra={"resource": name, "url": client.endpoint, "type": RESOURCE_TYPE_NAME},
        )
        super().__init__(
            TrustStoreCertificateProvider(client, strict_decode=strict_decode),
            name,
            {"certificate": args.certificate, **{key: None for key in _COMPUTED_OUTPUTS}},
            opts,
        )

    @property
    def outputs(self) -> CertificateOutputs:
        """Return the resolved certificate outputs."""
        return CertificateOutputs(
            certificate_id=self.id,
            serial_number=self.serial_number,
            status=self.status,
            expires_on=self.expires_on,
        )
