"""Create/Read/Update/Delete reconciliation of a trust store certificate."""

from __future__ import annotations

import json
import logging

import pydantic

from truststore_infra.client import TrustStoreClient
from truststore_infra.errors import DecodeAnomaly, RemoteRejected
from truststore_infra.models import (
    RECORD_FIELDS,
    CreatedRecordEnvelope,
    DesiredCertificate,
    TrustStoreRecord,
)

logger: logging.Logger = logging.getLogger(__name__)

CREATED_STATUS: int = 201
DELETED_STATUS: int = 200


def _salvage_record(body: str) -> TrustStoreRecord:
    """Populate whatever string fields survive in a malformed ``result`` object."""
    try:
        document = json.loads(body)
    except ValueError:
        return TrustStoreRecord()
    result = document.get("result") if isinstance(document, dict) else None
    if not isinstance(result, dict):
        return TrustStoreRecord()
    return TrustStoreRecord(
        **{k: v for k, v in result.items() if k in RECORD_FIELDS and isinstance(v, str)}
    )


class CertificateLifecycle:
    """Reconciles one certificate entry against the remote trust store.

    The client is injected and never mutated; the controller keeps no state
    between calls. The host is expected to serialize calls per certificate.
    """

    def __init__(self, client: TrustStoreClient, strict_decode: bool = False) -> None:
        """Initialise the controller.

        Args:
            client: Endpoint and credential used for every exchange.
            strict_decode: Raise ``DecodeAnomaly`` when a 201 body does not
                decode, instead of returning a partially populated record.
        """
        self._client: TrustStoreClient = client
        self._strict_decode: bool = strict_decode

    @property
    def client(self) -> TrustStoreClient:
        """Return the injected trust store client."""
        return self._client

    @property
    def strict_decode(self) -> bool:
        """Return whether malformed 201 bodies are raised as ``DecodeAnomaly``."""
        return self._strict_decode

    def create(self, desired: DesiredCertificate) -> TrustStoreRecord:
        """Upload ``desired`` and return the record assigned by the service.

        The returned ``certificate`` is the uploaded blob, whatever the echo.

        Raises:
            TransportError: The POST did not complete.
            RemoteRejected: The service answered with anything but 201.
            DecodeAnomaly: Only with ``strict_decode``, on a malformed 201 body.
        """
        logger.debug("certificate_create_requested", extra={"url": self._client.endpoint})
        response = self._client.request("POST", json=desired.payload())
        if response.status_code != CREATED_STATUS:
            logger.warning(
                "certificate_rejected",
                extra={"operation": "create", "status_code": response.status_code},
            )
            raise RemoteRejected("create", response.status_code, response.text)

        record = self._decode_created(response.text).model_copy(
            update={"certificate": desired.certificate}
        )
        logger.info(
            "certificate_created",
            extra={"id": record.id, "status": record.status, "expires_on": record.expires_on},
        )
        return record

    def read(self, state: TrustStoreRecord) -> TrustStoreRecord:
        """Return ``state`` unchanged: the last known record is trusted as-is."""
        return state

    def update(self, desired: DesiredCertificate, state: TrustStoreRecord) -> TrustStoreRecord:
        """Return ``state`` unchanged.

        The trust store has no update operation and certificates are write-once,
        so a changed ``certificate`` is accepted but never sent.
        """
        if desired.certificate != state.certificate:
            logger.warning(
                "certificate_update_ignored",
                extra={"id": state.id, "reason": "certificates are write-once"},
            )
        return state

    def delete(self, state: TrustStoreRecord) -> None:
        """Remove the remote certificate addressed by ``state.id``.

        Raises:
            TransportError: The DELETE did not complete.
            RemoteRejected: The service answered with anything but 200.
        """
        url = self._client.certificate_url(state.id)
        logger.debug("certificate_delete_requested", extra={"id": state.id, "url": url})
        response = self._client.request("DELETE", url)
        if response.status_code != DELETED_STATUS:
            logger.warning(
                "certificate_rejected",
                extra={"operation": "delete", "id": state.id, "status_code": response.status_code},
            )
            raise RemoteRejected("delete", response.status_code, response.text)
        logger.info("certificate_deleted", extra={"id": state.id})

    def _decode_created(self, body: str) -> TrustStoreRecord:
        try:
            return CreatedRecordEnvelope.model_validate_json(body).result
        except pydantic.ValidationError as exc:
            if self._strict_decode:
                raise DecodeAnomaly(str(exc)) from exc
            logger.warning(
                "certificate_decode_anomaly",
                extra={"errors": exc.error_count(), "body_length": len(body)},
            )
            return _salvage_record(body)
