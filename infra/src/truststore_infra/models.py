"""Desired and persisted state records for a trust store certificate."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

RECORD_FIELDS: tuple[str, ...] = (
    "id",
    "serial_number",
    "certificate",
    "status",
    "issuer",
    "signature",
    "uploaded_on",
    "uploaded_at",
    "expires_on",
)


class DesiredCertificate(BaseModel):
    """User-declared input: the encoded certificate blob to upload."""

    model_config = ConfigDict(frozen=True)

    certificate: str

    def payload(self) -> dict[str, str]:
        """Return the JSON body sent on create."""
        return {"certificate": self.certificate}


class TrustStoreRecord(BaseModel):
    """Authoritative record produced by the remote service.

    Every field is server computed except ``certificate``, which echoes the
    uploaded blob. Fields the service did not populate stay ``""``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = ""
    serial_number: str = ""
    certificate: str = ""
    status: str = ""
    issuer: str = ""
    signature: str = ""
    uploaded_on: str = ""
    uploaded_at: str = ""
    expires_on: str = ""

    @classmethod
    def from_state(cls, state: dict[str, object]) -> TrustStoreRecord:
        """Rebuild a record from persisted outputs, ignoring unknown keys."""
        return cls(**{k: str(state[k]) for k in RECORD_FIELDS if state.get(k) is not None})

    def to_state(self) -> dict[str, str]:
        """Return the nine-field mapping persisted by the host."""
        return self.model_dump()


class CreatedRecordEnvelope(BaseModel):
    """Wire shape of a successful create response: ``{"result": {...}}``."""

    model_config = ConfigDict(extra="ignore")

    result: TrustStoreRecord
