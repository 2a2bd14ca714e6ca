"""Shared fixtures: a trust store client and a real PEM certificate."""
from __future__ import annotations

import datetime
from collections.abc import Callable

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from truststore_infra.client import TrustStoreClient

TRUST_STORE_URL = "https://trust-store.example.com/api/v1/certificates"
TOKEN = "s3cr3t-token"


def _generate_self_signed() -> str:
    """Return a short-lived self-signed PEM certificate."""
    private_key = ec.generate_private_key(ec.SECP256R1())
    subject = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "trust-store-test")])
    now = datetime.datetime.now(tz=datetime.UTC)
    cert = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(subject)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(private_key, hashes.SHA256())
    )
    return cert.public_bytes(serialization.Encoding.PEM).decode("ascii")


@pytest.fixture(scope="session")
def pem_certificate() -> str:
    return _generate_self_signed()


@pytest.fixture
def client() -> TrustStoreClient:
    return TrustStoreClient(endpoint=TRUST_STORE_URL, credential=TOKEN)


def _record_body(certificate: str, **overrides: str) -> dict[str, dict[str, str]]:
    """Build a ``{"result": {...}}`` body as returned by a successful upload."""
    result = {
        "id": "abc123",
        "serial_number": "SN1",
        "certificate": certificate,
        "status": "active",
        "issuer": "CN=trust-store-test",
        "signature": "sha256WithECDSA",
        "uploaded_on": "2026-10-19",
        "uploaded_at": "05:21:00",
        "expires_on": "2026-10-20",
    }
    result.update(overrides)
    return {"result": result}


@pytest.fixture
def record_body() -> Callable[..., dict[str, dict[str, str]]]:
    return _record_body
