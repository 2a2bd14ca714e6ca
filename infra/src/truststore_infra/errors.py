"""Failure taxonomy for trust store lifecycle operations."""

from __future__ import annotations


class TrustStoreError(Exception):
    """Base class for every error raised by a lifecycle operation."""


class TransportError(TrustStoreError):
    """The HTTP exchange itself failed (DNS, connection, timeout, unreadable body)."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail: str = detail


class RemoteRejected(TrustStoreError):
    """The exchange completed but the remote service declined the request.

    The raw response body is kept verbatim; it is usually human-readable error
    detail and not necessarily JSON.
    """

    def __init__(self, operation: str, status_code: int, body: str) -> None:
        super().__init__(body)
        self.operation: str = operation
        self.status_code: int = status_code
        self.body: str = body


class DecodeAnomaly(TrustStoreError):
    """A success-status response body did not decode into the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail: str = detail
