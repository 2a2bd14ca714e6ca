"""Addressing and bearer authentication for the remote trust store API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from truststore_infra.errors import TransportError

logger: logging.Logger = logging.getLogger(__name__)

PROVIDER_TYPE_NAME: str = "opaas_trust_store"
DEFAULT_VERSION: str = "dev"


class TrustStoreClient(BaseModel):
    """Immutable endpoint + credential pair shared by every lifecycle call.

    No validation of URL well-formedness or credential shape is done here;
    the remote service rejects what it does not accept. Requests are one-shot
    ``httpx`` calls: no retry, no cache, no pooling.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(min_length=1)
    credential: str = Field(repr=False)
    version: str = DEFAULT_VERSION

    @property
    def headers(self) -> dict[str, str]:
        """Headers attached to every request."""
        return {
            "Authorization": f"Bearer {self.credential}",
            "User-Agent": f"{PROVIDER_TYPE_NAME.replace('_', '-')}/{self.version}",
        }

    def certificate_url(self, certificate_id: str) -> str:
        """Return the address of a stored certificate: ``{endpoint}/{id}``."""
        return f"{self.endpoint}/{certificate_id}"

    def request(
        self,
        method: str,
        url: str | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """Issue one authenticated request and return the fully read response.

        Raises:
            TransportError: The exchange failed before a complete, readable
                response (connection, DNS, timeout, redirect loop, invalid URL
                or an undecodable body).
        """
        target = self.endpoint if url is None else url
        try:
            return httpx.request(method, target, json=json, headers=self.headers)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning(
                "trust_store_request_failed",
                extra={"method": method, "url": target, "error": str(exc)},
            )
            raise TransportError(str(exc) or type(exc).__name__) from exc
