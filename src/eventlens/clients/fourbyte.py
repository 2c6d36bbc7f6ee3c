"""Async client for the 4byte.directory event-signature database.

The service is queried by hex signature and answers

    {"count": 2, "results": [{"text_signature": "Transfer(address,address,uint256)"}, ...]}

Transport failures, non-2xx statuses and malformed payloads are all raised as
`SignatureLookupError`; an empty result is returned as an empty list.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, ValidationError

from eventlens.core.constants import FOURBYTE_EVENT_SIGNATURES_URL

logger = logging.getLogger(__name__)


class SignatureLookupError(RuntimeError):
    """The signature database could not be queried or answered garbage."""


class TextSignature(BaseModel):
    text_signature: str


class SignatureLookupResponse(BaseModel):
    count: int
    results: list[TextSignature] = []


class FourByteClient:
    """Minimal async 4byte.directory client.

    Parameters
    ----------
    url : str
        Event-signatures endpoint URL.
    timeout_s : float
        Per-operation timeout in seconds (connect/read/write/pool).
    transport : httpx.AsyncBaseTransport | None
        Optional transport override (tests use `httpx.MockTransport`).
    """

    def __init__(
        self,
        url: str = FOURBYTE_EVENT_SIGNATURES_URL,
        *,
        timeout_s: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_s),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def lookup(self, hex_signature: str) -> list[str]:
        """Return candidate text signatures for `hex_signature`, in service order."""
        params = {"format": "json", "hex_signature": hex_signature}
        try:
            r = await self.client.get(self.url, params=params)
            r.raise_for_status()
            payload = SignatureLookupResponse.model_validate(r.json())
        except httpx.HTTPError as e:
            raise SignatureLookupError(f"lookup of {hex_signature} failed: {type(e).__name__}: {e}") from e
        except (ValidationError, ValueError) as e:
            raise SignatureLookupError(f"lookup of {hex_signature} returned an invalid payload: {e}") from e

        if payload.count <= 0:
            return []
        logger.debug("4byte returned %d candidate(s) for %s", payload.count, hex_signature)
        return [res.text_signature for res in payload.results]

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
