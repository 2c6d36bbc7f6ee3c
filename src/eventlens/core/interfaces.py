from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from eventlens.core.models import RawLog


# ---------------------------------------------------------------------------
# ISignatureLookup
# ---------------------------------------------------------------------------

@runtime_checkable
class ISignatureLookup(Protocol):
    """
    Abstract text-signature database queried by topic hash.

    Domain expectations:
    - It returns every candidate text signature, in the service's own order.
    - An empty list means "no match"; transport or payload problems raise
      `SignatureLookupError`.
    """

    async def lookup(self, hex_signature: str) -> List[str]:
        """
        Return the candidate signatures for a 0x-prefixed hash.

        Implementations:
        - 4byte.directory HTTP client (`FourByteClient`)
        - In-memory fake for testing
        """
        ...


# ---------------------------------------------------------------------------
# ILogsProvider
# ---------------------------------------------------------------------------

@runtime_checkable
class ILogsProvider(Protocol):
    """
    Abstract source of raw logs.

    Domain expectations:
    - It returns RawLog objects already mapped into internal models.
    - It hides the underlying RPC / archive technology.
    """

    async def get_transaction_logs(self, tx_hash: str) -> List[RawLog]:
        """Return every log of a transaction receipt, in log-index order."""
        ...

    async def get_logs(
        self,
        *,
        address: str,
        from_block: int,
        to_block: int,
        topic0s: list[str] | None = None,
    ) -> List[RawLog]:
        """Return the logs emitted by `address` over the inclusive block range."""
        ...
