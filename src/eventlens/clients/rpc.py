"""Lightweight JSON-RPC client for Ethereum-compatible nodes.

This module provides:
- `RPC`: an async client with sane timeouts/connection limits
- Helper utilities to format block numbers and topics

It returns `RawLog` records ready for downstream decoding.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx

from eventlens.core.models import RawLog


class RPCError(RuntimeError):
    """JSON-RPC error payload or missing result."""


def to_hex_block(x: int) -> str:
    """Return a 0x-prefixed hex block number."""
    return hex(x)


def topics_param(topic0s: Sequence[str]) -> list[list[str]]:
    """Format topic0 signatures for eth_getLogs RPC call."""
    return [[t.lower() for t in topic0s]]


class RPC:
    """Minimal async RPC client.

    Parameters
    ----------
    url : str
        RPC endpoint URL.
    timeout_s : int
        Per-operation timeout in seconds (connect/read/write).
    max_connections : int
        Maximum concurrent connections to keep in the pool.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_s: int = 20,
        max_connections: int = 16,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=timeout_s,
                read=timeout_s,
                write=timeout_s,
                pool=max(30, timeout_s * 3),
            ),
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max(1, max_connections // 2),
            ),
            http2=True,
            transport=transport,
        )

    async def _call(self, method: str, params: list[Any]) -> Any:
        r = await self.client.post(
            self.url,
            json={"jsonrpc": "2.0", "id": 1, "method": method, "params": params},
        )
        r.raise_for_status()
        data = r.json()
        if "error" in data:
            e = data["error"]
            raise RPCError(f"RPC error: {e.get('code')} {e.get('message')}")
        return data.get("result")

    async def latest_block(self) -> int:
        """Return the latest block number as an int."""
        return int(await self._call("eth_blockNumber", []), 16)

    async def get_transaction_logs(self, tx_hash: str) -> list[RawLog]:
        """Fetch every log of a transaction receipt."""
        receipt = await self._call("eth_getTransactionReceipt", [tx_hash])
        if receipt is None:
            raise RPCError(f"Transaction receipt for {tx_hash} not found")
        return [RawLog.from_rpc(rl) for rl in receipt.get("logs", [])]

    async def get_logs(
        self,
        *,
        address: str,
        from_block: int,
        to_block: int,
        topic0s: Sequence[str] | None = None,
    ) -> list[RawLog]:
        """Fetch logs for an address (optionally filtered by topic0) within a block range."""
        flt: dict[str, Any] = {
            "address": address.lower(),
            "fromBlock": to_hex_block(from_block),
            "toBlock": to_hex_block(to_block),
        }
        if topic0s:
            flt["topics"] = topics_param(topic0s)
        result = await self._call("eth_getLogs", [flt])
        return [RawLog.from_rpc(rl) for rl in result or []]

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
