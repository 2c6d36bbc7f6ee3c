from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from eventlens.core.constants import FOURBYTE_EVENT_SIGNATURES_URL


@dataclass(frozen=True)
class ResolverConfig:
    """Configuration for the signature resolver and its lookup client."""

    url: str = FOURBYTE_EVENT_SIGNATURES_URL
    timeout_s: float = 5.0  # per lookup, seconds
    concurrency: int = 8
    cache_unresolved: bool = False


@dataclass(frozen=True)
class RPCConfig:
    """Configuration for the JSON-RPC client."""

    url: str
    timeout_s: int = 20
    max_connections: int = 16


@dataclass(frozen=True)
class DecodeTxConfig:
    """Configuration for the CLI decode commands."""

    rpc: RPCConfig
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    abi_paths: tuple[Path, ...] = ()
    preload_builtin: bool = True
    json_out: bool = False
    parquet_out: str = ""
