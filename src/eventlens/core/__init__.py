"""Core data models, configurations, and constants.

This package provides:
- Data models (RawLog, ParsedSignature, EventParam, DecodedLog, DecodedColumns)
- Configuration classes (ResolverConfig, RPCConfig, DecodeTxConfig)
- Event topic constants and built-in signatures
"""

from eventlens.core.config import DecodeTxConfig, ResolverConfig, RPCConfig
from eventlens.core.models import DecodedColumns, DecodedLog, EventParam, ParsedSignature, RawLog

__all__ = [
    "DecodeTxConfig",
    "ResolverConfig",
    "RPCConfig",
    "DecodedColumns",
    "DecodedLog",
    "EventParam",
    "ParsedSignature",
    "RawLog",
]
