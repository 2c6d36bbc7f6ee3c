from __future__ import annotations

from .core.constants import APPROVAL_T0, BUILTIN_EVENT_SIGNATURES, TRANSFER_T0, UNKNOWN_EVENT
from .core.config import ResolverConfig
from .core.models import DecodedColumns, DecodedLog, EventParam, RawLog
from .clients.fourbyte import FourByteClient, SignatureLookupError
from .decoding.assembler import LogAssembler
from .decoding.field_names import FieldNameInferrer
from .decoding.resolver import SignatureResolver

__all__ = [
    "LogAssembler",
    "FieldNameInferrer",
    "SignatureResolver",
    "FourByteClient",
    "SignatureLookupError",
    "ResolverConfig",
    "RawLog",
    "DecodedLog",
    "DecodedColumns",
    "EventParam",
    "TRANSFER_T0",
    "APPROVAL_T0",
    "BUILTIN_EVENT_SIGNATURES",
    "UNKNOWN_EVENT",
]
