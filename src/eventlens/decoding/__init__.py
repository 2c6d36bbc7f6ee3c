"""Event-log decoding and semantic field naming.

This package provides:
- Signature resolution by topic hash (SignatureResolver)
- Bracket-aware signature parsing (parse_types, parse_names)
- Three-tier field-name inference (FieldNameInferrer)
- Indexed/data value decoding (decode_indexed, decode_non_indexed)
- Log assembly into DecodedLog records (LogAssembler)
"""

from eventlens.decoding.assembler import LogAssembler
from eventlens.decoding.field_names import (
    FieldNameInferrer,
    lookup_known_field_names,
    param_type_fingerprint,
    synthesize_field_names,
)
from eventlens.decoding.known_events import KNOWN_EVENT_FIELD_NAMES, TYPE_BASED_FIELD_NAMES
from eventlens.decoding.resolver import ResolverStats, SignatureResolver
from eventlens.decoding.signature import event_name, parse_names, parse_signature, parse_types, split_params
from eventlens.decoding.values import decode_indexed, decode_non_indexed

__all__ = [
    "LogAssembler",
    "FieldNameInferrer",
    "lookup_known_field_names",
    "param_type_fingerprint",
    "synthesize_field_names",
    "KNOWN_EVENT_FIELD_NAMES",
    "TYPE_BASED_FIELD_NAMES",
    "ResolverStats",
    "SignatureResolver",
    "event_name",
    "parse_names",
    "parse_signature",
    "parse_types",
    "split_params",
    "decode_indexed",
    "decode_non_indexed",
]
