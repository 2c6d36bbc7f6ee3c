"""Field-name inference for positional event parameters.

Resolution order (first success wins):

1. Named signature: the full signature behind the topic hash carries names.
2. Known-event table: event name + exact type fingerprint.
3. Heuristic synthesis from position, type, and event-name keywords.

Names are best-effort labels, never a normative schema.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from eventlens.decoding.known_events import KNOWN_EVENT_FIELD_NAMES, TYPE_BASED_FIELD_NAMES, FieldNameTable
from eventlens.decoding.resolver import SignatureResolver
from eventlens.decoding.signature import parse_names
from eventlens.decoding.values import is_integer_type

_SENDING = ("Transfer", "Send")
_RECEIVING = ("Receive",)
_MOVING_FUNDS = ("Transfer", "Send", "Withdraw", "Deposit")


def param_type_fingerprint(param_types: Sequence[str]) -> str:
    return ",".join(param_types)


def unique_name(base: str, used: set[str] | Sequence[str]) -> str:
    """Return `base`, or `base1`, `base2`, ... whichever is not in `used`."""
    if base not in used:
        return base
    suffix = 1
    while f"{base}{suffix}" in used:
        suffix += 1
    return f"{base}{suffix}"


def lookup_known_field_names(
    event_name: str,
    param_types: Sequence[str],
    table: FieldNameTable = KNOWN_EVENT_FIELD_NAMES,
) -> list[str] | None:
    shapes = table.get(event_name)
    if not shapes:
        return None
    names = shapes.get(param_type_fingerprint(param_types))
    if names is None or len(names) != len(param_types):
        return None
    return list(names)


def _mentions(event_name: str, words: Sequence[str]) -> bool:
    return any(w in event_name for w in words)


def _smart_name(i: int, typ: str, event_name: str, param_types: Sequence[str],
                type_names: Mapping[str, str]) -> str:
    last = len(param_types) - 1

    if i == 0 and typ == "address":
        if _mentions(event_name, _SENDING):
            return "from"
        if _mentions(event_name, _RECEIVING):
            return "to"
        return "user"

    if i == 1 and typ == "address" and param_types[0] == "address":
        return "to" if _mentions(event_name, _SENDING) else "recipient"

    if i >= last - 1 and is_integer_type(typ) and _mentions(event_name, _MOVING_FUNDS):
        return "amount"

    base = type_names.get(typ)
    if base is not None:
        return base

    return f"param{i}"


def synthesize_field_names(
    event_name: str,
    param_types: Sequence[str],
    type_names: Mapping[str, str] = TYPE_BASED_FIELD_NAMES,
) -> list[str]:
    """Derive field names from position, type, and event-name keywords.

    Rules per parameter, top to bottom (first match wins); every result is
    suffixed with 1, 2, ... when already taken earlier in the list.
    """
    names: list[str] = []
    for i, typ in enumerate(param_types):
        names.append(unique_name(_smart_name(i, typ, event_name, param_types, type_names), names))
    return names


class FieldNameInferrer:
    """Three-tier field-name inference with a per-signature name cache.

    The cache maps a full (named) signature to its parameter names and is
    only filled when tier 1 succeeds.
    """

    def __init__(
        self,
        resolver: SignatureResolver | None = None,
        *,
        known_events: FieldNameTable = KNOWN_EVENT_FIELD_NAMES,
        type_names: Mapping[str, str] = TYPE_BASED_FIELD_NAMES,
    ) -> None:
        self._resolver = resolver
        self._known_events = known_events
        self._type_names = type_names
        self._names_cache: dict[str, tuple[str, ...]] = {}

    def cached_names(self, full_signature: str) -> list[str] | None:
        names = self._names_cache.get(full_signature)
        return list(names) if names is not None else None

    async def _from_named_signature(self, param_types: Sequence[str], topic_hash: str) -> list[str] | None:
        if self._resolver is None:
            return None
        full_signature = await self._resolver.resolve(topic_hash)
        if not full_signature:
            return None

        cached = self._names_cache.get(full_signature)
        if cached is not None and len(cached) == len(param_types):
            return list(cached)

        names = parse_names(full_signature)
        if names is not None and len(names) == len(param_types):
            self._names_cache[full_signature] = tuple(names)
            return names
        return None

    async def infer(
        self,
        event_name: str,
        param_types: Sequence[str],
        topic_hash: str | None = None,
    ) -> list[str]:
        """Return one name per parameter type."""
        if topic_hash:
            names = await self._from_named_signature(param_types, topic_hash)
            if names is not None:
                return names

        names = lookup_known_field_names(event_name, param_types, self._known_events)
        if names is not None:
            return names

        return synthesize_field_names(event_name, param_types, self._type_names)
